from datetime import date, datetime
from decimal import Decimal

import pytest

from shopkeeper.models.transaction import Transaction
from shopkeeper.services.reports import daily_sales, low_stock_products

SALES_DAY = date(2026, 3, 14)


@pytest.fixture
def ledger(db, shop, make_shop):
    other_shop = make_shop(name="Gupta Kirana", upi_id=None)

    def entry(amount, method, created_at, type="sale", shop_id=None):
        return Transaction(
            shop_id=shop_id or shop.id,
            type=type,
            amount=Decimal(amount),
            payment_method=method,
            created_at=created_at,
        )

    db.add_all(
        [
            entry("100.00", "upi", datetime(2026, 3, 14, 9, 15)),
            entry("250.50", "cash", datetime(2026, 3, 14, 13, 0)),
            entry("40.00", "cash", datetime(2026, 3, 14, 23, 59, 59, 999000)),
            # outside the day window
            entry("999.00", "cash", datetime(2026, 3, 15, 0, 0, 0)),
            entry("70.00", "upi", datetime(2026, 3, 13, 23, 59, 59, 999000)),
            # not a sale
            entry("500.00", "upi", datetime(2026, 3, 14, 11, 0), type="purchase"),
            entry("35.00", "cash", datetime(2026, 3, 14, 12, 0), type="expense"),
            # another shop
            entry("80.00", "upi", datetime(2026, 3, 14, 10, 0), shop_id=other_shop.id),
        ]
    )
    db.commit()


def test_daily_sales_aggregate(db, shop, ledger):
    result = daily_sales(db, shop.id, SALES_DAY)

    assert result == {
        "day": SALES_DAY,
        "total": Decimal("390.50"),
        "upi_total": Decimal("100.00"),
        "count": 3,
    }


def test_day_window_starts_at_midnight(db, shop, ledger):
    result = daily_sales(db, shop.id, date(2026, 3, 15))

    assert result["total"] == Decimal("999.00")
    assert result["count"] == 1
    assert result["upi_total"] == Decimal("0.00")


def test_empty_day_reports_zeros(db, shop):
    result = daily_sales(db, shop.id, SALES_DAY)

    assert result["total"] == Decimal("0.00")
    assert result["upi_total"] == Decimal("0.00")
    assert result["count"] == 0


def test_daily_sales_endpoint(client, headers, ledger):
    response = client.get("/reports/daily-sales", params={"day": "2026-03-14"}, headers=headers)

    assert response.status_code == 200
    assert response.json() == {
        "day": "2026-03-14",
        "total": "390.50",
        "upi_total": "100.00",
        "count": 3,
    }


def test_daily_sales_endpoint_rejects_bad_dates(client, headers):
    response = client.get("/reports/daily-sales", params={"day": "14/03/2026"}, headers=headers)

    assert response.status_code == 400


@pytest.mark.parametrize(
    "stock, min_stock, expected",
    [
        ("5", "10", True),
        ("10", "10", True),
        ("11", "10", False),
        ("-1", "0", True),
        ("0.001", "0", False),
    ],
)
def test_low_stock_predicate(make_product, stock, min_stock, expected):
    product = make_product("Toor Dal 1kg", stock=stock, min_stock=min_stock)

    assert product.is_low_stock is expected


def test_low_stock_query_uses_current_stock(db, shop, make_product):
    make_product("Atta 5kg", stock="5", min_stock="10")
    make_product("Salt 1kg", stock="10", min_stock="10")
    make_product("Ghee 500ml", stock="11", min_stock="10")

    names = [p.name for p in low_stock_products(db, shop.id)]

    assert names == ["Atta 5kg", "Salt 1kg"]


def test_low_stock_endpoint(client, headers, make_product):
    make_product("Atta 5kg", stock="5", min_stock="10")
    make_product("Ghee 500ml", stock="11", min_stock="10")

    response = client.get("/products/low-stock", headers=headers)

    assert response.status_code == 200
    assert [p["name"] for p in response.json()] == ["Atta 5kg"]
    assert response.json()[0]["is_low_stock"] is True


def test_dashboard_reflects_todays_paid_orders(client, headers, make_product):
    oil = make_product("Mustard Oil 1L", price="180.00", stock="3", min_stock="2")
    make_product("Biscuits", price="10.00", stock="50", min_stock="5")

    for method, number in (("upi", "ORD-1"), ("cash", "ORD-2")):
        client.post(
            "/orders",
            json={
                "order": {
                    "order_number": number,
                    "payment_status": "paid",
                    "payment_method": method,
                    "total_amount": "180.00",
                },
                "items": [
                    {"product_id": oil.id, "quantity": "1", "unit_price": "180.00", "total_price": "180.00"},
                ],
            },
            headers=headers,
        )

    stats = client.get("/reports/dashboard", headers=headers).json()

    assert stats == {
        "today_sales": "360.00",
        "orders_count": 2,
        "low_stock_count": 1,
        "upi_collection": "180.00",
    }
