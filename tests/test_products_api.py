from decimal import Decimal

import pytest
from fastapi import HTTPException

from shopkeeper.core.config import settings
from shopkeeper.models.product import Product
from shopkeeper.routers.products import _commit_product


def _create(client, headers, **fields):
    body = {"name": "Basmati Rice 1kg", "price": "50.00", "stock": "10", "min_stock": "3"}
    body.update(fields)
    return client.post("/products", json=body, headers=headers)


def test_create_and_get_product(client, headers):
    response = _create(client, headers, unit="kg", name_hindi="बासमती चावल")

    assert response.status_code == 201
    product = response.json()
    assert product["price"] == "50.00"
    assert Decimal(product["stock"]) == Decimal("10")
    assert product["unit"] == "kg"
    assert product["is_low_stock"] is False

    fetched = client.get(f"/products/{product['id']}", headers=headers).json()
    assert fetched["name_hindi"] == "बासमती चावल"


def test_duplicate_name_in_same_shop_is_a_conflict(client, headers):
    _create(client, headers)

    response = _create(client, headers)

    assert response.status_code == 409


def test_same_name_in_another_shop_is_allowed(client, headers, make_shop):
    other = make_shop(name="Gupta Kirana", upi_id=None)

    _create(client, headers)
    response = _create(client, {"X-Shop-Id": str(other.id)})

    assert response.status_code == 201


def test_negative_price_is_a_400(client, headers):
    response = _create(client, headers, price="-1.00")

    assert response.status_code == 400


def test_product_with_category(client, headers):
    category = client.post(
        "/categories", json={"name": "Grains", "name_hindi": "अनाज"}, headers=headers
    ).json()

    response = _create(client, headers, category_id=category["id"])

    assert response.status_code == 201
    assert response.json()["category_id"] == category["id"]


def test_product_with_unknown_category_is_a_400(client, headers):
    response = _create(client, headers, category_id=321)

    assert response.status_code == 400


def test_update_product_does_not_touch_stock(client, headers):
    product = _create(client, headers).json()

    response = client.put(
        f"/products/{product['id']}",
        json={"price": "55.00", "min_stock": "12", "stock": "999"},
        headers=headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["price"] == "55.00"
    assert Decimal(updated["stock"]) == Decimal("10")
    assert updated["is_low_stock"] is True


def test_rename_to_existing_name_is_a_conflict(client, headers):
    _create(client, headers)
    other = _create(client, headers, name="Toor Dal 1kg").json()

    response = client.put(
        f"/products/{other['id']}", json={"name": "Basmati Rice 1kg"}, headers=headers
    )

    assert response.status_code == 409


def test_delete_product_without_history(client, headers):
    product = _create(client, headers).json()

    assert client.delete(f"/products/{product['id']}", headers=headers).status_code == 204
    assert client.get(f"/products/{product['id']}", headers=headers).status_code == 404


def test_delete_product_with_stock_history_is_a_conflict(client, headers):
    product = _create(client, headers).json()
    client.put(f"/products/{product['id']}/stock", json={"quantity": "5"}, headers=headers)

    response = client.delete(f"/products/{product['id']}", headers=headers)

    assert response.status_code == 409


# =========================================================
# STOCK ADJUSTMENTS
# =========================================================


def test_stock_adjustment_records_signed_movements(client, headers):
    product = _create(client, headers).json()
    url = f"/products/{product['id']}"

    restock = client.put(f"{url}/stock", json={"quantity": "24", "reason": "purchase"}, headers=headers)
    damage = client.put(
        f"{url}/stock",
        json={"quantity": "-1.5", "reason": "damage", "notes": "Torn bag"},
        headers=headers,
    )

    assert restock.status_code == 200
    assert damage.status_code == 200
    assert Decimal(damage.json()["stock"]) == Decimal("32.5")

    movements = client.get(f"{url}/movements", headers=headers).json()
    assert [(m["type"], Decimal(m["quantity"]), m["reason"]) for m in movements] == [
        ("out", Decimal("-1.5"), "damage"),
        ("in", Decimal("24"), "purchase"),
    ]
    assert movements[0]["notes"] == "Torn bag"
    assert movements[1]["notes"] == "Manual stock adjustment"


def test_zero_stock_adjustment_is_a_400(client, headers):
    product = _create(client, headers).json()

    response = client.put(f"/products/{product['id']}/stock", json={"quantity": "0"}, headers=headers)

    assert response.status_code == 400


def test_stock_adjustment_below_zero_when_guarded(client, headers, monkeypatch):
    monkeypatch.setattr(settings, "ALLOW_NEGATIVE_STOCK", False)
    product = _create(client, headers).json()

    response = client.put(f"/products/{product['id']}/stock", json={"quantity": "-11"}, headers=headers)

    assert response.status_code == 409
    assert client.get(f"/products/{product['id']}/movements", headers=headers).json() == []
    fetched = client.get(f"/products/{product['id']}", headers=headers).json()
    assert Decimal(fetched["stock"]) == Decimal("10")


def test_stock_adjustment_for_unknown_product_is_a_404(client, headers):
    response = client.put("/products/77/stock", json={"quantity": "1"}, headers=headers)

    assert response.status_code == 404


def test_order_movements_show_up_in_product_history(client, headers):
    product = _create(client, headers).json()
    client.post(
        "/orders",
        json={
            "order": {"order_number": "ORD-9", "total_amount": "150.00"},
            "items": [
                {"product_id": product["id"], "quantity": "3", "unit_price": "50.00", "total_price": "150.00"},
            ],
        },
        headers=headers,
    )

    movements = client.get(f"/products/{product['id']}/movements", headers=headers).json()

    assert len(movements) == 1
    assert movements[0]["reason"] == "sale"
    assert Decimal(movements[0]["quantity"]) == Decimal("-3")
    assert movements[0]["order_id"] is not None


# =========================================================
# CATEGORIES
# =========================================================


def test_category_crud(client, headers):
    created = client.post("/categories", json={"name": "Snacks"}, headers=headers).json()

    updated = client.put(
        f"/categories/{created['id']}", json={"name_hindi": "नाश्ता"}, headers=headers
    ).json()
    assert updated["name"] == "Snacks"
    assert updated["name_hindi"] == "नाश्ता"

    assert [c["name"] for c in client.get("/categories", headers=headers).json()] == ["Snacks"]

    assert client.delete(f"/categories/{created['id']}", headers=headers).status_code == 204
    assert client.get("/categories", headers=headers).json() == []


def test_deleting_a_category_keeps_its_products(client, headers):
    category = client.post("/categories", json={"name": "Grains"}, headers=headers).json()
    product = _create(client, headers, category_id=category["id"]).json()

    client.delete(f"/categories/{category['id']}", headers=headers)

    fetched = client.get(f"/products/{product['id']}", headers=headers).json()
    assert fetched["category_id"] is None


def test_duplicate_name_that_slips_past_the_lookup_is_a_conflict(db, shop, make_product):
    make_product("Basmati Rice 1kg")
    db.add(Product(name="Basmati Rice 1kg", price=Decimal("50.00"), shop_id=shop.id))

    with pytest.raises(HTTPException) as exc_info:
        _commit_product(db)

    assert exc_info.value.status_code == 409
    assert db.query(Product).count() == 1


# =========================================================
# BLANK NAMES
# =========================================================


def test_blank_product_name_is_rejected(client, headers):
    product = _create(client, headers).json()

    response = client.put(f"/products/{product['id']}", json={"name": ""}, headers=headers)

    assert response.status_code == 400
    assert client.get(f"/products/{product['id']}", headers=headers).json()["name"] == "Basmati Rice 1kg"


def test_blank_category_name_is_rejected(client, headers):
    category = client.post("/categories", json={"name": "Snacks"}, headers=headers).json()

    response = client.put(f"/categories/{category['id']}", json={"name": ""}, headers=headers)

    assert response.status_code == 400
