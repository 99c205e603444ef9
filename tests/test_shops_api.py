import pytest

from shopkeeper.core.config import settings


def test_create_shop(client):
    response = client.post(
        "/shops",
        json={
            "name": "Sharma General Store",
            "name_hindi": "शर्मा जनरल स्टोर",
            "owner_name": "Ravi Sharma",
            "phone": "9876543210",
            "upi_id": "sharmastore@ybl",
        },
    )

    assert response.status_code == 201
    shop = response.json()
    assert shop["language"] == "en"
    assert shop["upi_id"] == "sharmastore@ybl"


def test_create_shop_with_invalid_upi_id(client):
    response = client.post(
        "/shops",
        json={"name": "Gupta Kirana", "owner_name": "Amit Gupta", "phone": "9000000000", "upi_id": "not-a-vpa"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid UPI ID"


def test_current_shop(client, shop, headers):
    response = client.get("/shops/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["id"] == shop.id
    assert response.json()["name"] == "Sharma General Store"


def test_update_current_shop(client, headers):
    response = client.put(
        "/shops/me",
        json={"upi_id": "sharma@okaxis", "gst_number": "07AAACS1234A1Z5", "language": "hi"},
        headers=headers,
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["upi_id"] == "sharma@okaxis"
    assert updated["language"] == "hi"
    assert updated["owner_name"] == "Ravi Sharma"


def test_update_with_invalid_upi_id_is_rejected(client, headers):
    response = client.put("/shops/me", json={"upi_id": "sharma@"}, headers=headers)

    assert response.status_code == 400
    assert client.get("/shops/me", headers=headers).json()["upi_id"] == "sharmastore@ybl"


def test_default_shop_is_used_without_header(client, shop, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_SHOP_ID", shop.id)

    response = client.get("/shops/me")

    assert response.status_code == 200
    assert response.json()["id"] == shop.id


def test_header_wins_over_default_shop(client, shop, make_shop, monkeypatch):
    other = make_shop(name="Gupta Kirana", upi_id=None)
    monkeypatch.setattr(settings, "DEFAULT_SHOP_ID", shop.id)

    response = client.get("/shops/me", headers={"X-Shop-Id": str(other.id)})

    assert response.json()["id"] == other.id


def test_non_numeric_shop_header_is_a_400(client, shop):
    response = client.get("/shops/me", headers={"X-Shop-Id": "sharma"})

    assert response.status_code == 400


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200


@pytest.mark.parametrize("body", [{"name": ""}, {"owner_name": ""}, {"phone": ""}])
def test_blank_shop_fields_are_rejected(client, headers, body):
    response = client.put("/shops/me", json=body, headers=headers)

    assert response.status_code == 400
    assert client.get("/shops/me", headers=headers).json()["name"] == "Sharma General Store"
