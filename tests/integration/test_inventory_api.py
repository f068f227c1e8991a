# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for inventory endpoints."""

import pytest

PRODUCT = {"name": "Denim Jacket", "sku": "DJ-001", "quantity": 10, "alert_stock": 3}


@pytest.fixture
def product(staff_client):
    response = staff_client.post("/api/v1/inventory", json=PRODUCT)
    assert response.status_code == 201
    return response.json()


def test_requires_inventory_flag(client, make_user, login_as):
    make_user("cashier@example.com", role="staff", permissions={"orders": True})
    login_as("cashier@example.com")
    assert client.get("/api/v1/inventory").status_code == 403


def test_create_and_list(staff_client, staff_user, product):
    assert product["quantity"] == 10
    assert product["created_by"]["email"] == staff_user.email

    listed = staff_client.get("/api/v1/inventory", params={"q": "denim"}).json()
    assert [p["sku"] for p in listed] == ["DJ-001"]


def test_duplicate_sku(staff_client, product):
    response = staff_client.post("/api/v1/inventory", json=PRODUCT)
    assert response.status_code == 400


def test_adjust_stock(staff_client, product):
    response = staff_client.post(
        f"/api/v1/inventory/{product['id']}/adjust",
        json={"quantity_change": -8, "reason": "Sold at pop-up"},
    )
    assert response.status_code == 200
    assert response.json()["quantity"] == 2

    notifications = staff_client.get("/api/v1/notifications").json()
    assert [n["type"] for n in notifications] == ["low_stock"]


def test_adjust_below_zero(staff_client, product):
    response = staff_client.post(
        f"/api/v1/inventory/{product['id']}/adjust", json={"quantity_change": -11}
    )
    assert response.status_code == 400


def test_update_and_delete(staff_client, product):
    url = f"/api/v1/inventory/{product['id']}"
    response = staff_client.put(url, json={"retail_price": 450.0})
    assert response.json()["retail_price"] == 450.0

    assert staff_client.delete(url).status_code == 204
    assert staff_client.get(url).status_code == 404
    assert staff_client.delete(url).status_code == 404


def test_order_sale_and_return(staff_client, product):
    url = f"/api/v1/inventory/{product['id']}"
    sold = staff_client.post(f"{url}/sold", json={"quantity": 4, "order_id": "order-123"})
    assert sold.status_code == 200
    assert sold.json()["quantity"] == 6

    returned = staff_client.post(
        f"{url}/returned", json={"quantity": 4, "order_id": "order-123"}
    )
    assert returned.json()["quantity"] == 10


def test_order_sale_beyond_stock(staff_client, product):
    response = staff_client.post(
        f"/api/v1/inventory/{product['id']}/sold",
        json={"quantity": 11, "order_id": "order-123"},
    )
    assert response.status_code == 400


def test_order_quantity_must_be_positive(staff_client, product):
    response = staff_client.post(
        f"/api/v1/inventory/{product['id']}/sold",
        json={"quantity": 0, "order_id": "order-123"},
    )
    assert response.status_code == 422
