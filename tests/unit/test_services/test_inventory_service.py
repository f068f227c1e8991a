# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for inventory_service."""

import uuid

import pytest

from thriftersfind.models import InventoryLog, Notification
from thriftersfind.schemas.product import ProductCreate, ProductUpdate
from thriftersfind.services import inventory_service, seed_service
from thriftersfind.services.inventory_service import (
    DuplicateSkuError,
    InsufficientStockError,
    ProductNotFoundError,
)


def create(db_session, user=None, **overrides):
    data = {"name": "Denim Jacket", "sku": "DJ-001", "quantity": 10}
    data.update(overrides)
    return inventory_service.create_product(db_session, ProductCreate(**data), user)


def logs_for(db_session, product):
    return db_session.query(InventoryLog).filter(InventoryLog.product_id == product.id).all()


class TestCreateProduct:
    def test_logs_opening_stock(self, db_session, staff_user):
        product = create(db_session, staff_user)

        [log] = logs_for(db_session, product)
        assert log.action == "STOCK_IN"
        assert log.previous_stock == 0
        assert log.new_stock == 10
        assert log.quantity_change == 10
        assert log.reason == "Initial stock"
        assert log.performed_by["email"] == staff_user.email
        assert product.created_by["uid"] == str(staff_user.id)

    def test_duplicate_sku_rejected(self, db_session):
        create(db_session)
        with pytest.raises(DuplicateSkuError):
            create(db_session, name="Another Jacket")

    def test_system_actor_without_user(self, db_session):
        product = create(db_session)
        [log] = logs_for(db_session, product)
        assert log.performed_by == {"uid": "system", "name": "System"}
        assert log.user_id is None


class TestUpdateProduct:
    def test_quantity_change_logged_as_adjustment(self, db_session, staff_user):
        product = create(db_session, staff_user)

        inventory_service.update_product(
            db_session, product.id, ProductUpdate(quantity=7), staff_user
        )

        adjustments = [log for log in logs_for(db_session, product) if log.action == "ADJUSTMENT"]
        assert len(adjustments) == 1
        assert adjustments[0].quantity_change == -3
        assert adjustments[0].previous_stock == 10
        assert adjustments[0].new_stock == 7

    def test_field_change_without_quantity_is_not_logged(self, db_session):
        product = create(db_session)
        updated = inventory_service.update_product(
            db_session, product.id, ProductUpdate(name="Vintage Jacket"), None
        )
        assert updated.name == "Vintage Jacket"
        assert len(logs_for(db_session, product)) == 1

    def test_sku_conflict(self, db_session):
        create(db_session)
        other = create(db_session, sku="DJ-002")
        with pytest.raises(DuplicateSkuError):
            inventory_service.update_product(
                db_session, other.id, ProductUpdate(sku="DJ-001"), None
            )

    def test_missing_product(self, db_session):
        with pytest.raises(ProductNotFoundError):
            inventory_service.update_product(db_session, uuid.uuid4(), ProductUpdate(), None)


class TestAdjustStock:
    def test_positive_change_is_stock_in(self, db_session):
        product = create(db_session)
        product = inventory_service.adjust_stock(db_session, product.id, 5, "Restock", None)

        assert product.quantity == 15
        latest = [log for log in logs_for(db_session, product) if log.reason == "Restock"]
        assert latest[0].action == "STOCK_IN"
        assert latest[0].previous_stock == 10

    def test_negative_change_is_deduction(self, db_session):
        product = create(db_session)
        product = inventory_service.adjust_stock(db_session, product.id, -4, "Damaged", None)

        assert product.quantity == 6
        latest = [log for log in logs_for(db_session, product) if log.reason == "Damaged"]
        assert latest[0].action == "DEDUCTION"
        assert latest[0].new_stock == 6

    def test_cannot_go_below_zero(self, db_session):
        product = create(db_session)
        with pytest.raises(InsufficientStockError):
            inventory_service.adjust_stock(db_session, product.id, -11, None, None)
        db_session.refresh(product)
        assert product.quantity == 10
        assert len(logs_for(db_session, product)) == 1

    def test_zero_change_is_noop(self, db_session):
        product = create(db_session)
        inventory_service.adjust_stock(db_session, product.id, 0, None, None)
        assert len(logs_for(db_session, product)) == 1

    def test_low_stock_raises_notification(self, db_session):
        product = create(db_session, alert_stock=5)
        inventory_service.adjust_stock(db_session, product.id, -6, None, None)

        [notification] = db_session.query(Notification).all()
        assert notification.type == "low_stock"

    def test_out_of_stock_notification(self, db_session):
        product = create(db_session, alert_stock=5)
        inventory_service.adjust_stock(db_session, product.id, -10, None, None)

        [notification] = db_session.query(Notification).all()
        assert notification.type == "out_of_stock"


def test_get_products_search(db_session):
    create(db_session)
    create(db_session, name="Linen Shirt", sku="LS-001")

    assert [p.sku for p in inventory_service.get_products(db_session, "linen")] == ["LS-001"]
    assert [p.sku for p in inventory_service.get_products(db_session, "dj-")] == ["DJ-001"]
    assert len(inventory_service.get_products(db_session)) == 2


def test_delete_product_keeps_logs(db_session):
    product = create(db_session)
    product_id = product.id

    inventory_service.delete_product(db_session, product_id)

    assert inventory_service.get_product(db_session, product_id) is None
    assert db_session.query(InventoryLog).count() == 1


ORDER_ID = "a1b2c3d4e5f6a7b8"


class TestOrderStock:
    def test_sale_logged_as_sold(self, db_session, staff_user):
        product = create(db_session)
        product = inventory_service.record_sale(db_session, product.id, 3, ORDER_ID, staff_user)

        assert product.quantity == 7
        [log] = [log for log in logs_for(db_session, product) if log.action == "SOLD"]
        assert log.quantity_change == -3
        assert log.previous_stock == 10
        assert log.new_stock == 7
        assert log.reason == "Order #a1b2c3d4"
        assert log.reference_id == ORDER_ID

    def test_sale_beyond_stock_rejected(self, db_session):
        product = create(db_session)
        with pytest.raises(InsufficientStockError):
            inventory_service.record_sale(db_session, product.id, 11, ORDER_ID, None)

    def test_sale_triggers_stock_alert(self, db_session):
        product = create(db_session, alert_stock=2)
        inventory_service.record_sale(db_session, product.id, 10, ORDER_ID, None)

        [notification] = db_session.query(Notification).all()
        assert notification.type == "out_of_stock"

    def test_return_logged_without_branch(self, db_session, staff_user):
        staff_user.branch = seed_service.get_branch_by_name(db_session, "Branch 1")
        db_session.commit()
        product = create(db_session)

        product = inventory_service.record_return(
            db_session, product.id, 2, ORDER_ID, staff_user
        )

        assert product.quantity == 12
        [log] = [log for log in logs_for(db_session, product) if log.action == "RETURNED"]
        assert log.quantity_change == 2
        assert log.reason == "Order #a1b2c3d4 cancelled"
        assert log.branch_id is None
        assert log.user_id == staff_user.id

    def test_return_for_missing_product(self, db_session):
        with pytest.raises(ProductNotFoundError):
            inventory_service.record_return(db_session, uuid.uuid4(), 1, ORDER_ID, None)
