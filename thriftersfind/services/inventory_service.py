# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Product inventory service.

Stock levels only change through this module, and each change is recorded in
the inventory log and checked against the product's alert threshold before
the transaction commits.
"""

import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from thriftersfind.models import InventoryAction, Product, User
from thriftersfind.schemas.product import ProductCreate, ProductUpdate
from thriftersfind.services import inventory_log_service, notification_service

logger = logging.getLogger(__name__)


class InventoryError(ValueError):
    """Base class for inventory rule violations."""


class ProductNotFoundError(InventoryError):
    def __init__(self, product_id: uuid.UUID) -> None:
        super().__init__(f"Product {product_id} not found")


class DuplicateSkuError(InventoryError):
    def __init__(self, sku: str) -> None:
        super().__init__(f'Product with SKU "{sku}" already exists')


class InsufficientStockError(InventoryError):
    def __init__(self, available: int, requested: int) -> None:
        super().__init__(f"Cannot deduct {requested} from {available} units")


def get_products(db: Session, query: str | None = None) -> list[Product]:
    """Get products, optionally filtered by a name or SKU substring."""
    products = db.query(Product)
    if query:
        pattern = f"%{query}%"
        products = products.filter(
            or_(Product.name.ilike(pattern), Product.sku.ilike(pattern))
        )
    return products.order_by(Product.name).all()


def get_product(db: Session, product_id: uuid.UUID) -> Product | None:
    """Get a product by ID."""
    return db.query(Product).filter(Product.id == product_id).first()


def _require_product(db: Session, product_id: uuid.UUID) -> Product:
    product = get_product(db, product_id)
    if not product:
        raise ProductNotFoundError(product_id)
    return product


def _ensure_unique_sku(
    db: Session, sku: str, exclude_id: uuid.UUID | None = None
) -> None:
    query = db.query(Product).filter(Product.sku == sku)
    if exclude_id:
        query = query.filter(Product.id != exclude_id)
    if query.first():
        raise DuplicateSkuError(sku)


def create_product(db: Session, data: ProductCreate, user: User | None) -> Product:
    """Create a product and log its opening stock."""
    _ensure_unique_sku(db, data.sku)

    product = Product(
        name=data.name,
        sku=data.sku,
        description=data.description,
        quantity=data.quantity,
        alert_stock=data.alert_stock,
        cost=data.cost,
        retail_price=data.retail_price,
        images=list(data.images),
        created_by=inventory_log_service.performed_by_snapshot(user),
    )
    db.add(product)
    db.flush()

    inventory_log_service.create_inventory_log(
        db,
        action=InventoryAction.STOCK_IN,
        product_id=product.id,
        quantity_change=product.quantity,
        previous_stock=0,
        new_stock=product.quantity,
        reason="Initial stock",
        reference_id=str(product.id),
        user=user,
    )
    notification_service.check_and_notify_stock(db, product)

    db.commit()
    db.refresh(product)
    logger.info(f"Product {product.sku} created with {product.quantity} units")
    return product


def update_product(
    db: Session, product_id: uuid.UUID, data: ProductUpdate, user: User | None
) -> Product:
    """Update product fields; a quantity change is logged as an adjustment."""
    product = _require_product(db, product_id)

    if data.sku is not None and data.sku != product.sku:
        _ensure_unique_sku(db, data.sku, exclude_id=product.id)

    previous_stock = product.quantity
    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(product, field, value)

    if product.quantity != previous_stock:
        inventory_log_service.create_inventory_log(
            db,
            action=InventoryAction.ADJUSTMENT,
            product_id=product.id,
            quantity_change=product.quantity - previous_stock,
            previous_stock=previous_stock,
            new_stock=product.quantity,
            reason="Manual adjustment",
            reference_id=str(product.id),
            user=user,
        )
        notification_service.check_and_notify_stock(db, product)

    db.commit()
    db.refresh(product)
    return product


def adjust_stock(
    db: Session,
    product_id: uuid.UUID,
    quantity_change: int,
    reason: str | None,
    user: User | None,
) -> Product:
    """Add (positive) or deduct (negative) stock.

    Stock may never go below zero.
    """
    product = _require_product(db, product_id)
    if quantity_change == 0:
        return product

    previous_stock = product.quantity
    new_stock = previous_stock + quantity_change
    if new_stock < 0:
        raise InsufficientStockError(previous_stock, -quantity_change)

    action = (
        InventoryAction.STOCK_IN if quantity_change > 0 else InventoryAction.DEDUCTION
    )
    product.quantity = new_stock
    inventory_log_service.create_inventory_log(
        db,
        action=action,
        product_id=product.id,
        quantity_change=quantity_change,
        previous_stock=previous_stock,
        new_stock=new_stock,
        reason=reason,
        reference_id=str(product.id),
        user=user,
    )
    notification_service.check_and_notify_stock(db, product)

    db.commit()
    db.refresh(product)
    logger.info(
        f"Stock for {product.sku} changed {previous_stock} -> {new_stock} ({action.value})"
    )
    return product


def _order_label(order_id: str) -> str:
    return f"Order #{order_id[:8]}"


def record_sale(
    db: Session,
    product_id: uuid.UUID,
    quantity: int,
    order_id: str,
    user: User | None,
) -> Product:
    """Deduct stock sold on an order, logged as SOLD against the order."""
    product = _require_product(db, product_id)
    if quantity > product.quantity:
        raise InsufficientStockError(product.quantity, quantity)

    previous_stock = product.quantity
    product.quantity = previous_stock - quantity
    inventory_log_service.create_inventory_log(
        db,
        action=InventoryAction.SOLD,
        product_id=product.id,
        quantity_change=-quantity,
        previous_stock=previous_stock,
        new_stock=product.quantity,
        reason=_order_label(order_id),
        reference_id=order_id,
        user=user,
    )
    notification_service.check_and_notify_stock(db, product)

    db.commit()
    db.refresh(product)
    logger.info(f"Sold {quantity} of {product.sku} on order {order_id}")
    return product


def record_return(
    db: Session,
    product_id: uuid.UUID,
    quantity: int,
    order_id: str,
    user: User | None,
) -> Product:
    """Put stock from a cancelled order back, logged as RETURNED.

    Returns are not tied to the acting user's branch.
    """
    product = _require_product(db, product_id)

    previous_stock = product.quantity
    product.quantity = previous_stock + quantity
    log = inventory_log_service.create_inventory_log(
        db,
        action=InventoryAction.RETURNED,
        product_id=product.id,
        quantity_change=quantity,
        previous_stock=previous_stock,
        new_stock=product.quantity,
        reason=f"{_order_label(order_id)} cancelled",
        reference_id=order_id,
        user=user,
    )
    log.branch_id = None
    notification_service.check_and_notify_stock(db, product)

    db.commit()
    db.refresh(product)
    logger.info(f"Restocked {quantity} of {product.sku} from order {order_id}")
    return product


def delete_product(db: Session, product_id: uuid.UUID) -> None:
    """Delete a product. Its inventory log rows are kept."""
    product = _require_product(db, product_id)
    db.delete(product)
    db.commit()
    logger.info(f"Product {product_id} deleted")
