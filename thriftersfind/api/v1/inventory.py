# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Inventory API endpoints."""

import uuid
from typing import NoReturn, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from thriftersfind.api.deps import get_db, require_access
from thriftersfind.models import Product, User
from thriftersfind.schemas.product import (
    OrderStockMovement,
    ProductCreate,
    ProductResponse,
    ProductUpdate,
    StockAdjustment,
)
from thriftersfind.services import inventory_service
from thriftersfind.services.inventory_service import (
    InventoryError,
    ProductNotFoundError,
)

router = APIRouter()


def _raise_for(error: InventoryError) -> NoReturn:
    if isinstance(error, ProductNotFoundError):
        raise HTTPException(status_code=404, detail="Product not found") from error
    raise HTTPException(status_code=400, detail=str(error)) from error


@router.get("", response_model=list[ProductResponse])
def list_products(
    q: Optional[str] = Query(None, description="Name or SKU search"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> list[Product]:
    """List products, optionally filtered by name or SKU."""
    return inventory_service.get_products(db, q)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    data: ProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Create a product with its opening stock."""
    try:
        return inventory_service.create_product(db, data, current_user)
    except InventoryError as e:
        _raise_for(e)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Get a product by ID."""
    product = inventory_service.get_product(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: uuid.UUID,
    data: ProductUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Update a product."""
    try:
        return inventory_service.update_product(db, product_id, data, current_user)
    except InventoryError as e:
        _raise_for(e)


@router.post("/{product_id}/adjust", response_model=ProductResponse)
def adjust_stock(
    product_id: uuid.UUID,
    data: StockAdjustment,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Add or deduct stock for a product."""
    try:
        return inventory_service.adjust_stock(
            db, product_id, data.quantity_change, data.reason, current_user
        )
    except InventoryError as e:
        _raise_for(e)


@router.post("/{product_id}/sold", response_model=ProductResponse)
def record_sale(
    product_id: uuid.UUID,
    data: OrderStockMovement,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Deduct stock sold on an order."""
    try:
        return inventory_service.record_sale(
            db, product_id, data.quantity, data.order_id, current_user
        )
    except InventoryError as e:
        _raise_for(e)


@router.post("/{product_id}/returned", response_model=ProductResponse)
def record_return(
    product_id: uuid.UUID,
    data: OrderStockMovement,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> Product:
    """Put back stock from a cancelled order."""
    try:
        return inventory_service.record_return(
            db, product_id, data.quantity, data.order_id, current_user
        )
    except InventoryError as e:
        _raise_for(e)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/inventory")),
) -> None:
    """Delete a product."""
    try:
        inventory_service.delete_product(db, product_id)
    except InventoryError as e:
        _raise_for(e)
