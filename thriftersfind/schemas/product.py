# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Product and stock adjustment schemas."""
import datetime
import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ProductBase(BaseModel):
    """Base product schema."""

    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    alert_stock: int = Field(0, ge=0)
    cost: float = Field(0, ge=0)
    retail_price: float = Field(0, ge=0)
    images: list[str] = []


class ProductCreate(ProductBase):
    """Schema for creating a product with its opening stock."""

    quantity: int = Field(0, ge=0)


class ProductUpdate(BaseModel):
    """Schema for updating a product."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    sku: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)
    alert_stock: Optional[int] = Field(None, ge=0)
    cost: Optional[float] = Field(None, ge=0)
    retail_price: Optional[float] = Field(None, ge=0)
    images: Optional[list[str]] = None


class StockAdjustment(BaseModel):
    """Signed stock change; negative values deduct stock."""

    quantity_change: int
    reason: Optional[str] = None


class ProductResponse(ProductBase):
    """Schema for product response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    quantity: int
    created_by: Optional[dict[str, Any]] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime


class OrderStockMovement(BaseModel):
    """Stock leaving or coming back through an order."""

    quantity: int = Field(..., gt=0)
    order_id: str = Field(..., min_length=1, max_length=100)
