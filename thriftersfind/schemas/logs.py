# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Inventory and admin log schemas."""
import datetime
import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class InventoryLogResponse(BaseModel):
    """A single stock movement."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    action: str
    product_id: Optional[uuid.UUID] = None
    quantity_change: int
    previous_stock: int
    new_stock: int
    reason: Optional[str] = None
    reference_id: Optional[str] = None
    performed_by: Optional[dict[str, Any]] = None
    user_id: Optional[uuid.UUID] = None
    branch_id: Optional[uuid.UUID] = None
    created_at: datetime.datetime


class AdminLogResponse(BaseModel):
    """A single administrative change."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    action: str
    module: str
    description: str
    performed_by: Optional[dict[str, Any]] = None
    target_id: Optional[str] = None
    target_type: Optional[str] = None
    previous_data: Optional[dict[str, Any]] = None
    new_data: Optional[dict[str, Any]] = None
    created_at: datetime.datetime
