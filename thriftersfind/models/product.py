# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Product model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from thriftersfind.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from thriftersfind.models.inventory_log import InventoryLog


class Product(Base, TimestampMixin):
    """A sellable product and its on-hand stock."""

    __tablename__ = "products"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    sku: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    alert_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    cost: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    retail_price: Mapped[float] = mapped_column(Float, default=0, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    created_by: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)

    inventory_logs: Mapped[list[InventoryLog]] = relationship(
        "InventoryLog", back_populates="product"
    )
