# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class InventoryAction(str, Enum):
    """Kind of stock movement recorded in the inventory log."""

    STOCK_IN = "STOCK_IN"
    ADJUSTMENT = "ADJUSTMENT"
    DEDUCTION = "DEDUCTION"
    SOLD = "SOLD"
    RETURNED = "RETURNED"


class AdminAction(str, Enum):
    """Administrative actions recorded in the admin log."""

    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"


class NotificationType(str, Enum):
    """Notification type enumeration."""

    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    INFO = "info"
