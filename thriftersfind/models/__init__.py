# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from thriftersfind.models.admin_log import AdminLog
from thriftersfind.models.base import Base, TimestampMixin
from thriftersfind.models.branch import Branch
from thriftersfind.models.enums import AdminAction, InventoryAction, NotificationType
from thriftersfind.models.inventory_log import InventoryLog
from thriftersfind.models.notification import Notification
from thriftersfind.models.product import Product
from thriftersfind.models.role import Role
from thriftersfind.models.session import Session
from thriftersfind.models.user import User

__all__ = [
    "AdminAction",
    "AdminLog",
    "Base",
    "Branch",
    "InventoryAction",
    "InventoryLog",
    "Notification",
    "NotificationType",
    "Product",
    "Role",
    "Session",
    "TimestampMixin",
    "User",
]
