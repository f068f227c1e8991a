# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Services package."""
from thriftersfind.services import (
    admin_log_service,
    auth_service,
    inventory_log_service,
    inventory_service,
    notification_service,
    seed_service,
)

__all__ = [
    "admin_log_service",
    "auth_service",
    "inventory_log_service",
    "inventory_service",
    "notification_service",
    "seed_service",
]
