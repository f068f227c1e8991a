# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sidebar navigation table and its permission filter."""

from collections.abc import Iterable
from dataclasses import dataclass

from thriftersfind.access.permissions import PermissionFlag, PermissionSet, can_access


@dataclass(frozen=True)
class NavEntry:
    """A navigation link.

    ``permission`` is informational; visibility is decided by ``can_access`` on
    ``path``. ``None`` marks links that every authenticated user sees. Children
    are shown whenever their parent is shown.
    """

    path: str
    label: str
    permission: PermissionFlag | None
    children: tuple["NavEntry", ...] = ()


def _child(path: str, label: str) -> NavEntry:
    return NavEntry(path=path, label=label, permission=None)


NAV_LINKS: tuple[NavEntry, ...] = (
    NavEntry("/dashboard", "Dashboard", PermissionFlag.DASHBOARD),
    NavEntry("/batches", "Batches", PermissionFlag.BATCHES),
    NavEntry("/inventory", "Inventory", PermissionFlag.INVENTORY),
    NavEntry("/orders", "Orders", PermissionFlag.ORDERS),
    NavEntry("/customers", "Customers", PermissionFlag.CUSTOMERS),
    NavEntry("/stations", "Courier & Pickup Stations", PermissionFlag.STATIONS),
    NavEntry("/warehouses", "Warehouses", PermissionFlag.WAREHOUSES),
    NavEntry(
        "/pre-orders",
        "Pre orders",
        PermissionFlag.PRE_ORDERS,
        children=(
            _child("/pre-orders/all", "Orders"),
            _child("/pre-orders/inventory", "Item List"),
        ),
    ),
    NavEntry("/reports", "Reports", PermissionFlag.REPORTS),
    NavEntry("/sales", "Sales", PermissionFlag.SALES),
    NavEntry("/users", "Users", PermissionFlag.USERS),
    NavEntry("/profile", "Profile", None),
    NavEntry(
        "/settings",
        "Settings",
        PermissionFlag.SETTINGS,
        children=(
            _child("/settings/import-database", "Import Database"),
            _child("/settings/download-database", "Download Database"),
        ),
    ),
    NavEntry(
        "/admin",
        "Admin Manage",
        PermissionFlag.ADMIN_MANAGE,
        children=(
            _child("/admin/sales-logs", "Sales Logs"),
            _child("/admin/admin-logs", "Admin Logs"),
            _child("/admin/inventory-logs", "Inventory Logs"),
        ),
    ),
)


def filter_navigation(
    entries: Iterable[NavEntry],
    permissions: PermissionSet | None,
    role_name: str | None,
) -> list[NavEntry]:
    """Keep the entries the user may open, preserving table order."""
    return [
        entry for entry in entries if can_access(entry.path, permissions, role_name)
    ]
