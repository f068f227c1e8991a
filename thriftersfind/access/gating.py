# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Page gating: turn an access decision into allow, redirect or deny."""

from dataclasses import dataclass
from enum import Enum

from thriftersfind.access.permissions import (
    PermissionFlag,
    PermissionSet,
    can_access,
    has_flag,
)

ROOT_PATHS = frozenset({"/", "/dashboard", ""})
PROFILE_PATH = "/profile"

ROOT_REDIRECT_PRIORITY: tuple[tuple[PermissionFlag, str], ...] = (
    (PermissionFlag.ORDERS, "/orders"),
    (PermissionFlag.BATCHES, "/batches"),
    (PermissionFlag.INVENTORY, "/inventory"),
    (PermissionFlag.CUSTOMERS, "/customers"),
    (PermissionFlag.STATIONS, "/stations"),
    (PermissionFlag.WAREHOUSES, "/warehouses"),
    (PermissionFlag.PRE_ORDERS, "/pre-orders"),
    (PermissionFlag.REPORTS, "/reports"),
    (PermissionFlag.SALES, "/sales"),
    (PermissionFlag.USERS, "/users"),
    (PermissionFlag.SETTINGS, "/settings"),
)


class PageOutcome(str, Enum):
    """What the presentation layer should do with a page request."""

    ALLOW = "allow"
    REDIRECT = "redirect"
    DENY = "deny"


@dataclass(frozen=True)
class PageDecision:
    outcome: PageOutcome
    location: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is PageOutcome.ALLOW


def first_available_path(permissions: PermissionSet | None) -> str:
    """Return the first feature path whose flag is set, else the profile page."""
    for flag, path in ROOT_REDIRECT_PRIORITY:
        if has_flag(permissions, flag):
            return path
    return PROFILE_PATH


def resolve_page_access(
    path: str,
    permissions: PermissionSet | None,
    role_name: str | None,
) -> PageDecision:
    """Decide how to answer a page request for an already-normalized path.

    Only denied root-like paths redirect. Every other denial renders the
    access-denied view, and so does a redirect that would point back at the
    current path.
    """
    if can_access(path, permissions, role_name):
        return PageDecision(PageOutcome.ALLOW)

    if path in ROOT_PATHS:
        target = first_available_path(permissions)
        if target != path:
            return PageDecision(PageOutcome.REDIRECT, target)

    return PageDecision(PageOutcome.DENY)
