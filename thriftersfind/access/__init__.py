# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role and permission-flag based page access."""

from thriftersfind.access.gating import (
    PageDecision,
    PageOutcome,
    first_available_path,
    resolve_page_access,
)
from thriftersfind.access.navigation import NAV_LINKS, NavEntry, filter_navigation
from thriftersfind.access.permissions import (
    PermissionFlag,
    can_access,
    default_permissions,
    full_permissions,
    has_flag,
    normalize_path,
)

__all__ = [
    "NAV_LINKS",
    "NavEntry",
    "PageDecision",
    "PageOutcome",
    "PermissionFlag",
    "can_access",
    "default_permissions",
    "filter_navigation",
    "first_available_path",
    "full_permissions",
    "has_flag",
    "normalize_path",
    "resolve_page_access",
]
