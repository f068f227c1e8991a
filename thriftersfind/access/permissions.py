# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Page access rules evaluated against a user's permission flags and role.

The rules are an ordered table: the first rule whose path predicate matches
decides the outcome. Paths that match no rule fall through to
``UNMAPPED_PATH_ALLOWED``, which is deliberately ``True``. Any new page must be
added to ``FEATURE_PREFIXES`` (or given its own rule) or it is open to every
authenticated role.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum

PermissionSet = Mapping[str, bool | None]

STAFF_ROLE = "staff"
SUPER_ADMIN_ROLE = "super admin"


class PermissionFlag(str, Enum):
    """Feature-area flags stored on a user's permission set."""

    DASHBOARD = "dashboard"
    ORDERS = "orders"
    BATCHES = "batches"
    INVENTORY = "inventory"
    CUSTOMERS = "customers"
    REPORTS = "reports"
    USERS = "users"
    SETTINGS = "settings"
    ADMIN_MANAGE = "adminManage"
    STATIONS = "stations"
    PRE_ORDERS = "preOrders"
    WAREHOUSES = "warehouses"
    SALES = "sales"


# Prefix rules checked after the role overrides, in this order.
FEATURE_PREFIXES: tuple[tuple[str, PermissionFlag], ...] = (
    ("/orders", PermissionFlag.ORDERS),
    ("/batches", PermissionFlag.BATCHES),
    ("/inventory", PermissionFlag.INVENTORY),
    ("/customers", PermissionFlag.CUSTOMERS),
    ("/stations", PermissionFlag.STATIONS),
    ("/warehouses", PermissionFlag.WAREHOUSES),
    ("/pre-orders", PermissionFlag.PRE_ORDERS),
    ("/reports", PermissionFlag.REPORTS),
    ("/users", PermissionFlag.USERS),
    ("/settings", PermissionFlag.SETTINGS),
)

UNMAPPED_PATH_ALLOWED = True


def has_flag(permissions: PermissionSet | None, flag: PermissionFlag) -> bool:
    """Return True only when the flag is present and truthy."""
    if not permissions:
        return False
    return bool(permissions.get(flag.value))


def default_permissions(grant: bool = False) -> dict[str, bool]:
    """Build a complete permission set with every flag set to ``grant``."""
    return {flag.value: grant for flag in PermissionFlag}


def full_permissions() -> dict[str, bool]:
    return default_permissions(grant=True)


def normalize_path(path: str) -> str:
    """Strip a trailing slash, keeping the root path as-is."""
    if path != "/" and path.endswith("/"):
        return path[:-1]
    return path


def _under(prefix: str) -> Callable[[str], bool]:
    """Match the prefix itself or anything below it as a path segment."""
    return lambda path: path == prefix or path.startswith(prefix + "/")


def _starts_with(prefix: str) -> Callable[[str], bool]:
    return lambda path: path.startswith(prefix)


def _one_of(*paths: str) -> Callable[[str], bool]:
    return lambda path: path in paths


def _always(permissions: PermissionSet | None, is_staff: bool) -> bool:
    return True


def _not_staff(permissions: PermissionSet | None, is_staff: bool) -> bool:
    return not is_staff


def _requires(flag: PermissionFlag) -> Callable[[PermissionSet | None, bool], bool]:
    return lambda permissions, is_staff: has_flag(permissions, flag)


@dataclass(frozen=True)
class AccessRule:
    """A path predicate paired with the condition that grants access."""

    name: str
    matches: Callable[[str], bool]
    allows: Callable[[PermissionSet | None, bool], bool]
    flag: PermissionFlag | None = None


ACCESS_RULES: tuple[AccessRule, ...] = (
    AccessRule("profile", _under("/profile"), _always),
    # Role overrides: staff never sees the dashboard or sales, whatever the flags say.
    AccessRule("dashboard", _one_of("/dashboard", "/", ""), _not_staff),
    AccessRule("sales", _starts_with("/sales"), _not_staff),
    AccessRule(
        "admin",
        _starts_with("/admin"),
        _requires(PermissionFlag.ADMIN_MANAGE),
        PermissionFlag.ADMIN_MANAGE,
    ),
    *(
        AccessRule(prefix.lstrip("/"), _under(prefix), _requires(flag), flag)
        for prefix, flag in FEATURE_PREFIXES
    ),
)


def matching_rule(path: str) -> AccessRule | None:
    """Return the rule that decides ``path``, or None if it is unmapped."""
    for rule in ACCESS_RULES:
        if rule.matches(path):
            return rule
    return None


def can_access(
    path: str,
    permissions: PermissionSet | None,
    role_name: str | None,
) -> bool:
    """Decide whether a user with the given flags and role may open ``path``.

    ``path`` must already be normalized (see ``normalize_path``). A missing
    role denies everything, including the profile page. Passing anything other
    than a string as ``path`` is a caller bug and raises ``TypeError``.
    """
    if not isinstance(path, str):
        raise TypeError(f"path must be a string, got {type(path).__name__}")

    if not role_name:
        return False

    is_staff = role_name.lower() == STAFF_ROLE

    rule = matching_rule(path)
    if rule is None:
        return UNMAPPED_PATH_ALLOWED
    return rule.allows(permissions, is_staff)
