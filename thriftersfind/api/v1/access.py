# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Navigation and page access API endpoints."""

from fastapi import APIRouter, Depends, Query

from thriftersfind.access import (
    NAV_LINKS,
    NavEntry,
    filter_navigation,
    normalize_path,
    resolve_page_access,
)
from thriftersfind.api.deps import get_current_user
from thriftersfind.models import User
from thriftersfind.schemas.access import AccessCheckResponse, NavEntrySchema

router = APIRouter()


def _nav_schema(entry: NavEntry) -> NavEntrySchema:
    return NavEntrySchema(
        path=entry.path,
        label=entry.label,
        permission=entry.permission.value if entry.permission else None,
        children=[_nav_schema(child) for child in entry.children],
    )


@router.get("/navigation", response_model=list[NavEntrySchema])
def get_navigation(
    current_user: User = Depends(get_current_user),
) -> list[NavEntrySchema]:
    """Get the navigation links the current user may see."""
    entries = filter_navigation(
        NAV_LINKS, current_user.permissions, current_user.role_name
    )
    return [_nav_schema(entry) for entry in entries]


@router.get("/check", response_model=AccessCheckResponse)
def check_page_access(
    path: str = Query("/", description="Page path to check"),
    current_user: User = Depends(get_current_user),
) -> AccessCheckResponse:
    """Decide whether to render, redirect or deny a page for the current user."""
    normalized = normalize_path(path)
    decision = resolve_page_access(
        normalized, current_user.permissions, current_user.role_name
    )
    return AccessCheckResponse(
        path=normalized,
        allowed=decision.allowed,
        outcome=decision.outcome,
        location=decision.location,
    )
