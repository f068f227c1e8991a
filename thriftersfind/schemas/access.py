# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Navigation and page access schemas."""
from typing import Optional

from pydantic import BaseModel

from thriftersfind.access.gating import PageOutcome


class NavEntrySchema(BaseModel):
    """A visible navigation link."""

    path: str
    label: str
    permission: Optional[str] = None
    children: list["NavEntrySchema"] = []


class AccessCheckResponse(BaseModel):
    """Result of checking a page path for the current user."""

    path: str
    allowed: bool
    outcome: PageOutcome
    location: Optional[str] = None
