# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
import math
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Totals for a paginated listing; `per_page` echoes the requested page size."""

    total: int
    page: int
    per_page: int
    pages: int

    @classmethod
    def for_page(cls, total: int, page: int, page_size: int) -> "PaginationMeta":
        return cls(
            total=total,
            page=page,
            per_page=page_size,
            pages=math.ceil(total / page_size) if total else 0,
        )


class PaginatedResponse(BaseModel, Generic[T]):
    """A page of rows plus the counts needed to page through the rest."""

    data: list[T]
    meta: PaginationMeta


class HealthResponse(BaseModel):
    """Liveness answer from /health."""

    status: str
    version: str
