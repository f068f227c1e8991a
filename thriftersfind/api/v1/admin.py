# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin audit log API endpoints."""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from thriftersfind.api.deps import get_db, require_access
from thriftersfind.models import User
from thriftersfind.schemas.common import PaginatedResponse, PaginationMeta
from thriftersfind.schemas.logs import AdminLogResponse, InventoryLogResponse
from thriftersfind.services import admin_log_service, inventory_log_service

router = APIRouter()


@router.get(
    "/inventory-logs", response_model=PaginatedResponse[InventoryLogResponse]
)
def list_inventory_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    branch_id: Optional[uuid.UUID] = None,
    action: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/admin/inventory-logs")),
) -> PaginatedResponse[InventoryLogResponse]:
    """List inventory log entries, newest first."""
    logs, total = inventory_log_service.get_inventory_logs(
        db,
        page=page,
        page_size=page_size,
        branch_id=branch_id,
        action=action,
        search=search,
    )
    return PaginatedResponse[InventoryLogResponse](
        data=[InventoryLogResponse.model_validate(log) for log in logs],
        meta=PaginationMeta.for_page(total, page, page_size),
    )


@router.get("/admin-logs", response_model=PaginatedResponse[AdminLogResponse])
def list_admin_logs(
    page: int = Query(1, ge=1),
    page_size: int = Query(10, ge=1, le=100),
    module: Optional[str] = None,
    action: Optional[str] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/admin/admin-logs")),
) -> PaginatedResponse[AdminLogResponse]:
    """List admin log entries, newest first."""
    logs, total = admin_log_service.get_admin_logs(
        db, page=page, page_size=page_size, module=module, action=action
    )
    return PaginatedResponse[AdminLogResponse](
        data=[AdminLogResponse.model_validate(log) for log in logs],
        meta=PaginationMeta.for_page(total, page, page_size),
    )
