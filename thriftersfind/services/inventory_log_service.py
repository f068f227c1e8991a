# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Inventory log bookkeeping.

Every stock mutation writes one log row in the same database transaction as
the mutation itself, so the trail and the stock level cannot drift apart.
"""

import uuid
from typing import Any

from sqlalchemy import or_
from sqlalchemy.orm import Session

from thriftersfind.models import InventoryAction, InventoryLog, Product, User

SYSTEM_ACTOR = {"uid": "system", "name": "System"}


def performed_by_snapshot(user: User | None) -> dict[str, Any]:
    """Freeze who performed an action; the user row may change later."""
    if user is None:
        return dict(SYSTEM_ACTOR)
    return {"uid": str(user.id), "name": user.name, "email": user.email}


def create_inventory_log(
    db: Session,
    action: InventoryAction,
    quantity_change: int,
    previous_stock: int,
    new_stock: int,
    product_id: uuid.UUID | None = None,
    reason: str | None = None,
    reference_id: str | None = None,
    branch_id: uuid.UUID | None = None,
    user: User | None = None,
) -> InventoryLog:
    """Add an inventory log row to the session without committing.

    The branch defaults to the acting user's branch.
    """
    log = InventoryLog(
        action=action.value,
        product_id=product_id,
        quantity_change=quantity_change,
        previous_stock=previous_stock,
        new_stock=new_stock,
        reason=reason,
        reference_id=reference_id,
        performed_by=performed_by_snapshot(user),
        user_id=user.id if user else None,
        branch_id=branch_id or (user.branch_id if user else None),
    )
    db.add(log)
    return log


def get_inventory_logs(
    db: Session,
    page: int = 1,
    page_size: int = 10,
    branch_id: uuid.UUID | None = None,
    action: str | None = None,
    search: str | None = None,
) -> tuple[list[InventoryLog], int]:
    """Get a page of inventory logs, newest first, with the total match count."""
    query = db.query(InventoryLog)
    if branch_id:
        query = query.filter(InventoryLog.branch_id == branch_id)
    if action:
        query = query.filter(InventoryLog.action == action)
    if search:
        pattern = f"%{search}%"
        query = query.outerjoin(Product, InventoryLog.product_id == Product.id).filter(
            or_(Product.name.ilike(pattern), Product.sku.ilike(pattern))
        )

    total = query.count()
    logs = (
        query.order_by(InventoryLog.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return logs, total
