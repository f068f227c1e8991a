# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Admin log service."""

from typing import Any

from sqlalchemy.orm import Session

from thriftersfind.models import AdminAction, AdminLog, User


def performed_by_snapshot(user: User) -> dict[str, Any]:
    return {
        "uid": str(user.id),
        "name": user.name,
        "role": user.role_name or "Unknown",
    }


def record_admin_action(
    db: Session,
    action: AdminAction,
    module: str,
    description: str,
    performed_by: User,
    target_id: str | None = None,
    target_type: str | None = None,
    previous_data: dict[str, Any] | None = None,
    new_data: dict[str, Any] | None = None,
) -> AdminLog:
    """Add an admin log row to the session; the caller commits."""
    log = AdminLog(
        action=action.value,
        module=module,
        description=description,
        performed_by=performed_by_snapshot(performed_by),
        target_id=target_id,
        target_type=target_type,
        previous_data=previous_data,
        new_data=new_data,
    )
    db.add(log)
    return log


def get_admin_logs(
    db: Session,
    page: int = 1,
    page_size: int = 10,
    module: str | None = None,
    action: str | None = None,
) -> tuple[list[AdminLog], int]:
    """Get a page of admin logs, newest first, with the total match count."""
    query = db.query(AdminLog)
    if module:
        query = query.filter(AdminLog.module == module)
    if action:
        query = query.filter(AdminLog.action == action)

    total = query.count()
    logs = (
        query.order_by(AdminLog.created_at.desc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )
    return logs, total
