# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Notification API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from thriftersfind.api.deps import get_current_user, get_db
from thriftersfind.models import Notification, User
from thriftersfind.schemas.notification import MarkAllReadResponse, NotificationResponse
from thriftersfind.services import notification_service

router = APIRouter()


@router.get("", response_model=list[NotificationResponse])
def list_notifications(
    unread_only: bool = False,
    limit: int = Query(notification_service.DEFAULT_LIMIT, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[Notification]:
    """List the current user's and broadcast notifications."""
    return notification_service.get_notifications(
        db, current_user.id, unread_only=unread_only, limit=limit
    )


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_notifications_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> MarkAllReadResponse:
    """Mark all of the current user's and broadcast notifications as read."""
    updated = notification_service.mark_all_as_read(db, current_user.id)
    return MarkAllReadResponse(updated=updated)


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Notification:
    """Mark a notification as read."""
    notification = notification_service.mark_as_read(
        db, notification_id, current_user.id
    )
    if not notification:
        raise HTTPException(status_code=404, detail="Notification not found")
    return notification
