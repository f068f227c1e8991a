# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Notification service."""

import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from thriftersfind.models import Notification, NotificationType, Product

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20


def create_notification(
    db: Session,
    title: str,
    message: str,
    type: NotificationType,
    user_id: uuid.UUID | None = None,
) -> Notification:
    """Add a notification to the session; the caller commits."""
    notification = Notification(
        title=title,
        message=message,
        type=type.value,
        user_id=user_id,
        read=False,
    )
    db.add(notification)
    return notification


def check_and_notify_stock(
    db: Session, product: Product, user_id: uuid.UUID | None = None
) -> Notification | None:
    """Raise a low/out-of-stock alert when a product is at or under its threshold.

    Products with alert_stock of 0 never alert.
    """
    if product.alert_stock <= 0 or product.quantity > product.alert_stock:
        return None

    out_of_stock = product.quantity <= 0
    state = "out of stock" if out_of_stock else "running low"
    logger.warning(
        f"Stock alert for {product.sku}: {state} ({product.quantity} left)"
    )
    return create_notification(
        db,
        title="Out of Stock Alert" if out_of_stock else "Low Stock Alert",
        message=(
            f"Product {product.name} (SKU: {product.sku}) is {state}. "
            f"Current stock: {product.quantity}."
        ),
        type=NotificationType.OUT_OF_STOCK if out_of_stock else NotificationType.LOW_STOCK,
        user_id=user_id,
    )


def _visible_to(user_id: uuid.UUID):
    return or_(Notification.user_id == user_id, Notification.user_id.is_(None))


def get_notifications(
    db: Session,
    user_id: uuid.UUID,
    unread_only: bool = False,
    limit: int = DEFAULT_LIMIT,
) -> list[Notification]:
    """Get the user's own and broadcast notifications, newest first."""
    query = db.query(Notification).filter(_visible_to(user_id))
    if unread_only:
        query = query.filter(Notification.read.is_(False))
    return query.order_by(Notification.created_at.desc()).limit(limit).all()


def mark_as_read(
    db: Session, notification_id: uuid.UUID, user_id: uuid.UUID
) -> Notification | None:
    """Mark a notification visible to the user as read."""
    notification = (
        db.query(Notification)
        .filter(
            Notification.id == notification_id,
            _visible_to(user_id),
        )
        .first()
    )
    if not notification:
        return None
    notification.read = True
    db.commit()
    db.refresh(notification)
    return notification


def mark_all_as_read(db: Session, user_id: uuid.UUID) -> int:
    """Mark every unread notification visible to the user as read."""
    count = (
        db.query(Notification)
        .filter(_visible_to(user_id), Notification.read.is_(False))
        .update({Notification.read: True}, synchronize_session="fetch")
    )
    db.commit()
    return count
