# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for notification_service."""

import pytest

from thriftersfind.models import NotificationType, Product
from thriftersfind.services import notification_service


@pytest.mark.parametrize(
    "quantity,alert_stock,expected",
    [
        (10, 5, None),
        (5, 5, "low_stock"),
        (1, 5, "low_stock"),
        (0, 5, "out_of_stock"),
        (0, 0, None),
    ],
)
def test_check_and_notify_stock(db_session, quantity, alert_stock, expected):
    product = Product(name="Scarf", sku="SC-1", quantity=quantity, alert_stock=alert_stock)

    notification = notification_service.check_and_notify_stock(db_session, product)

    if expected is None:
        assert notification is None
    else:
        assert notification.type == expected
        assert "SC-1" in notification.message


def test_user_sees_own_and_broadcast(db_session, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")
    notification_service.create_notification(
        db_session, "Hello", "For everyone", NotificationType.INFO
    )
    notification_service.create_notification(
        db_session, "Hi Alice", "Just you", NotificationType.INFO, user_id=alice.id
    )
    notification_service.create_notification(
        db_session, "Hi Bob", "Just you", NotificationType.INFO, user_id=bob.id
    )
    db_session.commit()

    titles = {n.title for n in notification_service.get_notifications(db_session, alice.id)}
    assert titles == {"Hello", "Hi Alice"}


def test_mark_as_read(db_session, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")
    notification = notification_service.create_notification(
        db_session, "Hi Bob", "Just you", NotificationType.INFO, user_id=bob.id
    )
    db_session.commit()

    assert notification_service.mark_as_read(db_session, notification.id, alice.id) is None

    updated = notification_service.mark_as_read(db_session, notification.id, bob.id)
    assert updated.read is True
    assert notification_service.get_notifications(db_session, bob.id, unread_only=True) == []


def test_list_is_capped(db_session, make_user):
    alice = make_user("alice@example.com")
    for i in range(25):
        notification_service.create_notification(
            db_session, f"Note {i}", "Stock check", NotificationType.INFO
        )
    db_session.commit()

    assert len(notification_service.get_notifications(db_session, alice.id)) == 20
    assert len(notification_service.get_notifications(db_session, alice.id, limit=5)) == 5


def test_mark_all_as_read_skips_other_users(db_session, make_user):
    alice = make_user("alice@example.com")
    bob = make_user("bob@example.com")
    notification_service.create_notification(
        db_session, "Hello", "For everyone", NotificationType.INFO
    )
    notification_service.create_notification(
        db_session, "Hi Alice", "Just you", NotificationType.INFO, user_id=alice.id
    )
    notification_service.create_notification(
        db_session, "Hi Bob", "Just you", NotificationType.INFO, user_id=bob.id
    )
    db_session.commit()

    assert notification_service.mark_all_as_read(db_session, alice.id) == 2

    assert notification_service.get_notifications(db_session, alice.id, unread_only=True) == []
    [still_unread] = notification_service.get_notifications(
        db_session, bob.id, unread_only=True
    )
    assert still_unread.title == "Hi Bob"
