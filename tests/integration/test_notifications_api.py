# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for notification endpoints."""

import uuid

from thriftersfind.models import NotificationType
from thriftersfind.services import notification_service


def test_requires_authentication(client):
    assert client.get("/api/v1/notifications").status_code == 401


def test_list_and_mark_read(staff_client, staff_user, db_session):
    notification = notification_service.create_notification(
        db_session, "Hi", "Welcome aboard", NotificationType.INFO, user_id=staff_user.id
    )
    db_session.commit()

    listed = staff_client.get("/api/v1/notifications").json()
    assert [n["id"] for n in listed] == [str(notification.id)]
    assert listed[0]["read"] is False

    response = staff_client.post(f"/api/v1/notifications/{notification.id}/read")
    assert response.status_code == 200
    assert response.json()["read"] is True

    unread = staff_client.get("/api/v1/notifications", params={"unread_only": True}).json()
    assert unread == []


def test_mark_unknown_notification(staff_client):
    response = staff_client.post(f"/api/v1/notifications/{uuid.uuid4()}/read")
    assert response.status_code == 404


def test_mark_all_read(staff_client, staff_user, db_session):
    for title in ("First", "Second"):
        notification_service.create_notification(
            db_session, title, "Restock soon", NotificationType.INFO, user_id=staff_user.id
        )
    db_session.commit()

    response = staff_client.post("/api/v1/notifications/read-all")
    assert response.status_code == 200
    assert response.json() == {"updated": 2}

    unread = staff_client.get("/api/v1/notifications", params={"unread_only": True}).json()
    assert unread == []


def test_list_limit(staff_client, db_session):
    for i in range(3):
        notification_service.create_notification(
            db_session, f"Note {i}", "Stock check", NotificationType.INFO
        )
    db_session.commit()

    listed = staff_client.get("/api/v1/notifications", params={"limit": 2}).json()
    assert len(listed) == 2
    assert staff_client.get("/api/v1/notifications", params={"limit": 0}).status_code == 422
