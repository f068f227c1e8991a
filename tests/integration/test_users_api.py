# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for user management endpoints."""

from thriftersfind.models import AdminLog, User


def new_user_payload(**overrides):
    payload = {
        "name": "New Clerk",
        "email": "clerk@example.com",
        "password": "clerkpassword",
        "role": "staff",
        "permissions": {"orders": True, "preOrders": True},
    }
    payload.update(overrides)
    return payload


class TestUserAccess:
    def test_requires_authentication(self, client):
        assert client.get("/api/v1/users").status_code == 401

    def test_staff_without_users_flag_forbidden(self, staff_client):
        response = staff_client.get("/api/v1/users")
        assert response.status_code == 403
        assert response.json()["detail"] == "Access denied"

    def test_staff_with_users_flag_allowed(self, client, make_user, login_as):
        make_user("lead@example.com", role="staff", permissions={"users": True})
        login_as("lead@example.com")
        assert client.get("/api/v1/users").status_code == 200


class TestCreateUser:
    def test_create_user_stores_flags(self, admin_client, db_session):
        response = admin_client.post("/api/v1/users", json=new_user_payload())
        assert response.status_code == 201
        data = response.json()
        assert data["role"]["name"] == "staff"
        assert data["permissions"]["orders"] is True
        assert data["permissions"]["preOrders"] is True
        assert data["permissions"]["adminManage"] is False

        user = db_session.query(User).filter(User.email == "clerk@example.com").one()
        assert user.permissions["preOrders"] is True

    def test_create_user_writes_admin_log(self, admin_client, admin_user, db_session):
        admin_client.post("/api/v1/users", json=new_user_payload())

        [log] = db_session.query(AdminLog).all()
        assert log.action == "USER_CREATED"
        assert log.module == "USERS"
        assert log.target_type == "USER"
        assert log.performed_by["uid"] == str(admin_user.id)
        assert "hashed_password" not in log.new_data

    def test_duplicate_email(self, admin_client, staff_user):
        response = admin_client.post(
            "/api/v1/users", json=new_user_payload(email=staff_user.email)
        )
        assert response.status_code == 400
        assert response.json()["detail"] == (
            f'A user with the email "{staff_user.email}" already exists.'
        )

    def test_unknown_role(self, admin_client):
        response = admin_client.post("/api/v1/users", json=new_user_payload(role="owner"))
        assert response.status_code == 400

    def test_short_password_rejected(self, admin_client):
        response = admin_client.post(
            "/api/v1/users", json=new_user_payload(password="short")
        )
        assert response.status_code == 422

    def test_assign_branch(self, admin_client):
        branches = admin_client.get("/api/v1/branches").json()
        assert [b["name"] for b in branches] == ["Branch 1", "Branch 2"]

        response = admin_client.post(
            "/api/v1/users", json=new_user_payload(branch_id=branches[1]["id"])
        )
        assert response.json()["branch"]["name"] == "Branch 2"


class TestUpdateUser:
    def test_update_permissions_and_log_previous(self, admin_client, staff_user, db_session):
        response = admin_client.put(
            f"/api/v1/users/{staff_user.id}",
            json={"permissions": {"inventory": True, "orders": True}},
        )
        assert response.status_code == 200
        assert response.json()["permissions"]["orders"] is True

        [log] = db_session.query(AdminLog).all()
        assert log.action == "USER_UPDATED"
        assert log.previous_data["permissions"]["orders"] is False
        assert log.new_data["permissions"]["orders"] is True

    def test_permission_change_takes_effect(self, client, admin_client, staff_user, login_as):
        admin_client.put(
            f"/api/v1/users/{staff_user.id}",
            json={"permissions": {"orders": True}},
        )
        login_as(staff_user.email)
        data = client.get("/api/v1/access/navigation").json()
        assert [entry["path"] for entry in data] == ["/orders", "/profile"]

    def test_cannot_deactivate_self(self, admin_client, admin_user):
        response = admin_client.put(
            f"/api/v1/users/{admin_user.id}", json={"is_active": False}
        )
        assert response.status_code == 400

    def test_not_found(self, admin_client):
        response = admin_client.put(
            "/api/v1/users/00000000-0000-0000-0000-000000000000", json={"name": "x"}
        )
        assert response.status_code == 404


class TestDeleteUser:
    def test_delete_user(self, admin_client, staff_user, db_session):
        response = admin_client.delete(f"/api/v1/users/{staff_user.id}")
        assert response.status_code == 204
        assert db_session.query(User).filter(User.email == "staff@example.com").first() is None

        [log] = db_session.query(AdminLog).all()
        assert log.action == "USER_DELETED"
        assert log.previous_data["email"] == "staff@example.com"

    def test_cannot_delete_self(self, admin_client, admin_user):
        response = admin_client.delete(f"/api/v1/users/{admin_user.id}")
        assert response.status_code == 400


def test_list_roles(admin_client):
    roles = admin_client.get("/api/v1/roles").json()
    assert [r["name"] for r in roles] == ["staff", "super admin"]
