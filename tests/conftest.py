# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"

from thriftersfind.access import default_permissions, full_permissions  # noqa: E402
from thriftersfind.database import get_db  # noqa: E402
from thriftersfind.main import app  # noqa: E402
from thriftersfind.models import User  # noqa: E402
from thriftersfind.models.base import Base  # noqa: E402
from thriftersfind.security import get_password_hash  # noqa: E402
from thriftersfind.services import seed_service  # noqa: E402

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "testpassword123"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        seed_service.seed_reference_data(session)
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory for persisted users with a role name and permission flags."""

    def factory(
        email: str,
        role: str | None = "staff",
        permissions: dict | None = None,
        name: str | None = None,
        is_active: bool = True,
    ) -> User:
        user = User(
            name=name or email.split("@")[0],
            email=email,
            hashed_password=get_password_hash(TEST_PASSWORD),
            is_active=is_active,
            permissions=permissions,
        )
        if role:
            user.role = seed_service.get_role_by_name(db_session, role)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return factory


@pytest.fixture
def staff_user(make_user) -> User:
    """A staff member who can only work with inventory."""
    permissions = default_permissions()
    permissions["inventory"] = True
    return make_user("staff@example.com", role="staff", permissions=permissions)


@pytest.fixture
def admin_user(make_user) -> User:
    """A super admin holding every permission flag."""
    return make_user(
        "admin@example.com", role="super admin", permissions=full_permissions()
    )


@pytest.fixture
def login_as(client):
    """Log the shared test client in as the given user."""

    def do_login(email: str, password: str = TEST_PASSWORD) -> TestClient:
        response = client.post(
            "/api/v1/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200
        return client

    return do_login


@pytest.fixture
def staff_client(login_as, staff_user):
    """Create an authenticated staff test client."""
    return login_as(staff_user.email)


@pytest.fixture
def admin_client(login_as, admin_user):
    """Create an authenticated admin test client."""
    return login_as(admin_user.email)
