# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Reference data seeding and super admin repair."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session

from thriftersfind.access.permissions import SUPER_ADMIN_ROLE, STAFF_ROLE, full_permissions
from thriftersfind.models import Branch, Role, User
from thriftersfind.security import get_password_hash

logger = logging.getLogger(__name__)

DEFAULT_BRANCHES = ["Branch 1", "Branch 2"]
DEFAULT_ROLES = [SUPER_ADMIN_ROLE, STAFF_ROLE]
KNOWN_ADMIN_EMAILS = ["superadmin@gmail.com", "admin@thriftersfind.com"]


def get_role_by_name(db: Session, name: str) -> Role | None:
    """Get a role by its name."""
    return db.query(Role).filter(Role.name == name).first()


def get_branch_by_name(db: Session, name: str) -> Branch | None:
    """Get a branch by its name."""
    return db.query(Branch).filter(Branch.name == name).first()


def seed_reference_data(db: Session) -> None:
    """Seeds the database with the default branches and roles.

    This function is idempotent.
    @param db: SQLAlchemy Session object
    """
    for branch_name in DEFAULT_BRANCHES:
        if not get_branch_by_name(db, branch_name):
            db.add(Branch(name=branch_name))

    for role_name in DEFAULT_ROLES:
        if not get_role_by_name(db, role_name):
            db.add(Role(name=role_name))
    db.commit()


def _promote(db: Session, user: User) -> User:
    role = get_role_by_name(db, SUPER_ADMIN_ROLE)
    if role is None:
        seed_reference_data(db)
        role = get_role_by_name(db, SUPER_ADMIN_ROLE)
    user.role_id = role.id
    user.permissions = full_permissions()
    db.commit()
    db.refresh(user)
    return user


def repair_super_admin(
    db: Session, emails: Iterable[str] = KNOWN_ADMIN_EMAILS
) -> User | None:
    """Restore the super admin role and every permission flag on the admin account.

    Looks for the first user whose email is in emails, then falls back to
    any user with "admin" in their email. Returns None when nobody matches.
    """
    emails = list(emails)
    user = None
    for email in emails:
        user = db.query(User).filter(User.email == email).first()
        if user:
            break
    if user is None:
        user = (
            db.query(User)
            .filter(User.email.contains("admin"))
            .order_by(User.created_at)
            .first()
        )
    if user is None:
        logger.warning(f"No admin user found among {emails} or by email pattern")
        return None

    _promote(db, user)
    logger.info(f"Restored super admin permissions for {user.email}")
    return user


def ensure_super_admin(db: Session, name: str, email: str, password: str) -> User:
    """Create the super admin account if the email is not taken yet."""
    user = db.query(User).filter(User.email == email).first()
    if user:
        logger.info(f"User {email} already exists, promoting")
        return _promote(db, user)

    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(password),
        is_active=True,
    )
    db.add(user)
    db.flush()
    _promote(db, user)
    logger.info(f"Created super admin {email}")
    return user
