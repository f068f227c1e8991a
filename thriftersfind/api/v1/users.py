# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from thriftersfind.api.deps import get_db, require_access
from thriftersfind.models import AdminAction, Branch, Role, User
from thriftersfind.schemas.user import (
    BranchSchema,
    RoleSchema,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from thriftersfind.security import get_password_hash
from thriftersfind.services import admin_log_service

USERS_MODULE = "USERS"

router = APIRouter()


def _audit_snapshot(user: User) -> dict[str, Any]:
    """Fields recorded in the admin log; never includes the password hash."""
    return {
        "name": user.name,
        "email": user.email,
        "role": user.role_name,
        "branch": user.branch.name if user.branch else None,
        "permissions": user.permissions,
        "is_active": user.is_active,
    }


def _resolve_role(db: Session, role_name: str) -> Role:
    role = db.query(Role).filter(Role.name == role_name).first()
    if not role:
        raise HTTPException(status_code=400, detail=f"Unknown role: {role_name}")
    return role


def _resolve_branch(db: Session, branch_id: uuid.UUID) -> Branch:
    branch = db.query(Branch).filter(Branch.id == branch_id).first()
    if not branch:
        raise HTTPException(status_code=400, detail="Unknown branch")
    return branch


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> list[User]:
    """Retrieve all users, newest first."""
    return db.query(User).order_by(User.created_at.desc()).all()


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> User:
    """Create a new user with a role, branch and permission set."""
    existing = db.query(User).filter(User.email == user_in.email).first()
    if existing:
        raise HTTPException(
            status_code=400,
            detail=f'A user with the email "{user_in.email}" already exists.',
        )

    user = User(
        name=user_in.name,
        email=user_in.email,
        hashed_password=get_password_hash(user_in.password),
        is_active=True,
        permissions=user_in.permissions.to_flags() if user_in.permissions else None,
    )
    if user_in.role:
        user.role = _resolve_role(db, user_in.role)
    if user_in.branch_id:
        user.branch = _resolve_branch(db, user_in.branch_id)
    db.add(user)
    db.flush()

    admin_log_service.record_admin_action(
        db,
        action=AdminAction.USER_CREATED,
        module=USERS_MODULE,
        description=f"User {user.name} ({user.email}) was created.",
        performed_by=current_user,
        target_id=str(user.id),
        target_type="USER",
        new_data=_audit_snapshot(user),
    )
    db.commit()
    db.refresh(user)
    return user


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> User:
    """Retrieve a specific user by ID."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.put(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
)
def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> User:
    """Update a user's details, role, branch or permission set."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    previous = _audit_snapshot(user)

    if user_in.email is not None:
        # Check for duplicate email
        existing = (
            db.query(User)
            .filter(User.email == user_in.email, User.id != user_id)
            .first()
        )
        if existing:
            raise HTTPException(status_code=400, detail="Email already in use")
        user.email = user_in.email

    if user_in.is_active is not None:
        # Prevent deactivating yourself
        if user_id == current_user.id and not user_in.is_active:
            raise HTTPException(
                status_code=400, detail="Cannot deactivate your own account"
            )
        user.is_active = user_in.is_active

    if user_in.name is not None:
        user.name = user_in.name
    if user_in.password is not None:
        user.hashed_password = get_password_hash(user_in.password)
    if user_in.role is not None:
        user.role = _resolve_role(db, user_in.role)
    if user_in.branch_id is not None:
        user.branch = _resolve_branch(db, user_in.branch_id)
    if user_in.permissions is not None:
        user.permissions = user_in.permissions.to_flags()

    admin_log_service.record_admin_action(
        db,
        action=AdminAction.USER_UPDATED,
        module=USERS_MODULE,
        description=f"User {user.name} ({user.email}) was updated.",
        performed_by=current_user,
        target_id=str(user.id),
        target_type="USER",
        previous_data=previous,
        new_data=_audit_snapshot(user),
    )
    db.commit()
    db.refresh(user)
    return user


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> None:
    """Delete a user and end their sessions."""
    if user_id == current_user.id:
        raise HTTPException(status_code=400, detail="Cannot delete your own account")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    admin_log_service.record_admin_action(
        db,
        action=AdminAction.USER_DELETED,
        module=USERS_MODULE,
        description=f"User {user.name} ({user.email}) was deleted.",
        performed_by=current_user,
        target_id=str(user.id),
        target_type="USER",
        previous_data=_audit_snapshot(user),
    )
    db.delete(user)
    db.commit()


@router.get("/roles", response_model=list[RoleSchema], summary="List roles")
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> list[Role]:
    return db.query(Role).order_by(Role.name).all()


@router.get("/branches", response_model=list[BranchSchema], summary="List branches")
def list_branches(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_access("/users")),
) -> list[Branch]:
    return db.query(Branch).order_by(Branch.name).all()
