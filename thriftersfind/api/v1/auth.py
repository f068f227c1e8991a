# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from thriftersfind.api.deps import get_current_user, get_db
from thriftersfind.config import settings
from thriftersfind.models import User
from thriftersfind.schemas.auth import AuthResponse, LoginRequest
from thriftersfind.schemas.user import UserProfileUpdate, UserResponse
from thriftersfind.security import get_password_hash, verify_password
from thriftersfind.services import auth_service

router = APIRouter()


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> AuthResponse:
    """Login with email and password."""
    user = auth_service.authenticate(db, data.email, data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    user_id = user.id
    token = auth_service.create_session(db, user_id)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        max_age=86400 * settings.SESSION_EXPIRY_DAYS,
        path="/",
    )

    # Re-query user after session creation commit to avoid expired object error
    user = auth_service.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="User not found after session creation",
        )

    return AuthResponse(user=UserResponse.model_validate(user))


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> None:
    """Logout current user."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        auth_service.delete_session(db, token)
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME, path="/")


@router.get("/me", response_model=AuthResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> AuthResponse:
    """Get current authenticated user."""
    return AuthResponse(user=UserResponse.model_validate(current_user))


@router.put("/me", response_model=AuthResponse)
def update_current_user_profile(
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AuthResponse:
    """Update current user's profile."""
    # If changing password, verify current password first
    if data.new_password:
        if not data.current_password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is required to change password",
            )
        if not verify_password(data.current_password, current_user.hashed_password):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Current password is incorrect",
            )
        current_user.hashed_password = get_password_hash(data.new_password)

    if data.name is not None:
        current_user.name = data.name

    db.commit()
    db.refresh(current_user)

    return AuthResponse(user=UserResponse.model_validate(current_user))
