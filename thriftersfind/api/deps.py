# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging
from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from thriftersfind.access import can_access
from thriftersfind.config import settings
from thriftersfind.database import get_db
from thriftersfind.models import User
from thriftersfind.services import auth_service

logger = logging.getLogger(__name__)

__all__ = ["get_current_user", "get_db", "require_access"]


def _session_token(request: Request) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from session cookie."""
    token = _session_token(request)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, token)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    user = auth_service.get_user_by_id(db, session_obj.user_id)
    if not user or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found or inactive",
        )

    return user


def require_access(page_path: str) -> Callable[..., User]:
    """Dependency that admits users allowed to open page_path."""

    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if not can_access(page_path, current_user.permissions, current_user.role_name):
            logger.info(f"Access to {page_path} denied for {current_user.email}")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )
        return current_user

    return dependency
