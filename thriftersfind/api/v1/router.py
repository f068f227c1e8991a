# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from thriftersfind.api.v1 import access, admin, auth, inventory, notifications, users

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Navigation and page access routes
api_router.include_router(access.router, prefix="/access", tags=["access"])

# Inventory routes
api_router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])

# Admin audit log routes
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])

# Notification routes
api_router.include_router(
    notifications.router, prefix="/notifications", tags=["notifications"]
)

# User management routes
api_router.include_router(users.router, tags=["users"])
