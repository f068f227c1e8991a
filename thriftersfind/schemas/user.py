# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User, role and branch schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_LENGTH = 72


class PermissionSetSchema(BaseModel):
    """Per-feature access flags, serialized with their stored camelCase names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    dashboard: bool = False
    orders: bool = False
    batches: bool = False
    inventory: bool = False
    customers: bool = False
    reports: bool = False
    users: bool = False
    settings: bool = False
    admin_manage: bool = False
    stations: bool = False
    pre_orders: bool = False
    warehouses: bool = False
    sales: bool = False

    @field_validator("*", mode="before")
    @classmethod
    def null_flag_is_false(cls, value):
        # Stored sets may carry null flags; they read as not granted
        return False if value is None else value

    def to_flags(self) -> dict[str, bool]:
        """Dump to the dict shape stored on the user row."""
        return self.model_dump(by_alias=True)


class RoleSchema(BaseModel):
    """Schema representing a role."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str


class BranchSchema(BaseModel):
    """Schema representing a branch."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str


class UserCreate(BaseModel):
    """Schema for creating a user."""

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=PASSWORD_MAX_LENGTH)
    role: Optional[str] = None
    branch_id: Optional[uuid.UUID] = None
    permissions: Optional[PermissionSetSchema] = None


class UserUpdate(BaseModel):
    """Schema for updating a user (admin use)."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8, max_length=PASSWORD_MAX_LENGTH)
    role: Optional[str] = None
    branch_id: Optional[uuid.UUID] = None
    permissions: Optional[PermissionSetSchema] = None
    is_active: Optional[bool] = None


class UserProfileUpdate(BaseModel):
    """Schema for updating user's own profile."""

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    current_password: Optional[str] = None
    new_password: Optional[str] = Field(
        None, min_length=8, max_length=PASSWORD_MAX_LENGTH
    )


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    is_active: bool
    role: Optional[RoleSchema] = None
    branch: Optional[BranchSchema] = None
    permissions: Optional[PermissionSetSchema] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime
