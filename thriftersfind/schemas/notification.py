# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Notification schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    """Schema for notification response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    message: str
    type: str
    user_id: Optional[uuid.UUID] = None
    read: bool
    created_at: datetime.datetime


class MarkAllReadResponse(BaseModel):
    """How many notifications a mark-all-read call changed."""

    updated: int
