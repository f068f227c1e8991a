# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Branch model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from thriftersfind.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from thriftersfind.models.user import User


class Branch(Base, TimestampMixin):
    """A physical store branch users and stock movements belong to."""

    __tablename__ = "branches"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    users: Mapped[list[User]] = relationship("User", back_populates="branch")
