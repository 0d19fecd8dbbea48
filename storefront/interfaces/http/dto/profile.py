# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from storefront.domain.users import UserProfile

from .base import CamelModel


class ProfileDTO(CamelModel):
    user_id: str
    username: str
    email: str
    full_name: str
    created_at: datetime
    last_login_at: datetime | None = None

    @classmethod
    def from_entity(cls, profile: UserProfile) -> ProfileDTO:
        return cls(
            user_id=profile.user_id,
            username=profile.username,
            email=profile.email,
            full_name=profile.full_name,
            created_at=profile.created_at,
            last_login_at=profile.last_login_at,
        )


class ProfileUpdateDTO(CamelModel):
    """Body of ``PUT /profile``; ``user_id`` must name the caller's own profile."""

    user_id: str = Field(min_length=1)
    full_name: str
    email: str
