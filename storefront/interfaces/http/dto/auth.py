# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from pydantic import Field

from storefront.domain.users import AuthResult

from .base import CamelModel


class LoginRequestDTO(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponseDTO(CamelModel):
    success: bool
    token: str | None = None
    username: str | None = None
    user_id: str | None = None
    message: str

    @classmethod
    def from_result(cls, result: AuthResult) -> LoginResponseDTO:
        return cls(
            success=result.success,
            token=result.token,
            username=result.username,
            user_id=result.user_id,
            message=result.message,
        )


class MessageDTO(CamelModel):
    message: str
