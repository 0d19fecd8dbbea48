# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Query-string modifiers applied to store results at the HTTP boundary."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from operator import attrgetter
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, field_validator

from .base import as_utc

T = TypeVar("T")


class ListQuery(BaseModel):
    """``sort=desc`` (any case) reverses id order; anything else is ascending.

    ``limit`` that is missing, unparseable, zero or negative means unbounded.
    """

    sort: str = "asc"
    limit: int | None = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("sort", mode="before")
    @classmethod
    def _lower_sort(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower() or "asc"
        return value

    @field_validator("limit", mode="before")
    @classmethod
    def _blank_limit(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return value

    @property
    def descending(self) -> bool:
        return self.sort == "desc"

    def apply(self, items: Sequence[T]) -> list[T]:
        result = list(items)
        if self.descending:
            result.sort(key=attrgetter("id"), reverse=True)
        if self.limit is not None and self.limit > 0:
            result = result[: self.limit]
        return result


class CartListQuery(ListQuery):
    startdate: datetime | None = None
    enddate: datetime | None = None

    @field_validator("startdate", "enddate", mode="before")
    @classmethod
    def _blank_date(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("startdate", "enddate", mode="after")
    @classmethod
    def _utc_date(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None

    @property
    def has_date_range(self) -> bool:
        return self.startdate is not None or self.enddate is not None
