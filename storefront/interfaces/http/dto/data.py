# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from decimal import Decimal

from storefront.domain import DataSubmission

from .base import CamelModel, JsonDecimal


class DataSubmissionDTO(CamelModel):
    correlation_id: str = ""
    session_name: str = ""
    notes: str = ""
    numeric_value: JsonDecimal = Decimal(0)

    @classmethod
    def from_entity(cls, submission: DataSubmission) -> DataSubmissionDTO:
        return cls(
            correlation_id=submission.correlation_id,
            session_name=submission.session_name,
            notes=submission.notes,
            numeric_value=submission.numeric_value,
        )

    def to_entity(self) -> DataSubmission:
        return DataSubmission(
            correlation_id=self.correlation_id,
            session_name=self.session_name,
            notes=self.notes,
            numeric_value=self.numeric_value,
        )
