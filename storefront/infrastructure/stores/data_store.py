# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock

from storefront.domain import DataSubmission
from storefront.shared.logging import logger


class DataSubmissionStore:
    """Append-only bag of client telemetry submissions."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._items: list[DataSubmission] = []

    def add(self, submission: DataSubmission) -> int:
        with self._lock:
            self._items.append(submission)
            total = len(self._items)
        logger.info(
            f"data.add: ok (correlation_id={submission.correlation_id}, total={total})"
        )
        return total

    def list_all(self) -> list[DataSubmission]:
        with self._lock:
            return list(self._items)

    def count(self) -> int:
        with self._lock:
            return len(self._items)


__all__ = ["DataSubmissionStore"]
