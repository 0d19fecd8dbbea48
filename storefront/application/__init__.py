# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services.credentials import SharedPasswordChecker

__all__ = ["SharedPasswordChecker"]
