# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Verification loop exports."""

from .controller import RetryController
from .verdict import evaluate_attempt

__all__ = ["RetryController", "evaluate_attempt"]
