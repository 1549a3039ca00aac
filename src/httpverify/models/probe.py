# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/result models."""

from dataclasses import dataclass

from ..errors import ErrorCategory


@dataclass(frozen=True)
class ProbeRequest:
    url: str
    timeout: int = 10


@dataclass
class ProbeResult:
    """
    Outcome of a single request attempt.

    When `ok` is False the exchange never completed: `status_code` is None and
    `body` is empty, and only the error fields carry information.
    """

    ok: bool
    status_code: int | None = None
    body: bytes = b""
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    final_url: str | None = None

    @classmethod
    def transport_failure(cls, message: str, *, error_type: str | None = None, category: ErrorCategory = ErrorCategory.UNKNOWN_ERROR) -> "ProbeResult":
        return cls(ok=False, error_message=message, error_type=error_type, error_category=category)
