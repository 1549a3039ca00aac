# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used by the probe executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..errors import ErrorCategory

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """Normalized request representation consumed by HttpClient implementations."""

    url: str
    method: str = "GET"
    headers: Headers | None = None
    timeout: float | None = None
    allow_redirects: bool = True


@dataclass
class HttpResponse:
    """
    Normalized HTTP response.

    `ok` reports whether the exchange itself completed; an HTTP error status
    still yields `ok=True`.
    """

    ok: bool
    status_code: int | None = None
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    error_category: ErrorCategory = ErrorCategory.NONE
    meta: dict[str, Any] = field(default_factory=dict)
