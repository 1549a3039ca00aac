# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

import socket
import ssl as ssl_module
from enum import Enum

import httpx


class VerifyError(Exception):
    """Base class for failures that stop a run before any attempt is made."""


class UsageError(VerifyError):
    """Malformed or missing arguments, bad numeric values, unknown flags."""


class URLShapeError(VerifyError):
    """The URL does not have the shape the caller asked for (trailing slash)."""


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


def _root_cause(exc: BaseException) -> BaseException:
    seen: set[int] = set()
    current = exc
    while id(current) not in seen:
        seen.add(id(current))
        nxt = current.__cause__ or current.__context__
        if nxt is None:
            break
        current = nxt
    return current


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.

    httpx wraps socket and TLS failures in ConnectError, so the underlying cause
    is inspected before falling back to the httpx class.
    """
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, socket.timeout)):
        return ErrorCategory.TIMEOUT

    cause = _root_cause(exc)
    for candidate in (exc, cause):
        if isinstance(candidate, (ssl_module.SSLError, ssl_module.CertificateError)):
            return ErrorCategory.SSL_ERROR
        if isinstance(candidate, (socket.gaierror, socket.herror)):
            return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    return ErrorCategory.UNKNOWN_ERROR


__all__ = [
    "ErrorCategory",
    "URLShapeError",
    "UsageError",
    "VerifyError",
    "categorize_exception",
]
