# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-attempt probe execution on top of an HttpClient."""

from __future__ import annotations

import logging

from .errors import categorize_exception
from .http.client import HttpClient, create_default_http_client
from .http.models import HttpRequest
from .models.probe import ProbeRequest, ProbeResult

logger = logging.getLogger(__name__)


class ProbeExecutor:
    """Issues exactly one GET per call and reports transport success separately from HTTP status."""

    def __init__(self, http_client: HttpClient | None = None):
        self.http_client = http_client or create_default_http_client()

    def execute(self, request: ProbeRequest) -> ProbeResult:
        http_request = HttpRequest(url=request.url, timeout=request.timeout, allow_redirects=True)
        try:
            response = self.http_client.request(http_request)
        except Exception as exc:  # noqa: BLE001
            return ProbeResult.transport_failure(
                str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                category=categorize_exception(exc),
            )

        if not response.ok:
            return ProbeResult.transport_failure(
                response.error_message or "request failed",
                error_type=response.error_type,
                category=response.error_category,
            )

        if response.meta.get("body_truncated"):
            logger.warning(
                "response body truncated to %s bytes; text checks only see that prefix",
                response.meta.get("body_bytes_limit"),
            )

        return ProbeResult(
            ok=True,
            status_code=response.status_code,
            body=response.content,
            final_url=response.url,
        )
