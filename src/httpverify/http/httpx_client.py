# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import time

import httpx

from ..config import HttpSettings, load_http_settings
from ..errors import categorize_exception
from .client import HttpClient
from .models import HttpRequest, HttpResponse

DEFAULT_TIMEOUT = 10.0


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=DEFAULT_TIMEOUT,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", self.settings.user_agent)
        timeout = request.timeout if request.timeout is not None else DEFAULT_TIMEOUT

        try:
            max_body_bytes = self.settings.max_body_bytes
            if max_body_bytes <= 0:
                max_body_bytes = 16 * 1024 * 1024

            # httpx timeouts apply per operation; the deadline caps the whole exchange.
            deadline = time.monotonic() + timeout

            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if time.monotonic() > deadline:
                        raise httpx.ReadTimeout(
                            f"Operation timed out after {timeout:g} seconds",
                            request=resp.request,
                        )
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if remaining <= 0:
                        truncated = True
                        break
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                content=bytes(content),
                url=str(resp.url),
                meta={
                    "body_truncated": truncated,
                    "body_bytes_read": len(content),
                    "body_bytes_limit": max_body_bytes,
                },
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                error_category=categorize_exception(exc),
            )

    def close(self) -> None:
        self._client.close()
