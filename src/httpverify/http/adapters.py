# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Programmable HttpClient used by tests and embedders."""

from __future__ import annotations

from collections.abc import Iterable

from .client import HttpClient
from .models import HttpRequest, HttpResponse


class StubHttpClient(HttpClient):
    """
    Deterministic HttpClient that replays queued responses.

    Responses queued for a URL are returned in order; the last one repeats once
    the queue is drained. Unknown URLs produce a transport failure.
    """

    def __init__(self, responses: dict[str, Iterable[HttpResponse]] | None = None):
        self._responses: dict[str, list[HttpResponse]] = {
            url: list(items) for url, items in (responses or {}).items()
        }
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, *responses: HttpResponse) -> None:
        self._responses.setdefault(url, []).extend(responses)

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        queue = self._responses.get(request.url)
        if not queue:
            return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    def close(self) -> None:
        self.closed = True
