# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level facade wiring the HTTP client, probe executor and retry controller."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress

from .config import load_http_settings
from .http.client import HttpClient, create_default_http_client
from .models.verify import VerificationPlan, VerificationReport
from .probe import ProbeExecutor
from .verify.controller import RetryController


class HttpVerifier:
    """
    Owns one HTTP client for the lifetime of a verification run.

    Use as a context manager so the client is released on every exit path,
    including interrupts during a sleep or request.
    """

    def __init__(self, http_client: HttpClient | None = None, *, sleep: Callable[[float], None] | None = None):
        self.http_settings = load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.executor = ProbeExecutor(self.http_client)
        self.controller = RetryController(self.executor, sleep=sleep)

    def verify(self, plan: VerificationPlan) -> VerificationReport:
        return self.controller.run(plan)

    def close(self) -> None:
        with suppress(Exception):
            if hasattr(self.http_client, "close"):
                self.http_client.close()

    def __enter__(self) -> HttpVerifier:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()
