# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Verification domain models: criteria, retry policy, verdicts and reports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .probe import ProbeResult

SNIPPET_BYTES = 200


@dataclass(frozen=True)
class VerificationCriteria:
    expected_status: int
    required_substrings: tuple[str, ...] = ()
    require_trailing_slash: bool = False


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 10
    interval: float = 3.0
    timeout: int = 10


@dataclass(frozen=True)
class VerificationPlan:
    """Validated inputs for one verification run."""

    url: str
    criteria: VerificationCriteria
    policy: RetryPolicy


class AttemptVerdict(str, Enum):
    PASSED = "PASSED"
    TRANSPORT_FAILURE = "TRANSPORT_FAILURE"
    STATUS_MISMATCH = "STATUS_MISMATCH"
    CONTENT_MISMATCH = "CONTENT_MISMATCH"


class VerifyState(str, Enum):
    ATTEMPTING = "ATTEMPTING"
    SUCCEEDED = "SUCCEEDED"
    EXHAUSTED_FAILED = "EXHAUSTED_FAILED"


@dataclass
class AttemptOutcome:
    attempt: int
    result: ProbeResult
    verdict: AttemptVerdict
    missing_substring: str | None = None

    @property
    def passed(self) -> bool:
        return self.verdict is AttemptVerdict.PASSED


@dataclass
class VerificationReport:
    """Terminal result of a verification run."""

    url: str
    state: VerifyState
    attempts: int
    last_outcome: AttemptOutcome | None = None
    last_status: int | None = None
    last_body: bytes = b""

    @property
    def succeeded(self) -> bool:
        return self.state is VerifyState.SUCCEEDED

    @property
    def exit_code(self) -> int:
        return 0 if self.succeeded else 1

    @property
    def last_status_text(self) -> str:
        return str(self.last_status) if self.last_status is not None else "unknown"

    @property
    def body_snippet(self) -> str:
        """First bytes of the last captured body with newlines flattened to spaces."""
        head = self.last_body[:SNIPPET_BYTES].decode("utf-8", errors="replace")
        return head.replace("\n", " ")
