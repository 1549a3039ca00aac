# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for httpverify."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeRequest, ProbeResult
from .verify import (
    AttemptOutcome,
    AttemptVerdict,
    RetryPolicy,
    VerificationCriteria,
    VerificationPlan,
    VerificationReport,
    VerifyState,
)

__all__ = [
    "AttemptOutcome",
    "AttemptVerdict",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeRequest",
    "ProbeResult",
    "RetryPolicy",
    "VerificationCriteria",
    "VerificationPlan",
    "VerificationReport",
    "VerifyState",
]
