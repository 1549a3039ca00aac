# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
httpverify package entrypoint.

End-to-end HTTP verification probe for deployment pipelines: poll a URL until
it answers with the expected status (and, optionally, body text) or the retry
budget is spent. HTTP behavior is abstracted behind an injectable client
interface, and domain objects are modeled with typed dataclasses.
"""

from .config import HttpSettings, VerifyDefaults, load_http_settings, load_verify_defaults
from .errors import ErrorCategory, URLShapeError, UsageError, VerifyError
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .models import (
    AttemptOutcome,
    AttemptVerdict,
    ProbeRequest,
    ProbeResult,
    RetryPolicy,
    VerificationCriteria,
    VerificationPlan,
    VerificationReport,
    VerifyState,
)
from .probe import ProbeExecutor
from .runtime import HttpVerifier
from .validation import build_plan
from .verify import RetryController, evaluate_attempt
from .version import __version__

__all__ = [
    "AttemptOutcome",
    "AttemptVerdict",
    "ErrorCategory",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpVerifier",
    "HttpxClient",
    "ProbeExecutor",
    "ProbeRequest",
    "ProbeResult",
    "RetryController",
    "RetryPolicy",
    "StubHttpClient",
    "URLShapeError",
    "UsageError",
    "VerificationCriteria",
    "VerificationPlan",
    "VerificationReport",
    "VerifyDefaults",
    "VerifyError",
    "VerifyState",
    "build_plan",
    "create_default_http_client",
    "evaluate_attempt",
    "load_http_settings",
    "load_verify_defaults",
    "setup_logging",
    "__version__",
]
