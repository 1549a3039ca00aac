# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Input validation.

Turns raw command-line values into a VerificationPlan, or raises before any
network activity. Values arrive as strings; options left as None fall back to
VerifyDefaults and are checked by the same rules.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .config import VerifyDefaults, load_verify_defaults
from .errors import URLShapeError, UsageError
from .http.url import has_trailing_slash
from .models.verify import RetryPolicy, VerificationCriteria, VerificationPlan

_STATUS_RE = re.compile(r"^[0-9]{3}$")
_INTEGER_RE = re.compile(r"^[0-9]+$")
_NUMBER_RE = re.compile(r"^[0-9]+([.][0-9]+)?$")

# Largest wait every platform time_t can express.
MAX_INTERVAL_SECONDS = 2**31 - 1


def _default_text(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_expected_status(raw: str) -> int:
    if not _STATUS_RE.fullmatch(raw):
        raise UsageError("expected status must be a 3-digit number")
    return int(raw)


def parse_positive_int(raw: str, option: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise UsageError(f"{option} must be a non-negative integer")
    value = int(raw)
    if value < 1:
        raise UsageError(f"{option} must be 1 or greater")
    return value


def parse_interval(raw: str, option: str = "--interval") -> float:
    if not _NUMBER_RE.fullmatch(raw):
        raise UsageError(f"{option} must be a non-negative number")
    value = float(raw)
    if value > MAX_INTERVAL_SECONDS:
        raise UsageError(f"{option} must be at most {MAX_INTERVAL_SECONDS} seconds")
    return value


def check_trailing_slash(url: str) -> None:
    try:
        ok = has_trailing_slash(url)
    except ValueError as exc:
        raise URLShapeError(f"cannot read URL path ({exc}): {url}") from exc
    if not ok:
        raise URLShapeError(f"URL path must end with a trailing slash: {url}")


def build_plan(
    url: str | None,
    expected_status: str | None,
    *,
    contains: Iterable[str] = (),
    require_trailing_slash: bool = False,
    retries: str | None = None,
    interval: str | None = None,
    timeout: str | None = None,
    defaults: VerifyDefaults | None = None,
) -> VerificationPlan:
    """Validate raw inputs and build the plan consumed by the retry controller."""
    if not url:
        raise UsageError("a URL is required")
    if not expected_status:
        raise UsageError("an expected status code is required")

    defaults = defaults or load_verify_defaults()
    status = parse_expected_status(expected_status)
    max_attempts = parse_positive_int(retries if retries is not None else _default_text(defaults.retries), "--retries")
    request_timeout = parse_positive_int(timeout if timeout is not None else _default_text(defaults.timeout), "--timeout")
    wait = parse_interval(interval if interval is not None else _default_text(defaults.interval))

    if require_trailing_slash:
        check_trailing_slash(url)

    return VerificationPlan(
        url=url,
        criteria=VerificationCriteria(
            expected_status=status,
            required_substrings=tuple(contains),
            require_trailing_slash=require_trailing_slash,
        ),
        policy=RetryPolicy(max_attempts=max_attempts, interval=wait, timeout=request_timeout),
    )


__all__ = [
    "build_plan",
    "check_trailing_slash",
    "parse_expected_status",
    "parse_interval",
    "parse_positive_int",
]
