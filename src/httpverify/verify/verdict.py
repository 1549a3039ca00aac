# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pure pass/fail evaluation of a single attempt."""

from __future__ import annotations

from ..models.probe import ProbeResult
from ..models.verify import AttemptOutcome, AttemptVerdict, VerificationCriteria


def evaluate_attempt(result: ProbeResult, criteria: VerificationCriteria, attempt: int = 1) -> AttemptOutcome:
    """
    Decide whether one probe result satisfies the criteria.

    Checks run in a fixed order and stop at the first failure: transport,
    then status, then each required substring in the order given.
    """
    if not result.ok:
        return AttemptOutcome(attempt=attempt, result=result, verdict=AttemptVerdict.TRANSPORT_FAILURE)

    if result.status_code != criteria.expected_status:
        return AttemptOutcome(attempt=attempt, result=result, verdict=AttemptVerdict.STATUS_MISMATCH)

    for text in criteria.required_substrings:
        # argv bytes that are not UTF-8 arrive as lone surrogates; map them back to the raw bytes.
        if text.encode("utf-8", "surrogateescape") not in result.body:
            return AttemptOutcome(
                attempt=attempt,
                result=result,
                verdict=AttemptVerdict.CONTENT_MISMATCH,
                missing_substring=text,
            )

    return AttemptOutcome(attempt=attempt, result=result, verdict=AttemptVerdict.PASSED)


__all__ = ["evaluate_attempt"]
