# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Retry controller: polls the target until it verifies or the attempt budget runs out."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..models.probe import ProbeRequest
from ..models.verify import (
    AttemptOutcome,
    AttemptVerdict,
    VerificationPlan,
    VerificationReport,
    VerifyState,
)
from ..probe import ProbeExecutor
from .verdict import evaluate_attempt

logger = logging.getLogger(__name__)


class RetryController:
    """
    Sequential state machine over ATTEMPTING -> SUCCEEDED | EXHAUSTED_FAILED.

    Each attempt re-executes the full request; only the status and body of the
    most recent completed exchange are kept for the exhaustion summary.
    """

    def __init__(self, executor: ProbeExecutor, *, sleep: Callable[[float], None] | None = None):
        self.executor = executor
        self._sleep = sleep or time.sleep

    def run(self, plan: VerificationPlan) -> VerificationReport:
        policy = plan.policy
        state = VerifyState.ATTEMPTING
        attempt = 1
        last_outcome: AttemptOutcome | None = None
        last_status: int | None = None
        last_body = b""

        while state is VerifyState.ATTEMPTING:
            result = self.executor.execute(ProbeRequest(url=plan.url, timeout=policy.timeout))
            outcome = evaluate_attempt(result, plan.criteria, attempt)
            last_outcome = outcome
            if result.ok:
                last_status = result.status_code
                last_body = result.body

            self._log_outcome(outcome, plan)
            if outcome.passed:
                state = VerifyState.SUCCEEDED
            elif attempt >= policy.max_attempts:
                state = VerifyState.EXHAUSTED_FAILED
            else:
                self._sleep(policy.interval)
                attempt += 1

        report = VerificationReport(
            url=plan.url,
            state=state,
            attempts=attempt,
            last_outcome=last_outcome,
            last_status=last_status,
            last_body=last_body,
        )
        if state is VerifyState.EXHAUSTED_FAILED:
            self._log_exhaustion(report)
        return report

    def _log_outcome(self, outcome: AttemptOutcome, plan: VerificationPlan) -> None:
        prefix = f"attempt {outcome.attempt}/{plan.policy.max_attempts}"
        result = outcome.result
        if outcome.verdict is AttemptVerdict.TRANSPORT_FAILURE:
            logger.warning("%s: request failed (%s: %s)", prefix, result.error_category.value, result.error_message)
        elif outcome.verdict is AttemptVerdict.STATUS_MISMATCH:
            logger.warning(
                "%s: status mismatch (expected=%s, actual=%s)",
                prefix,
                plan.criteria.expected_status,
                result.status_code,
            )
        elif outcome.verdict is AttemptVerdict.CONTENT_MISMATCH:
            logger.warning("%s: expected text not found in body: %s", prefix, outcome.missing_substring)
        elif result.final_url and result.final_url != plan.url:
            logger.info("success: %s status=%s (redirected to %s)", plan.url, result.status_code, result.final_url)
        else:
            logger.info("success: %s status=%s", plan.url, result.status_code)

    def _log_exhaustion(self, report: VerificationReport) -> None:
        logger.error("final status: %s", report.last_status_text)
        last = report.last_outcome
        if last is not None and last.verdict is AttemptVerdict.TRANSPORT_FAILURE:
            logger.error("final error: %s", last.result.error_message)
        logger.error("final response head: %s", report.body_snippet)


__all__ = ["RetryController"]
