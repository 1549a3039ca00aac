# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpverify CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn

from ..errors import UsageError, VerifyError
from ..log import setup_logging
from ..runtime import HttpVerifier
from ..validation import build_plan

logger = logging.getLogger(__name__)

_EPILOG = """\
All diagnostics are written to stderr. Exit status is 0 when the endpoint
verified and 1 on any argument error or when every attempt failed.
"""


_VALUE_OPTIONS = frozenset({"--contains", "--retries", "--interval", "--timeout"})


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems as UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="verify",
        usage="%(prog)s <url> <expected_status> [options]",
        description="Poll a URL until it returns the expected status (and body text) or retries run out.",
        epilog=_EPILOG,
        allow_abbrev=False,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", help="URL to request")
    parser.add_argument("expected_status", help="expected HTTP status code (3 digits)")
    parser.add_argument(
        "--contains",
        action="append",
        default=[],
        metavar="TEXT",
        help="text the response body must contain (exact match, repeatable)",
    )
    parser.add_argument(
        "--require-trailing-slash",
        action="store_true",
        help="require the URL path to end with '/'",
    )
    parser.add_argument("--retries", metavar="COUNT", help="number of attempts (default: 10)")
    parser.add_argument("--interval", metavar="SECONDS", help="wait between attempts, decimals allowed (default: 3)")
    parser.add_argument("--timeout", metavar="SECONDS", help="per-request timeout (default: 10)")
    return parser


def bind_option_values(argv: list[str]) -> list[str]:
    """
    Attach the token after each value option to it as `--opt=value`.

    argparse refuses values that start with `-`, but `--contains -->` or
    `--contains --version` are legitimate body checks.
    """
    bound: list[str] = []
    index = 0
    while index < len(argv):
        token = argv[index]
        if token in _VALUE_OPTIONS and index + 1 < len(argv):
            bound.append(f"{token}={argv[index + 1]}")
            index += 2
            continue
        bound.append(token)
        index += 1
    return bound


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help(sys.stdout)
        return 1

    try:
        args = parser.parse_args(bind_option_values(argv))
        plan = build_plan(
            args.url,
            args.expected_status,
            contains=args.contains,
            require_trailing_slash=args.require_trailing_slash,
            retries=args.retries,
            interval=args.interval,
            timeout=args.timeout,
        )
    except VerifyError as exc:
        logger.error("%s", exc)
        return 1

    with HttpVerifier() as verifier:
        report = verifier.verify(plan)

    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
