# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for httpverify."""

from __future__ import annotations

import logging
import os

LOG_TAG = "[verify]"


def default_log_level() -> str:
    return os.getenv("HTTPVERIFY_LOG_LEVEL", "INFO").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI use; everything goes to stderr."""
    effective_level = (level or default_log_level()).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.INFO),
        format=f"{LOG_TAG} %(message)s",
    )


__all__ = ["LOG_TAG", "setup_logging"]
