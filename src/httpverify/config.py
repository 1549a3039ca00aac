# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for httpverify."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"httpverify/{__version__} (deployment verification probe)"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client defaults."""

    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("HTTPVERIFY_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        return cls(
            user_agent=os.getenv("HTTPVERIFY_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("HTTPVERIFY_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
        )


@dataclass
class VerifyDefaults:
    """Fallback values for options not given on the command line.

    These are not validated here; the input validator applies the same rules
    to them as to command-line values.
    """

    retries: int = 10
    interval: float = 3
    timeout: int = 10

    @classmethod
    def from_env(cls) -> "VerifyDefaults":
        return cls(
            retries=_int_env("HTTPVERIFY_RETRIES", cls.retries),
            interval=_float_env("HTTPVERIFY_INTERVAL", cls.interval),
            timeout=_int_env("HTTPVERIFY_TIMEOUT", cls.timeout),
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()


def load_verify_defaults() -> VerifyDefaults:
    """Load retry/interval/timeout defaults from environment."""
    return VerifyDefaults.from_env()
