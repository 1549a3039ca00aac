# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers used by input validation."""

from __future__ import annotations

from urllib.parse import urlsplit


def url_path(url: str) -> str:
    """
    Return the path component of `url`.

    urlsplit removes the fragment before the query, so `http://h/a?x=1/#b/`
    yields `/a`.
    """
    return urlsplit(str(url or "")).path


def has_trailing_slash(url: str) -> bool:
    """True when the path ends with `/`; an empty or root path always qualifies."""
    path = url_path(url)
    if path in ("", "/"):
        return True
    return path.endswith("/")


__all__ = ["has_trailing_slash", "url_path"]
