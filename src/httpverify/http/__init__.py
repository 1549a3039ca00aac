# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import has_trailing_slash, url_path

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "create_default_http_client",
    "has_trailing_slash",
    "url_path",
]
