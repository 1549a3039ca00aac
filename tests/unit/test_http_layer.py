# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import itertools
import logging

import httpx

from httpverify.config import HttpSettings
from httpverify.errors import ErrorCategory
from httpverify.http import StubHttpClient, create_default_http_client
from httpverify.http.httpx_client import HttpxClient
from httpverify.http.models import HttpRequest, HttpResponse
from httpverify.models import ProbeRequest
from httpverify.probe import ProbeExecutor


def _client(handler, settings=None):
    settings = settings or HttpSettings(user_agent="UA/1.0")
    transport = httpx.MockTransport(handler)
    return HttpxClient(settings, client=httpx.Client(transport=transport, follow_redirects=True))


def test_httpx_client_success_keeps_error_statuses():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(503, content=b"maintenance")

    client = _client(handler)
    resp = client.request(HttpRequest(url="http://example/health", timeout=2))
    assert resp.ok is True
    assert resp.status_code == 503
    assert resp.content == b"maintenance"
    assert resp.error_category is ErrorCategory.NONE
    assert seen[0].headers["User-Agent"] == "UA/1.0"
    assert seen[0].method == "GET"


def test_httpx_client_follows_redirects():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "http://example/new/"})
        return httpx.Response(200, content=b"moved here")

    resp = _client(handler).request(HttpRequest(url="http://example/old"))
    assert resp.status_code == 200
    assert resp.url == "http://example/new/"
    assert resp.content == b"moved here"


def test_httpx_client_truncates_body_to_limit():
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(200, content=b"a" * 50)

    resp = _client(handler, HttpSettings(max_body_bytes=10)).request(HttpRequest(url="http://example/"))
    assert resp.content == b"a" * 10
    assert resp.meta["body_truncated"] is True
    assert resp.meta["body_bytes_limit"] == 10


def test_httpx_client_converts_transport_errors():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    resp = _client(handler).request(HttpRequest(url="http://example/"))
    assert resp.ok is False
    assert resp.status_code is None
    assert resp.error_message == "Connection refused"
    assert resp.error_type == "ConnectError"
    assert resp.error_category is ErrorCategory.CONNECTION_ERROR


def test_httpx_client_timeout_is_categorized():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    resp = _client(handler).request(HttpRequest(url="http://example/", timeout=1))
    assert resp.ok is False
    assert resp.error_category is ErrorCategory.TIMEOUT


def test_httpx_client_enforces_wall_clock_deadline(monkeypatch):
    from httpverify.http import httpx_client as module

    ticks = itertools.count(0.0, 5.0)
    monkeypatch.setattr(module.time, "monotonic", lambda: next(ticks))

    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(200, content=b"slow body")

    resp = _client(handler).request(HttpRequest(url="http://example/", timeout=1))
    assert resp.ok is False
    assert resp.error_category is ErrorCategory.TIMEOUT
    assert "timed out after 1 seconds" in resp.error_message


def test_httpx_client_close_closes_underlying_client():
    inner = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    client = HttpxClient(HttpSettings(), client=inner)
    client.close()
    assert inner.is_closed


def test_create_default_http_client_uses_settings():
    settings = HttpSettings(verify_ssl=False)
    client = create_default_http_client(settings)
    try:
        assert isinstance(client, HttpxClient)
        assert client.settings is settings
        assert client._client.follow_redirects is True
    finally:
        client.close()


def test_stub_http_client_replays_in_order():
    stub = StubHttpClient()
    stub.add("http://example", HttpResponse(ok=True, status_code=503), HttpResponse(ok=True, status_code=200))
    assert stub.request(HttpRequest(url="http://example")).status_code == 503
    assert stub.request(HttpRequest(url="http://example")).status_code == 200
    assert stub.request(HttpRequest(url="http://example")).status_code == 200
    missing = stub.request(HttpRequest(url="http://missing"))
    assert missing.ok is False
    assert len(stub.requests) == 4
    stub.close()
    assert stub.closed is True


def test_executor_maps_success_and_failure():
    stub = StubHttpClient(
        {
            "http://up/": [HttpResponse(ok=True, status_code=404, content=b"not here", url="http://up/")],
            "http://down/": [
                HttpResponse(
                    ok=False,
                    error_message="Name or service not known",
                    error_type="ConnectError",
                    error_category=ErrorCategory.DNS_ERROR,
                )
            ],
        }
    )
    executor = ProbeExecutor(stub)

    up = executor.execute(ProbeRequest(url="http://up/", timeout=3))
    assert up.ok is True
    assert up.status_code == 404
    assert up.body == b"not here"
    assert up.final_url == "http://up/"
    assert stub.requests[0].timeout == 3
    assert stub.requests[0].method == "GET"
    assert stub.requests[0].allow_redirects is True

    down = executor.execute(ProbeRequest(url="http://down/"))
    assert down.ok is False
    assert down.status_code is None
    assert down.body == b""
    assert down.error_category is ErrorCategory.DNS_ERROR
    assert down.error_message == "Name or service not known"


def test_executor_converts_client_exceptions():
    class Exploding:
        def request(self, request):  # noqa: ARG002
            raise RuntimeError("boom")

        def close(self):
            return None

    result = ProbeExecutor(Exploding()).execute(ProbeRequest(url="http://x/"))
    assert result.ok is False
    assert result.error_message == "boom"
    assert result.error_type == "RuntimeError"
    assert result.error_category is ErrorCategory.UNKNOWN_ERROR


def test_executor_warns_when_body_was_truncated(caplog):
    def handler(request: httpx.Request) -> httpx.Response:  # noqa: ARG001
        return httpx.Response(200, content=b"b" * 64)

    executor = ProbeExecutor(_client(handler, HttpSettings(max_body_bytes=16)))
    with caplog.at_level(logging.WARNING):
        result = executor.execute(ProbeRequest(url="http://example/big"))
    assert result.ok is True
    assert result.body == b"b" * 16
    assert "response body truncated to 16 bytes" in caplog.text


def test_executor_reports_final_url_after_redirect():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/app":
            return httpx.Response(302, headers={"Location": "http://example/app/"})
        return httpx.Response(200, content=b"ok")

    result = ProbeExecutor(_client(handler)).execute(ProbeRequest(url="http://example/app"))
    assert result.status_code == 200
    assert result.final_url == "http://example/app/"
