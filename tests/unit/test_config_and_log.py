# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from httpverify import config
from httpverify.config import DEFAULT_USER_AGENT, HttpSettings, VerifyDefaults
from httpverify.log import setup_logging


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HTTPVERIFY_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HTTPVERIFY_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("HTTPVERIFY_HTTP_MAX_BODY_BYTES", "1024")

    settings = config.load_http_settings()

    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.verify_ssl is False
    assert settings.max_body_bytes == 1024


def test_http_settings_defaults_and_invalid_values(monkeypatch):
    monkeypatch.setenv("HTTPVERIFY_HTTP_MAX_BODY_BYTES", "-5")
    settings = config.load_http_settings()
    assert settings.max_body_bytes == HttpSettings.max_body_bytes
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert settings.verify_ssl is True

    monkeypatch.setenv("HTTPVERIFY_HTTP_MAX_BODY_BYTES", "lots")
    assert config.load_http_settings().max_body_bytes == HttpSettings.max_body_bytes


def test_verify_defaults_read_env_at_call_time(monkeypatch):
    assert config.load_verify_defaults() == VerifyDefaults(retries=10, interval=3, timeout=10)

    monkeypatch.setenv("HTTPVERIFY_RETRIES", "4")
    monkeypatch.setenv("HTTPVERIFY_INTERVAL", "0.25")
    monkeypatch.setenv("HTTPVERIFY_TIMEOUT", "2")
    defaults = config.load_verify_defaults()
    assert defaults.retries == 4
    assert defaults.interval == 0.25
    assert defaults.timeout == 2

    monkeypatch.setenv("HTTPVERIFY_RETRIES", "ten")
    assert config.load_verify_defaults().retries == VerifyDefaults.retries


def test_setup_logging_uses_tagged_format(monkeypatch):
    captured = {}

    def fake_basic_config(**kwargs):
        captured.update(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    monkeypatch.setenv("HTTPVERIFY_LOG_LEVEL", "debug")
    setup_logging()
    assert captured["level"] == logging.DEBUG
    assert captured["format"].startswith("[verify] ")

    setup_logging("bogus")
    assert captured["level"] == logging.INFO
