from __future__ import annotations

import logging

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from tests.fakes import FakeTransport


def test_settings_defaults(make_settings):
    config = make_settings()

    assert config.PORT == 3000
    assert config.EMAIL_SERVICE is None
    assert config.EMAIL_FROM_NAME == "Web Dev Hub Contact"
    assert config.EMAIL_ESCAPE_HTML is True
    assert config.email_credentials_loaded is False


def test_settings_from_env(make_settings):
    config = make_settings(PORT="8080", EMAIL_USER="a@b.c", EMAIL_PASS="x", EMAIL_ESCAPE_HTML="false")

    assert config.PORT == 8080
    assert config.EMAIL_ESCAPE_HTML is False
    assert config.email_credentials_loaded is True


def test_malformed_numbers_fall_back(make_settings):
    config = make_settings(PORT="abc", SMTP_TIMEOUT_SECONDS="soon")

    assert config.PORT == 3000
    assert config.SMTP_TIMEOUT_SECONDS == 120.0


def test_startup_reports_configuration(make_settings, caplog):
    app = create_app(make_settings(PORT="4000"))

    with caplog.at_level(logging.INFO):
        with TestClient(app):
            pass

    assert "Starting server on http://localhost:4000" in caplog.text
    assert "Email User Loaded: No" in caplog.text


def test_startup_survives_failed_verification(mail_settings):
    transport = FakeTransport(error=OSError("unreachable"))
    app = create_app(mail_settings, transport=transport)

    with TestClient(app) as client:
        resp = client.get("/")

    assert resp.status_code == 200
    assert isinstance(app.state.settings, Settings)


def test_transport_override_is_keyword_only(mail_settings):
    with pytest.raises(TypeError):
        create_app(mail_settings, FakeTransport())

    app = create_app(mail_settings, transport=None)
    assert app.state.mail_transport is None
