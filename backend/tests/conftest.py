from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from tests.fakes import FakeTransport

ENV_KEYS = (
    "PORT",
    "EMAIL_SERVICE",
    "EMAIL_USER",
    "EMAIL_PASS",
    "EMAIL_FROM_NAME",
    "EMAIL_ESCAPE_HTML",
    "SMTP_TIMEOUT_SECONDS",
    "INDEX_FILE",
)


@pytest.fixture
def site_dir(tmp_path):
    root = tmp_path / "public"
    root.mkdir()
    (root / "index.html").write_text("<html><body>home</body></html>")
    (root / "styles.css").write_text("body { color: black; }")
    return root


@pytest.fixture
def make_settings(monkeypatch, site_dir):
    def _make(**env: str) -> Settings:
        for key in ENV_KEYS:
            monkeypatch.delenv(key, raising=False)
        monkeypatch.setenv("STATIC_DIR", str(site_dir))
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return Settings()

    return _make


@pytest.fixture
def mail_settings(make_settings):
    return make_settings(EMAIL_SERVICE="gmail", EMAIL_USER="owner@example.com", EMAIL_PASS="secret")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(mail_settings, transport):
    return TestClient(create_app(mail_settings, transport=transport))
