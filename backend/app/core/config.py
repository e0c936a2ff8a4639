from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load backend/.env if it exists so local environment variables (e.g. EMAIL_PASS)
# are available without needing to export them manually.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _float_env(key: str, default: float) -> float:
    try:
        return float(os.getenv(key, str(default)))
    except Exception:
        return default


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except Exception:
        return default


def _bool_env(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _optional_env(key: str) -> Optional[str]:
    value = os.getenv(key)
    return value if value else None


class Settings:
    PROJECT_NAME = "Web Dev Hub"

    def __init__(self) -> None:
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _int_env("PORT", 3000)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

        self.STATIC_DIR = os.getenv("STATIC_DIR", str(BASE_DIR / "public"))
        self.INDEX_FILE = os.getenv("INDEX_FILE", "index.html")

        self.EMAIL_SERVICE = _optional_env("EMAIL_SERVICE")
        self.EMAIL_USER = _optional_env("EMAIL_USER")
        self.EMAIL_PASS = _optional_env("EMAIL_PASS")
        self.EMAIL_FROM_NAME = os.getenv("EMAIL_FROM_NAME", "Web Dev Hub Contact")
        self.EMAIL_ESCAPE_HTML = _bool_env("EMAIL_ESCAPE_HTML", True)
        self.SMTP_TIMEOUT_SECONDS = _float_env("SMTP_TIMEOUT_SECONDS", 120.0)

    @property
    def email_credentials_loaded(self) -> bool:
        return bool(self.EMAIL_USER and self.EMAIL_PASS)


settings = Settings()
