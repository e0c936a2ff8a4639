from __future__ import annotations

from typing import Optional

from fastapi import Request

from app.core.config import Settings
from app.services.mail_transport import SmtpTransport


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mail_transport(request: Request) -> Optional[SmtpTransport]:
    return request.app.state.mail_transport
