from __future__ import annotations

import enum
import logging
import smtplib
import ssl
from contextlib import contextmanager
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Iterator, Optional

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Provider(str, enum.Enum):
    GMAIL = "gmail"
    OUTLOOK = "outlook"
    UNSUPPORTED = "unsupported"


_PROVIDER_ALIASES = {
    "gmail": Provider.GMAIL,
    "outlook": Provider.OUTLOOK,
    "outlook365": Provider.OUTLOOK,
    "hotmail": Provider.OUTLOOK,
}


@dataclass(frozen=True)
class TransportSettings:
    host: str
    port: int
    implicit_tls: bool
    ciphers: Optional[str] = None


PROVIDER_SETTINGS = {
    Provider.GMAIL: TransportSettings(host="smtp.gmail.com", port=465, implicit_tls=True),
    # Some older Office 365 relays only negotiate the legacy cipher list.
    Provider.OUTLOOK: TransportSettings(
        host="smtp.office365.com",
        port=587,
        implicit_tls=False,
        ciphers="SSLv3",
    ),
}


def resolve_provider(name: Optional[str]) -> Provider:
    if not name:
        return Provider.UNSUPPORTED
    return _PROVIDER_ALIASES.get(name.strip().lower(), Provider.UNSUPPORTED)


class SmtpTransport:
    """Submits messages to one SMTP provider with a fixed account.

    Every call opens its own connection, so a single instance can be shared by
    concurrent requests.
    """

    def __init__(
        self,
        provider: Provider,
        options: TransportSettings,
        user: str,
        password: str,
        timeout: float = 120.0,
    ) -> None:
        self.provider = provider
        self.options = options
        self.user = user
        self._password = password
        self.timeout = timeout

    def _ssl_context(self) -> ssl.SSLContext:
        context = ssl.create_default_context()
        if self.options.ciphers:
            context.set_ciphers(self.options.ciphers)
        return context

    @contextmanager
    def _session(self) -> Iterator[smtplib.SMTP]:
        host, port = self.options.host, self.options.port
        context = self._ssl_context()
        if self.options.implicit_tls:
            server: smtplib.SMTP = smtplib.SMTP_SSL(host, port, context=context, timeout=self.timeout)
        else:
            server = smtplib.SMTP(host, port, timeout=self.timeout)

        with server:
            if not self.options.implicit_tls:
                server.starttls(context=context)
            server.login(self.user, self._password)
            yield server

    def verify(self) -> None:
        """Connect and authenticate without sending anything. Raises on failure."""
        with self._session():
            pass

    def send(self, message: EmailMessage) -> str:
        with self._session() as server:
            server.send_message(message)
        return message["Message-ID"]


def build_transport(config: Settings) -> Optional[SmtpTransport]:
    """Return a transport for the configured provider, or None when mail is disabled."""
    if not config.email_credentials_loaded:
        logger.error("Email user or password not set. Email sending will not work.")
        return None

    provider = resolve_provider(config.EMAIL_SERVICE)
    if provider is Provider.UNSUPPORTED:
        logger.error(
            "Unsupported email service: %s. Please use 'Gmail' or 'Outlook'.",
            config.EMAIL_SERVICE,
        )
        return None

    options = PROVIDER_SETTINGS[provider]
    logger.info(
        "Mail transport configured for %s via %s:%s",
        provider.value,
        options.host,
        options.port,
    )
    return SmtpTransport(
        provider,
        options,
        user=config.EMAIL_USER,
        password=config.EMAIL_PASS,
        timeout=config.SMTP_TIMEOUT_SECONDS,
    )


def verify_transport(transport: SmtpTransport) -> bool:
    try:
        transport.verify()
    except Exception as e:
        logger.error("Mail transport verification failed: %s", e)
        return False

    logger.info(
        "Mail transport configured for %s and ready to send messages.",
        transport.provider.value,
    )
    return True
