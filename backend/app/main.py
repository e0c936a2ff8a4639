from __future__ import annotations

import asyncio
import enum
import logging
from typing import Optional, Union

import uvicorn
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool

from app.api.api_v1.api import api_router
from app.core.config import Settings, settings
from app.core.static_files import FallbackStaticFiles
from app.services.mail_transport import SmtpTransport, build_transport, verify_transport

logger = logging.getLogger(__name__)


class _Unset(enum.Enum):
    TOKEN = 0


_UNSET = _Unset.TOKEN


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    config: Optional[Settings] = None,
    *,
    transport: Union[SmtpTransport, None, _Unset] = _UNSET,
) -> FastAPI:
    """Build the site application.

    ``transport`` overrides the SMTP transport resolved from ``config``; pass
    ``None`` to run with mail disabled.
    """
    config = config or settings
    mail_transport: Optional[SmtpTransport] = (
        build_transport(config) if isinstance(transport, _Unset) else transport
    )

    # Every GET outside the API belongs to the static site, docs paths included.
    app = FastAPI(
        title=config.PROJECT_NAME,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = config
    app.state.mail_transport = mail_transport

    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info("Starting server on http://localhost:%s", config.PORT)
        logger.info("Email User Loaded: %s", "Yes" if config.EMAIL_USER else "No")
        if mail_transport is not None:
            # Verification must not hold up startup.
            app.state.verify_task = asyncio.create_task(
                run_in_threadpool(verify_transport, mail_transport)
            )

    app.include_router(api_router)
    app.mount(
        "/",
        FallbackStaticFiles(directory=config.STATIC_DIR, index_file=config.INDEX_FILE),
        name="static",
    )

    return app


def run() -> None:
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
