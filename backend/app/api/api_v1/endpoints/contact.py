from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.deps import get_mail_transport, get_settings
from app.core.config import Settings
from app.schemas.contact import ContactFailed, ContactSent, ContactStatus, ContactSubmission
from app.services.contact_mail import build_contact_email
from app.services.mail_transport import SmtpTransport

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])

EMAIL_UNAVAILABLE = "Email service not configured or failed to initialize."
MISSING_FIELDS = "Missing required fields: name, email, and message."


def _reply(status_code: int, body: ContactStatus) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def _read_json(request: Request) -> object:
    try:
        return await request.json()
    except ValueError:
        return None


@router.post(
    "/send-email",
    responses={
        200: {"model": ContactSent},
        400: {"model": ContactStatus},
        500: {"model": ContactFailed},
    },
)
async def send_email(
    request: Request,
    transport: Optional[SmtpTransport] = Depends(get_mail_transport),
    config: Settings = Depends(get_settings),
) -> JSONResponse:
    if transport is None:
        return _reply(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ContactStatus(message=EMAIL_UNAVAILABLE),
        )

    payload = await _read_json(request)
    if not isinstance(payload, dict):
        payload = {}
    try:
        submission = ContactSubmission.model_validate(payload)
    except ValidationError:
        logger.info("Rejected contact submission with missing fields")
        return _reply(status.HTTP_400_BAD_REQUEST, ContactStatus(message=MISSING_FIELDS))

    msg = build_contact_email(
        submission,
        account=transport.user,
        sender_name=config.EMAIL_FROM_NAME,
        escape_html=config.EMAIL_ESCAPE_HTML,
    )

    try:
        message_id = await run_in_threadpool(transport.send, msg)
    except Exception as e:
        logger.exception("Error sending email")
        return _reply(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ContactFailed(message="Failed to send email.", error=str(e)),
        )

    logger.info("Message sent: %s", message_id)
    return _reply(
        status.HTTP_200_OK,
        ContactSent(message="Email sent successfully!", message_id=message_id),
    )
