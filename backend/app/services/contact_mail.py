from __future__ import annotations

import html
from email.message import EmailMessage
from email.utils import formataddr, make_msgid

from app.schemas.contact import ContactSubmission


def _domain_of(address: str) -> str | None:
    _, _, domain = address.rpartition("@")
    return domain or None


def render_text(submission: ContactSubmission) -> str:
    return (
        "You have a new message from:\n"
        f"Name: {submission.name}\n"
        f"Email: {submission.email}\n\n"
        f"Message:\n{submission.message}"
    )


def render_html(submission: ContactSubmission, *, escape: bool = True) -> str:
    name, email, message = submission.name, submission.email, submission.message
    if escape:
        name = html.escape(name)
        email = html.escape(email)
        message = html.escape(message)

    return (
        "<h3>New Contact Form Submission</h3>\n"
        f"<p><strong>Name:</strong> {name}</p>\n"
        f'<p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>\n'
        "<p><strong>Message:</strong></p>\n"
        f"<p>{message}</p>\n"
    )


def build_contact_email(
    submission: ContactSubmission,
    *,
    account: str,
    sender_name: str,
    escape_html: bool = True,
) -> EmailMessage:
    """Notification for the site operator: sent from and to the service account."""
    msg = EmailMessage()
    msg["Subject"] = f"New Contact Form Submission from {submission.name}"
    msg["From"] = formataddr((sender_name, account))
    msg["To"] = account
    msg["Message-ID"] = make_msgid(domain=_domain_of(account))

    msg.set_content(render_text(submission))
    msg.add_alternative(render_html(submission, escape=escape_html), subtype="html")
    return msg
