from __future__ import annotations

from app.schemas.contact import ContactFailed, ContactSent, ContactStatus, ContactSubmission

__all__ = [
    "ContactSubmission",
    "ContactStatus",
    "ContactSent",
    "ContactFailed",
]
