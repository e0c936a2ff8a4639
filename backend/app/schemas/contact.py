from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ContactSubmission(BaseModel):
    name: StrictStr = Field(min_length=1)
    email: StrictStr = Field(min_length=1)
    message: StrictStr = Field(min_length=1)


class ContactStatus(BaseModel):
    message: str


class ContactSent(ContactStatus):
    model_config = ConfigDict(populate_by_name=True)

    message_id: str = Field(alias="messageId")


class ContactFailed(ContactStatus):
    error: str
