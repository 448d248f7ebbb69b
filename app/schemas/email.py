# app/schemas/email.py
from typing import Optional

from pydantic import BaseModel, ConfigDict


class EmailPayload(BaseModel):
    """What the mail-transport service accepts: one recipient, plain text."""

    model_config = ConfigDict(frozen=True)

    to: str
    subject: str
    text: str


class SendEmailRequest(BaseModel):
    # all optional so the endpoint can answer 400 itself instead of a 422
    to: Optional[str] = None
    subject: Optional[str] = None
    text: Optional[str] = None


class SendEmailResponse(BaseModel):
    message: str
