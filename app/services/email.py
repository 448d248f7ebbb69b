# app/services/email.py
from __future__ import annotations

from typing import Optional

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.core.settings import settings


class EmailError(RuntimeError):
    pass


def send_sendgrid_email(
    *,
    to: str,
    subject: str,
    text_body: str,
    client: Optional[SendGridAPIClient] = None,
) -> Optional[str]:
    """
    Send a plain-text email through SendGrid.

    Returns the SendGrid message id when the response carries one.
    Raises EmailError on failure.
    """
    if not settings.SENDGRID_API_KEY:
        raise EmailError("sendgrid_not_configured: SENDGRID_API_KEY missing")
    if not settings.SENDGRID_FROM_EMAIL:
        raise EmailError("sendgrid_not_configured: SENDGRID_FROM_EMAIL missing")

    message = Mail(
        from_email=settings.SENDGRID_FROM_EMAIL,
        to_emails=to,
        subject=subject,
        plain_text_content=text_body,
    )

    sg = client or SendGridAPIClient(settings.SENDGRID_API_KEY)
    try:
        r = sg.send(message)
    except Exception as e:
        # python-http-client raises HTTPError subclasses for 4xx/5xx
        raise EmailError(f"sendgrid_send_failed:{type(e).__name__}:{e}") from e

    if r.status_code >= 300:
        raise EmailError(f"sendgrid_send_failed:{r.status_code}:{r.body}")

    headers = getattr(r, "headers", None) or {}
    return headers.get("X-Message-Id")
