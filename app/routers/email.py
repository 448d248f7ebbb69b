# app/routers/email.py
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.logging_config import logger
from app.core.rate_limit import limiter
from app.core.settings import settings
from app.schemas.email import SendEmailRequest, SendEmailResponse
from app.services.email import EmailError, send_sendgrid_email

router = APIRouter(prefix="/api", tags=["email"])


@router.post("/send-email", response_model=SendEmailResponse)
@limiter.limit(settings.SEND_EMAIL_RATE_LIMIT)
def send_email(request: Request, body: SendEmailRequest):
    to = (body.to or "").strip()
    subject = (body.subject or "").strip()
    text = body.text or ""

    if not to or not subject or not text.strip():
        return JSONResponse(status_code=400, content={"message": "Missing required fields"})

    try:
        message_id = send_sendgrid_email(to=to, subject=subject, text_body=text)
    except EmailError as e:
        logger.error("email_send_failed", to=to, error=str(e))
        return JSONResponse(
            status_code=500,
            content={"message": f"Failed to send email: {e}"},
        )

    logger.info("email_sent", to=to, message_id=message_id)
    return {"message": "Email sent successfully"}
