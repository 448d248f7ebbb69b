# app/services/notifications.py
from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Protocol

from app.core.errors import NotificationError
from app.core.logging_config import logger
from app.core.settings import settings
from app.schemas.email import EmailPayload
from app.schemas.quote import CostBreakdown, QuoteRequest

CUSTOMER_SUBJECT = "Your CleanQuote Cleaning Service Quote"


class MailTransport(Protocol):
    async def send(self, payload: EmailPayload) -> None: ...


def _money(amount: float) -> str:
    return f"${amount:.2f}"


def _number(value: float) -> str:
    # 5000.0 -> "5000", 1250.5 -> "1250.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def _services(request: QuoteRequest) -> str:
    if not request.additional_services:
        return "None"
    return ", ".join(s.value for s in request.additional_services)


def admin_subject(request: QuoteRequest) -> str:
    return f"New Cleaning Quote Request - {request.client_name}"


def format_admin_body(request: QuoteRequest, breakdown: CostBreakdown) -> str:
    """Everything the office needs to follow up: all request fields and the full breakdown."""
    parts: List[str] = [
        "New quote request details:",
        "",
        "Client Information:",
        "-------------------",
        f"Client Name: {request.client_name}",
        f"Email: {request.email}",
        f"Address: {request.address}",
        f"City: {request.city.value}",
        "",
        "Quote Details:",
        "--------------",
        f"Property Size: {_number(request.property_size)} sq ft",
        f"Cleaning Type: {request.cleaning_type.value}",
        f"Service Frequency: {request.service_frequency.value}",
        f"Additional Services: {_services(request)}",
        "",
        "Quote Result:",
        "-------------",
        f"Total Cost: {_money(breakdown.total_cost)}",
        "",
        "Breakdown:",
        f"  Base Cost: {_money(breakdown.base_cost)}",
        f"  Labor Cost: {_money(breakdown.labor_cost)}",
        f"  Supplies Cost: {_money(breakdown.supplies_cost)}",
        f"  Specialized Cost: {_money(breakdown.specialized_cost)}",
        f"  Overhead Cost: {_money(breakdown.overhead_cost)}",
        f"  Travel Cost: {_money(breakdown.travel_cost)}",
        "",
        "Please review this quote and follow up with the client as needed.",
    ]
    return "\n".join(parts)


def format_customer_body(
    request: QuoteRequest,
    breakdown: CostBreakdown,
    *,
    contact_email: Optional[str] = None,
    contact_phone: Optional[str] = None,
) -> str:
    contact_email = contact_email or settings.CONTACT_EMAIL
    contact_phone = contact_phone or settings.CONTACT_PHONE

    parts: List[str] = [
        f"Dear {request.client_name},",
        "",
        "Thank you for requesting a quote from CleanQuote. "
        "We're pleased to provide you with the following summary:",
        "",
        "Quote Summary:",
        "--------------",
        f"Total Cost: {_money(breakdown.total_cost)}",
        f"Property Size: {_number(request.property_size)} sq ft",
        f"Cleaning Type: {request.cleaning_type.value}",
        f"Service Frequency: {request.service_frequency.value}",
        "",
        "We'd love the opportunity to discuss this quote with you in more detail "
        "and answer any questions you may have. Would you like to schedule a quick "
        "phone call to finalize your quote?",
        "",
        "To set up an appointment, please reply to this email with your preferred "
        "date and time.",
        "",
        "If you have any immediate questions, please don't hesitate to reach out to "
        f"us at {contact_email} or call us at {contact_phone}.",
        "",
        "We look forward to the possibility of serving you and keeping your space spotless!",
        "",
        "Best regards,",
        "The CleanQuote Team",
    ]
    return "\n".join(parts)


def build_admin_email(
    request: QuoteRequest,
    breakdown: CostBreakdown,
    *,
    admin_email: Optional[str] = None,
) -> EmailPayload:
    return EmailPayload(
        to=admin_email or settings.ADMIN_EMAIL,
        subject=admin_subject(request),
        text=format_admin_body(request, breakdown),
    )


def build_customer_email(request: QuoteRequest, breakdown: CostBreakdown) -> EmailPayload:
    return EmailPayload(
        to=str(request.email),
        subject=CUSTOMER_SUBJECT,
        text=format_customer_body(request, breakdown),
    )


async def dispatch_quote_notifications(
    request: QuoteRequest,
    breakdown: CostBreakdown,
    *,
    transport: MailTransport,
) -> None:
    """
    Send the admin and the customer email at the same time.

    Both sends are always awaited: a failing admin email does not cancel the
    customer email (and vice versa). If either failed, raises
    NotificationError naming the failed email(s). No retries.
    """
    emails: Dict[str, EmailPayload] = {
        "admin": build_admin_email(request, breakdown),
        "customer": build_customer_email(request, breakdown),
    }

    results = await asyncio.gather(
        *(transport.send(payload) for payload in emails.values()),
        return_exceptions=True,
    )

    failures: Dict[str, Exception] = {}
    for kind, result in zip(emails, results):
        if isinstance(result, Exception):
            failures[kind] = result
            logger.warning(
                "notification_failed",
                email=kind,
                to=emails[kind].to,
                error=str(result),
                error_type=type(result).__name__,
            )
        elif isinstance(result, BaseException):
            # CancelledError and friends are not ours to swallow
            raise result
        else:
            logger.info("notification_sent", email=kind, to=emails[kind].to)

    if failures:
        raise NotificationError(failures)
