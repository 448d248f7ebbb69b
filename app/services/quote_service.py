# app/services/quote_service.py
from __future__ import annotations

from app.core.errors import NotificationError
from app.core.logging_config import logger
from app.schemas.quote import CostBreakdown, QuoteRequest
from app.services.notifications import MailTransport, dispatch_quote_notifications
from app.services.pricing_engine import compute_breakdown


async def submit_quote(request: QuoteRequest, *, transport: MailTransport) -> CostBreakdown:
    """
    Price the request and email the admin and the customer.

    Returns the breakdown once both emails went out. InvalidInput from the
    pricing engine propagates before anything is sent. When delivery fails
    the NotificationError carries the breakdown, since the price itself is
    still valid.
    """
    breakdown = compute_breakdown(request)

    log = logger.bind(
        client_name=request.client_name,
        city=request.city.value,
        cleaning_type=request.cleaning_type.value,
    )
    log.info(
        "quote_priced",
        property_size=request.property_size,
        total_cost=round(breakdown.total_cost, 2),
    )

    try:
        await dispatch_quote_notifications(request, breakdown, transport=transport)
    except NotificationError as e:
        e.breakdown = breakdown
        log.error("quote_notifications_failed", failed=e.failed)
        raise

    log.info("quote_submitted")
    return breakdown
