# app/core/errors.py
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from app.schemas.quote import CostBreakdown


class QuoteError(RuntimeError):
    pass


class InvalidInput(QuoteError, ValueError):
    """A quote request field violates its constraint. Nothing was priced or sent."""


class MailTransportError(QuoteError):
    """One submission to the mail-transport service failed."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportUnavailable(MailTransportError):
    """The mail-transport service could not be reached at all."""


class NotificationError(QuoteError):
    """
    At least one of the quote emails did not go out.

    `failures` maps the email kind ("admin", "customer") to the error that
    stopped it. `breakdown` is attached by the quote service so callers can
    still show the price.
    """

    def __init__(
        self,
        failures: Dict[str, Exception],
        *,
        breakdown: Optional["CostBreakdown"] = None,
    ):
        self.failures = dict(failures)
        self.breakdown = breakdown
        detail = ", ".join(f"{kind}: {exc}" for kind, exc in self.failures.items())
        super().__init__(f"quote_notification_failed:{detail}")

    @property
    def failed(self) -> list[str]:
        return list(self.failures)
