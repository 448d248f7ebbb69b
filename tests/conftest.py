import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.errors import MailTransportError
from app.core.rate_limit import limiter
from app.main import app
from app.schemas.email import EmailPayload
from app.schemas.quote import QuoteRequest

# rate limits get in the way of repeated calls in tests
limiter.enabled = False


class FakeTransport:
    """Records every payload; fails for recipients listed in `fail_for`."""

    def __init__(self, fail_for: Optional[List[str]] = None, delay: float = 0.0):
        self.fail_for = set(fail_for or [])
        self.delay = delay
        self.sent: List[EmailPayload] = []
        self.attempted: List[str] = []

    async def send(self, payload: EmailPayload) -> None:
        self.attempted.append(payload.to)
        if self.delay:
            await asyncio.sleep(self.delay)
        if payload.to in self.fail_for:
            raise MailTransportError(
                "mail_transport_failed:500:Failed to send email: rejected",
                status_code=500,
            )
        self.sent.append(payload)


@pytest.fixture
def anyio_backend():
    # asyncio only, no trio needed
    return "asyncio"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_request():
    def _make(**overrides) -> QuoteRequest:
        data = {
            "clientName": "Acme Offices",
            "email": "facilities@acme-offices.com",
            "address": "12 Main St",
            "city": "Queens",
            "propertySize": 5000,
            "cleaningType": "basic",
            "serviceFrequency": "weekly",
            "additionalServices": [],
        }
        data.update(overrides)
        return QuoteRequest.model_validate(data)

    return _make


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def make_transport():
    return FakeTransport
