import json

import httpx
import pytest

from app.core.errors import MailTransportError, TransportUnavailable
from app.schemas.email import EmailPayload
from app.services.mail_transport import MailTransportClient

URL = "http://mail.internal/api/send-email"
PAYLOAD = EmailPayload(to="jane@shine.com", subject="Hi", text="Hello there")


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.anyio
async def test_posts_to_subject_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"message": "Email sent successfully"})

    async with _client(handler) as http:
        await MailTransportClient(URL, client=http).send(PAYLOAD)

    assert seen["url"] == URL
    assert seen["body"] == {"to": "jane@shine.com", "subject": "Hi", "text": "Hello there"}


@pytest.mark.anyio
async def test_non_2xx_raises_with_message():
    def handler(request):
        return httpx.Response(500, json={"message": "Failed to send email: Forbidden"})

    async with _client(handler) as http:
        with pytest.raises(MailTransportError) as exc_info:
            await MailTransportClient(URL, client=http).send(PAYLOAD)

    assert exc_info.value.status_code == 500
    assert "Forbidden" in str(exc_info.value)
    assert not isinstance(exc_info.value, TransportUnavailable)


@pytest.mark.anyio
async def test_non_json_error_body():
    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    async with _client(handler) as http:
        with pytest.raises(MailTransportError, match="Bad Gateway"):
            await MailTransportClient(URL, client=http).send(PAYLOAD)


@pytest.mark.anyio
async def test_unreachable_raises_transport_unavailable():
    def handler(request):
        raise httpx.ConnectError("connection refused")

    async with _client(handler) as http:
        with pytest.raises(TransportUnavailable):
            await MailTransportClient(URL, client=http).send(PAYLOAD)


@pytest.mark.anyio
async def test_without_shared_client(monkeypatch):
    calls = []

    async def fake_post(self, url, **kwargs):
        calls.append((url, kwargs["json"]))
        return httpx.Response(200, json={"message": "ok"})

    monkeypatch.setattr(httpx.AsyncClient, "post", fake_post, raising=True)

    await MailTransportClient(URL).send(PAYLOAD)

    assert calls == [(URL, PAYLOAD.model_dump())]


@pytest.mark.anyio
@pytest.mark.parametrize("body", [["rejected"], "rejected", 42])
async def test_json_error_body_that_is_not_an_object(body):
    def handler(request):
        return httpx.Response(500, json=body)

    async with _client(handler) as http:
        with pytest.raises(MailTransportError) as exc_info:
            await MailTransportClient(URL, client=http).send(PAYLOAD)

    assert exc_info.value.status_code == 500
