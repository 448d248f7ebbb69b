# app/services/mail_transport.py
from __future__ import annotations

from typing import Optional

import httpx

from app.core.errors import MailTransportError, TransportUnavailable
from app.core.settings import settings
from app.schemas.email import EmailPayload


class MailTransportClient:
    """
    Posts {to, subject, text} to the mail-transport service (/api/send-email).

    Pass an httpx.AsyncClient to share connections; otherwise one is opened
    per send.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.url = url or settings.MAIL_TRANSPORT_URL
        self.timeout = timeout if timeout is not None else settings.MAIL_TRANSPORT_TIMEOUT
        self._client = client

    async def send(self, payload: EmailPayload) -> None:
        try:
            if self._client is not None:
                r = await self._post(self._client, payload)
            else:
                async with httpx.AsyncClient() as client:
                    r = await self._post(client, payload)
        except httpx.TransportError as e:
            raise TransportUnavailable(
                f"mail_transport_unreachable:{type(e).__name__}:{e}"
            ) from e

        if r.status_code >= 300:
            # the transport answers {"message": "..."}
            try:
                data = r.json()
            except ValueError:
                data = None
            message = (data.get("message") if isinstance(data, dict) else None) or r.text
            raise MailTransportError(
                f"mail_transport_failed:{r.status_code}:{message}",
                status_code=r.status_code,
            )

    async def _post(self, client: httpx.AsyncClient, payload: EmailPayload) -> httpx.Response:
        return await client.post(
            self.url,
            json=payload.model_dump(),
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
