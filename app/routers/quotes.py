# app/routers/quotes.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.errors import InvalidInput, NotificationError
from app.schemas.quote import QuoteRequest, QuoteSubmission
from app.services.mail_transport import MailTransportClient
from app.services.notifications import MailTransport
from app.services.quote_service import submit_quote

router = APIRouter(prefix="/api", tags=["quotes"])


def get_mail_transport(request: Request) -> MailTransport:
    # reuse the app-wide httpx client when the lifespan opened one
    client = getattr(request.app.state, "http_client", None)
    return MailTransportClient(client=client)


@router.post("/quotes", response_model=QuoteSubmission)
async def create_quote(
    body: QuoteRequest,
    transport: MailTransport = Depends(get_mail_transport),
):
    try:
        breakdown = await submit_quote(body, transport=transport)
    except InvalidInput as e:
        return JSONResponse(status_code=422, content={"detail": str(e)})
    except NotificationError as e:
        # price is valid, only the emails failed: let the client show it anyway
        content = {
            "detail": "Your quote was calculated, but the confirmation email could not be sent.",
            "failed": e.failed,
        }
        if e.breakdown is not None:
            content["breakdown"] = e.breakdown.model_dump(by_alias=True)
            content["totalCost"] = e.breakdown.total_cost
        return JSONResponse(status_code=502, content=content)

    return QuoteSubmission(breakdown=breakdown, total_cost=breakdown.total_cost)
