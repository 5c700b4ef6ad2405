"""FastAPI app entrypoint."""

from fastapi import FastAPI, HTTPException, Request, status

from cloudnotify.config import configure_logging
from cloudnotify.domain.models import EventIngestResponse, summarize
from cloudnotify.errors import MalformedInputError, NotificationDeliveryError
from cloudnotify.handler import default_engine, handle_event

app = FastAPI(title="Cloud Event Notifier")


@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    app.state.engine = default_engine()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/v1/events", status_code=status.HTTP_202_ACCEPTED, response_model=EventIngestResponse)
async def post_event(request: Request) -> EventIngestResponse:
    body = await request.body()
    engine = getattr(request.app.state, "engine", None)
    sink = getattr(request.app.state, "sink", None)
    try:
        results = await handle_event(body, engine=engine, sink=sink)
    except MalformedInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
    except NotificationDeliveryError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return EventIngestResponse(results=[summarize(result) for result in results])
