"""Invocation entrypoints: async ``handle_event`` and a Lambda-style ``handler``."""

import asyncio
import json
import logging
from functools import lru_cache
from typing import Any

from cloudnotify.config import get_settings
from cloudnotify.domain.models import DispatchResult, RawInput
from cloudnotify.services.dispatch import DispatchEngine
from cloudnotify.services.normalization import normalize_raw_input
from cloudnotify.services.notifier import NotificationSink, ResultConsumer
from cloudnotify.utils.redaction import redact_object

logger = logging.getLogger(__name__)


@lru_cache
def default_engine() -> DispatchEngine:
    """Engine over the configured chain, built once per process."""

    return DispatchEngine()


def _describe(raw: RawInput) -> str:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return redact_object(raw)
    return json.dumps(redact_object(raw), indent=2, default=str)


async def handle_event(
    raw: RawInput,
    *,
    engine: DispatchEngine | None = None,
    sink: NotificationSink | None = None,
) -> list[DispatchResult]:
    """Normalize, dispatch and deliver one inbound payload."""

    settings = get_settings()
    if settings.log_incoming_events:
        logger.info("Incoming event: %s", _describe(raw))

    event = normalize_raw_input(raw, strict=settings.strict_input)
    engine = engine or default_engine()
    consumer = ResultConsumer(sink)
    return await engine.run(event, consumer)


def handler(event: Any, context: Any = None) -> None:
    """Lambda entrypoint. Returns nothing on success; re-raises on failure."""

    _ = context
    try:
        asyncio.run(handle_event(event))
    except Exception:
        logger.exception("Event handling failed")
        raise
