"""Notification sinks and dispatch result handling."""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import httpx

from cloudnotify.config import Settings, get_settings
from cloudnotify.domain.models import DispatchResult, Exhausted, Forwarded, SuppressedResult
from cloudnotify.errors import NotificationDeliveryError
from cloudnotify.utils.redaction import redact_object

logger = logging.getLogger(__name__)


class NotificationSink(ABC):
    @abstractmethod
    async def deliver(self, message: Any) -> None:
        raise NotImplementedError


class ConsoleSink(NotificationSink):
    """Log messages instead of posting them; used when no webhook is set."""

    async def deliver(self, message: Any) -> None:
        logger.info("[cloudnotify] %s", json.dumps(redact_object(message), default=str))


class SlackSink(NotificationSink):
    """Post messages to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        *,
        channel: str | None = None,
        username: str | None = None,
        icon_emoji: str | None = None,
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.webhook_url = webhook_url
        self.defaults = {
            key: value
            for key, value in (("channel", channel), ("username", username), ("icon_emoji", icon_emoji))
            if value
        }
        self.timeout = timeout
        self._transport = transport

    def build_body(self, message: Any) -> dict[str, Any]:
        if isinstance(message, str):
            message = {"text": message}
        elif not isinstance(message, Mapping):
            message = {"text": json.dumps(message, default=str)}
        return {**self.defaults, **message}

    async def deliver(self, message: Any) -> None:
        body = self.build_body(message)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.webhook_url, json=body)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NotificationDeliveryError(f"Slack notify failed: {exc}") from exc


def build_sink(settings: Settings | None = None) -> NotificationSink:
    """Pick the Slack sink when a webhook is configured, else the console."""

    settings = settings or get_settings()
    if settings.slack_webhook_url:
        return SlackSink(
            settings.slack_webhook_url,
            channel=settings.slack_channel,
            username=settings.slack_username,
            icon_emoji=settings.slack_icon_emoji,
            timeout=settings.slack_timeout_seconds,
        )
    return ConsoleSink()


class ResultConsumer:
    """Turn dispatch results into deliveries or diagnostics."""

    def __init__(self, sink: NotificationSink | None = None) -> None:
        self.sink = sink or build_sink()

    async def __call__(self, result: DispatchResult) -> None:
        await self.consume(result)

    async def consume(self, result: DispatchResult) -> None:
        label = "event" if result.record_index is None else f"event[{result.record_index}]"
        if isinstance(result, Forwarded):
            logger.info(
                "Delivering message via %s from Classifier[%s] for %s: %s",
                type(self.sink).__name__,
                result.classifier_name,
                label,
                json.dumps(redact_object(result.message), default=str),
            )
            await self.sink.deliver(result.message)
        elif isinstance(result, SuppressedResult):
            logger.warning("Classifier[%s] force-ignored %s", result.classifier_name, label)
        elif isinstance(result, Exhausted):
            logger.info("No classifier matched %s", label)
