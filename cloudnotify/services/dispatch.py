"""Classifier chain dispatch."""

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Mapping, Sequence
from typing import Any

from cloudnotify.classifiers.registry import load_classifier_chain
from cloudnotify.domain.models import (
    ClassifierDescriptor,
    DispatchResult,
    Event,
    Exhausted,
    Forwarded,
    Matched,
    NoMatch,
    ParseOutcome,
    Suppressed,
    SuppressedResult,
)

logger = logging.getLogger(__name__)


def classify_outcome(value: Any) -> ParseOutcome:
    """Map a classifier return value onto NoMatch / Suppressed / Matched.

    ``True`` and structurally empty mappings or sequences suppress; any
    other falsy value declines; everything else is a message.
    """

    if value is True:
        return Suppressed()
    if isinstance(value, (Mapping, Sequence)) and len(value) == 0:
        return Suppressed()
    if not value:
        return NoMatch()
    return Matched(message=value)


def split_records(event: Event) -> list[Event]:
    """Split a batched event into single-record events sharing its envelope."""

    if not isinstance(event, Mapping):
        return [event]
    records = event.get("Records")
    if not isinstance(records, list) or len(records) <= 1:
        return [event]
    return [{**event, "Records": [record]} for record in records]


class DispatchEngine:
    """Try classifiers in order and keep the first definitive outcome."""

    def __init__(self, classifiers: Sequence[ClassifierDescriptor] | None = None) -> None:
        if classifiers is None:
            classifiers = load_classifier_chain()
        self._classifiers = tuple(classifiers)

    @property
    def classifiers(self) -> tuple[ClassifierDescriptor, ...]:
        return self._classifiers

    async def dispatch(self, event: Event, *, record_index: int | None = None) -> DispatchResult:
        """Classify a single event."""

        last_attempted: str | None = None
        for descriptor in self._classifiers:
            last_attempted = descriptor.name
            try:
                value = descriptor.factory().parse(event)
                if inspect.isawaitable(value):
                    value = await value
                outcome = classify_outcome(value)
            except Exception:
                logger.exception("Error parsing event [classifier:%s]", descriptor.name)
                continue

            if isinstance(outcome, NoMatch):
                continue
            if isinstance(outcome, Suppressed):
                logger.warning(
                    "Classifier[%s] is force-ignoring event%s",
                    descriptor.name,
                    _record_suffix(record_index),
                )
                return SuppressedResult(classifier_name=descriptor.name, record_index=record_index)
            return Forwarded(message=outcome.message, classifier_name=descriptor.name, record_index=record_index)

        logger.info("No classifier matched event%s (last attempted: %s)", _record_suffix(record_index), last_attempted)
        return Exhausted(last_attempted=last_attempted, record_index=record_index)

    async def iter_results(self, event: Event) -> AsyncIterator[DispatchResult]:
        """Dispatch each record of ``event`` in order, one at a time."""

        parts = split_records(event)
        if len(parts) == 1:
            yield await self.dispatch(parts[0])
            return
        for index, part in enumerate(parts):
            yield await self.dispatch(part, record_index=index)

    async def run(
        self,
        event: Event,
        consume: Callable[[DispatchResult], Awaitable[None]] | None = None,
    ) -> list[DispatchResult]:
        """Dispatch every record, consuming each result before the next record."""

        results: list[DispatchResult] = []
        async for result in self.iter_results(event):
            if consume is not None:
                await consume(result)
            results.append(result)
        return results


def _record_suffix(record_index: int | None) -> str:
    return "" if record_index is None else f"[{record_index}]"
