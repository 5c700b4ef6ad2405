"""Domain types for classification and dispatch."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

# A decoded event is normally a mapping; undecodable text is passed on as-is.
Event = Any
RawInput = Union[Mapping[str, Any], str, bytes]
Message = dict[str, Any]


@dataclass(frozen=True)
class ClassifierDescriptor:
    """Named entry of the classifier chain."""

    name: str
    factory: Callable[[], Any]


@dataclass(frozen=True)
class NoMatch:
    """Classifier declined the event."""


@dataclass(frozen=True)
class Suppressed:
    """Classifier recognized the event and asked for no notification."""


@dataclass(frozen=True)
class Matched:
    """Classifier recognized the event and produced a message."""

    message: Any


ParseOutcome = Union[NoMatch, Suppressed, Matched]


@dataclass(frozen=True)
class Forwarded:
    message: Any
    classifier_name: str
    record_index: int | None = None


@dataclass(frozen=True)
class SuppressedResult:
    classifier_name: str
    record_index: int | None = None


@dataclass(frozen=True)
class Exhausted:
    last_attempted: str | None = None
    record_index: int | None = None


DispatchResult = Union[Forwarded, SuppressedResult, Exhausted]


class DispatchSummary(BaseModel):
    """Serializable outcome of one dispatched record."""

    outcome: Literal["forwarded", "suppressed", "exhausted"]
    classifier: str | None = None
    last_attempted: str | None = None
    record_index: int | None = None


class EventIngestResponse(BaseModel):
    status: Literal["accepted"] = "accepted"
    results: list[DispatchSummary] = Field(default_factory=list)


def summarize(result: DispatchResult) -> DispatchSummary:
    """Convert a dispatch result into its API representation."""

    if isinstance(result, Forwarded):
        return DispatchSummary(outcome="forwarded", classifier=result.classifier_name, record_index=result.record_index)
    if isinstance(result, SuppressedResult):
        return DispatchSummary(outcome="suppressed", classifier=result.classifier_name, record_index=result.record_index)
    return DispatchSummary(outcome="exhausted", last_attempted=result.last_attempted, record_index=result.record_index)
