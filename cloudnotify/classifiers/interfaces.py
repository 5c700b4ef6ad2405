"""Classifier contract."""

from abc import ABC, abstractmethod
from typing import Any


class Classifier(ABC):
    """Recognize one event format and optionally build a chat message.

    ``parse`` may be a plain or a coroutine method. It returns a falsy value
    to decline, ``True`` or an empty mapping/sequence to suppress the
    notification, or a non-empty message to forward.
    """

    @abstractmethod
    def parse(self, event: Any) -> Any:
        raise NotImplementedError


def sns_record(event: Any) -> dict[str, Any] | None:
    """Return the SNS payload of a single-record envelope, if any."""

    if not isinstance(event, dict):
        return None
    records = event.get("Records")
    if not isinstance(records, list) or len(records) != 1:
        return None
    record = records[0]
    if not isinstance(record, dict):
        return None
    sns = record.get("Sns")
    return sns if isinstance(sns, dict) else None
