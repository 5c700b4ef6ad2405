"""Test doubles for classifiers and sinks."""

from typing import Any

from cloudnotify.classifiers.interfaces import Classifier
from cloudnotify.domain.models import ClassifierDescriptor


class RecordingSink:
    def __init__(self, fail: bool = False) -> None:
        self.messages: list[Any] = []
        self.fail = fail

    async def deliver(self, message: Any) -> None:
        if self.fail:
            raise RuntimeError("sink down")
        self.messages.append(message)


def fixed(name: str, value: Any, calls: list[str] | None = None) -> ClassifierDescriptor:
    """Descriptor whose classifier always returns ``value``."""

    class _Fixed(Classifier):
        def parse(self, event: Any) -> Any:
            if calls is not None:
                calls.append(name)
            return value

    return ClassifierDescriptor(name=name, factory=_Fixed)


def failing(name: str, calls: list[str] | None = None) -> ClassifierDescriptor:
    class _Failing(Classifier):
        def parse(self, event: Any) -> Any:
            if calls is not None:
                calls.append(name)
            raise KeyError("Sns")

    return ClassifierDescriptor(name=name, factory=_Failing)


def record_type(name: str, wanted: str, message: Any) -> ClassifierDescriptor:
    """Descriptor matching single-record events whose record has ``type == wanted``."""

    class _ByType(Classifier):
        async def parse(self, event: Any) -> Any:
            if not isinstance(event, dict):
                return None
            records = event.get("Records") or []
            if len(records) == 1 and records[0].get("type") == wanted:
                return message
            return None

    return ClassifierDescriptor(name=name, factory=_ByType)


class DecliningClassifier(Classifier):
    def parse(self, event: Any) -> Any:
        return None
