"""Raw payload normalization."""

import json
import logging
from collections.abc import Mapping

from cloudnotify.config import get_settings
from cloudnotify.domain.models import Event, RawInput
from cloudnotify.errors import MalformedInputError

logger = logging.getLogger(__name__)


def normalize_raw_input(raw: RawInput, *, strict: bool | None = None) -> Event:
    """Decode a JSON text payload into an event.

    Mappings pass through unchanged. Text that is not valid JSON is logged
    and returned as-is so downstream classifiers can still see it, unless
    ``strict`` is enabled, in which case ``MalformedInputError`` is raised.
    """

    if isinstance(raw, Mapping):
        return raw
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw

    if strict is None:
        strict = get_settings().strict_input

    try:
        return json.loads(raw)
    except ValueError as exc:
        text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else raw
        if strict:
            raise MalformedInputError(f"event payload is not valid JSON: {exc}") from exc
        logger.warning("Malformed event JSON, continuing with raw text: %.500s", text)
        return text
