"""Catch-all classifier; matches any event."""

import json
from typing import Any

from cloudnotify.classifiers.interfaces import Classifier, sns_record

GENERIC_COLOR = "#7CD197"
_MAX_TEXT_CHARS = 3500


def _pretty(value: Any) -> str:
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return value
    try:
        return json.dumps(value, indent=2, sort_keys=True, default=str)
    except (TypeError, ValueError):
        # mixed key types cannot be sorted; circular structures cannot be encoded
        return repr(value)


def _truncate(text: str) -> str:
    if len(text) <= _MAX_TEXT_CHARS:
        return text
    return text[: _MAX_TEXT_CHARS - 3] + "..."


class GenericClassifier(Classifier):
    """Render any event as a plain Slack attachment."""

    def parse(self, event: Any) -> dict[str, Any]:
        sns = sns_record(event)
        if sns is not None:
            title = sns.get("Subject") or "SNS Notification"
            text = _pretty(sns.get("Message", ""))
            footer = sns.get("TopicArn")
        else:
            title = "Raw Event"
            text = _pretty(event)
            footer = None

        attachment: dict[str, Any] = {
            "fallback": f"{title}: {text}"[:200],
            "color": GENERIC_COLOR,
            "title": title,
            "text": f"```\n{_truncate(text)}\n```",
            "mrkdwn_in": ["text"],
        }
        if footer:
            attachment["footer"] = footer
        return {"attachments": [attachment]}
