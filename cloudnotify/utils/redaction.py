"""Sensitive data redaction for logged payloads."""

import re

_PATTERNS = [
    re.compile(r"AKIA[0-9A-Z]{16}"),
    re.compile(r"https://hooks\.slack\.com/services/[A-Za-z0-9/_-]+"),
    re.compile(r"(?i)bearer\s+[A-Za-z0-9\-._~+/]+=*"),
    re.compile(r"(?i)(password|secret|token)\s*=\s*[^\s,;]+"),
]


def redact_text(text: str) -> str:
    """Redact likely secrets in arbitrary text."""

    redacted = text
    for pattern in _PATTERNS:
        redacted = pattern.sub("[REDACTED]", redacted)
    return redacted


def redact_object(value):
    """Recursively redact strings within lists/dicts."""

    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, (list, tuple)):
        return [redact_object(item) for item in value]
    if isinstance(value, dict):
        return {k: redact_object(v) for k, v in value.items()}
    return value
