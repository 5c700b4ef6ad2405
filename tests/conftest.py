import os

import pytest

os.environ.setdefault("LOG_INCOMING_EVENTS", "true")
os.environ.pop("SLACK_WEBHOOK_URL", None)
os.environ.pop("CLASSIFIER_CHAIN_PATH", None)

from cloudnotify.config import get_settings  # noqa: E402
from cloudnotify.handler import default_engine  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    default_engine.cache_clear()
    yield
    get_settings.cache_clear()
    default_engine.cache_clear()
