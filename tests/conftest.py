import logging

import pytest

from url_harvester import config

HARVESTER_ENV_VARS = [
    "URL_HARVESTER_PROXY_URL",
    "URL_HARVESTER_FETCH_TIMEOUT",
    "URL_HARVESTER_FILE_ENCODING",
    "URL_HARVESTER_SHEET_NAME",
    "URL_HARVESTER_CACHE_DIR",
    "GCS_BUCKET",
]


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default configuration."""
    for name in HARVESTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    config.reload_config()
    yield
    config._config = None


@pytest.fixture(autouse=True)
def restore_log_streams():
    """The CLI points log output at stderr; put the original streams back."""
    logger = logging.getLogger("url_harvester")
    saved = [(h, h.stream) for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    yield
    for handler, stream in saved:
        # the redirected stream (e.g. capsys) may already be closed; don't flush it
        handler.stream = stream
