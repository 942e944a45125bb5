"""
Harvester configuration.

Values come from environment variables (a local .env file is loaded first):

    URL_HARVESTER_PROXY_URL=https://api.allorigins.win/get
    URL_HARVESTER_FETCH_TIMEOUT=30        # seconds, 0 disables the timeout
    URL_HARVESTER_FILE_ENCODING=utf-8
    URL_HARVESTER_SHEET_NAME=Extracted URLs
    URL_HARVESTER_CACHE_DIR=cache
    GCS_BUCKET=                           # optional, mirrors cache/ to GCS
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from url_harvester.utils.logger import setup_logger

# ensure .env is loaded into the process
load_dotenv()

logger = setup_logger()

DEFAULT_PROXY_URL = "https://api.allorigins.win/get"
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_FILE_ENCODING = "utf-8"
DEFAULT_SHEET_NAME = "Extracted URLs"
DEFAULT_CACHE_DIR = "cache"


@dataclass(frozen=True)
class HarvesterConfig:
    """Runtime settings for fetching, reading and exporting."""
    proxy_url: str = DEFAULT_PROXY_URL
    fetch_timeout: Optional[float] = DEFAULT_FETCH_TIMEOUT
    file_encoding: str = DEFAULT_FILE_ENCODING
    sheet_name: str = DEFAULT_SHEET_NAME
    cache_dir: str = DEFAULT_CACHE_DIR
    gcs_bucket: str = ""

    @classmethod
    def from_env(cls) -> "HarvesterConfig":
        """Build a config from the current environment."""
        return cls(
            proxy_url=os.getenv("URL_HARVESTER_PROXY_URL", "").strip() or DEFAULT_PROXY_URL,
            fetch_timeout=_parse_timeout(os.getenv("URL_HARVESTER_FETCH_TIMEOUT")),
            file_encoding=os.getenv("URL_HARVESTER_FILE_ENCODING", "").strip() or DEFAULT_FILE_ENCODING,
            sheet_name=os.getenv("URL_HARVESTER_SHEET_NAME", "").strip() or DEFAULT_SHEET_NAME,
            cache_dir=os.getenv("URL_HARVESTER_CACHE_DIR", "").strip() or DEFAULT_CACHE_DIR,
            gcs_bucket=os.getenv("GCS_BUCKET", "").strip(),
        )


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return DEFAULT_FETCH_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(
            f"URL_HARVESTER_FETCH_TIMEOUT must be a number of seconds, got {raw!r}"
        )
    # 0 (or negative) means wait forever, like the browser fetch did
    return value if value > 0 else None


# Global config instance
_config: Optional[HarvesterConfig] = None


def get_config() -> HarvesterConfig:
    """Get the global harvester configuration."""
    global _config
    if _config is None:
        _config = HarvesterConfig.from_env()
        logger.info(
            f"Harvester config loaded: proxy={_config.proxy_url}, "
            f"timeout={_config.fetch_timeout}, cache_dir={_config.cache_dir}"
        )
    return _config


def reload_config() -> HarvesterConfig:
    """Re-read configuration from the environment."""
    global _config
    _config = None
    return get_config()
