"""
Remote pages, fetched through a CORS-bypass proxy.

The proxy wraps the page in a JSON envelope:

    GET https://api.allorigins.win/get?url=<percent-encoded target>
    -> {"contents": "<raw page text>", "status": {...}}

Anything without a non-empty "contents" string is treated as a failed fetch.
"""

from typing import Optional

import requests

from url_harvester.config import get_config
from url_harvester.errors import FetchError
from url_harvester.models import SourceType
from url_harvester.sources.base import TextSource
from url_harvester.utils.logger import setup_logger

logger = setup_logger()

_UNSET = object()


def fetch_via_proxy(
    url: str,
    proxy_url: Optional[str] = None,
    timeout=_UNSET,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Fetch the raw text of a page through the proxy.

    Args:
        url: Target page URL
        proxy_url: Proxy endpoint (defaults to configured proxy)
        timeout: Seconds to wait, None to wait forever (defaults to configured timeout)
        session: Optional requests session to issue the call with

    Returns:
        The "contents" field of the proxy response.

    Raises:
        FetchError: If the request fails or the response has an unexpected shape.
    """
    config = get_config()
    proxy_url = proxy_url or config.proxy_url
    if timeout is _UNSET:
        timeout = config.fetch_timeout
    http = session or requests

    logger.info(f"Fetching {url} via proxy {proxy_url}")
    try:
        # single attempt; requests percent-encodes the target
        resp = http.get(proxy_url, params={"url": url}, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        logger.error(f"Proxy request failed for {url}: {e}")
        raise FetchError(f"Failed to fetch website content for {url}: {e}") from e
    except ValueError as e:
        logger.error(f"Proxy returned non-JSON body for {url}: {e}")
        raise FetchError(f"Proxy returned an invalid response for {url}") from e

    if not isinstance(data, dict):
        raise FetchError(f"Proxy returned an unexpected payload for {url}")

    contents = data.get("contents")
    if not isinstance(contents, str) or not contents:
        status = data.get("status")
        logger.error(f"Proxy response for {url} has no contents (status={status})")
        raise FetchError(f"Failed to fetch website content for {url}")

    logger.info(f"Fetched {len(contents)} characters from {url}")
    return contents


class WebsiteSource(TextSource):
    source_type = SourceType.WEBSITE

    def __init__(
        self,
        url: str,
        proxy_url: Optional[str] = None,
        timeout=_UNSET,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.proxy_url = proxy_url
        self.timeout = timeout
        self.session = session

    @property
    def description(self) -> str:
        return f"Extracted from {self.url}"

    def read_text(self) -> str:
        return fetch_via_proxy(
            self.url,
            proxy_url=self.proxy_url,
            timeout=self.timeout,
            session=self.session,
        )

    def __repr__(self):
        return f"WebsiteSource(url='{self.url}')"
