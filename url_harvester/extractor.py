"""
Extraction pipeline: source -> raw text -> unique URLs -> ExtractionRecord list.
"""

from typing import Optional

from url_harvester.errors import HarvestError
from url_harvester.models import ExtractionRecord
from url_harvester.sources import FileSource, TextSource, WebsiteSource
from url_harvester.utils.logger import setup_logger
from url_harvester.utils.urls import extract_urls_from_text

logger = setup_logger()


def extract_from_source(source: TextSource) -> list[ExtractionRecord]:
    """
    Extract URL records from any text source.

    Raises:
        FetchError / ReadError: Propagated from the source.
    """
    try:
        text = source.read_text()
    except HarvestError as e:
        logger.error(f"Error extracting URLs from {source!r}: {e}")
        raise

    urls = extract_urls_from_text(text)
    logger.info(f"Found {len(urls)} URLs in {source!r}")

    return [
        ExtractionRecord(
            url=url,
            source_type=source.source_type,
            source_description=source.description,
        )
        for url in urls
    ]


def extract_from_website(url: str, **source_kwargs) -> list[ExtractionRecord]:
    """Fetch a page through the proxy and extract its URLs."""
    return extract_from_source(WebsiteSource(url, **source_kwargs))


def extract_from_file(
    fileobj,
    filename: str,
    content_type: Optional[str] = None,
    **source_kwargs,
) -> list[ExtractionRecord]:
    """Read an uploaded file and extract its URLs."""
    return extract_from_source(FileSource(fileobj, filename, content_type, **source_kwargs))
