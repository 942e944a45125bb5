import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

from url_harvester.errors import HarvestError
from url_harvester.export import EXPORT_FILENAME, generate_excel
from url_harvester.extractor import extract_from_source
from url_harvester.models import ExtractionRecord
from url_harvester.sources import FileSource, TextSource, WebsiteSource
from url_harvester.storage.storage import StorageManager
from url_harvester.utils.logger import setup_logger

logger = setup_logger()

SOURCES_FILE = os.path.join("config", "sources.txt")


@dataclass
class RunResult:
    """Result of a batch extraction run."""
    records: List[ExtractionRecord]
    failures: Dict[str, str]  # source -> error message
    output_path: str
    sources_total: int = 0
    uploaded_uri: Optional[str] = None

    @property
    def all_failed(self) -> bool:
        return self.sources_total > 0 and len(self.failures) == self.sources_total


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://", "www."))


def build_source(source: str) -> TextSource:
    """Turn a command-line style source string into a TextSource."""
    if is_remote(source):
        url = f"https://{source}" if source.startswith("www.") else source
        return WebsiteSource(url)
    return FileSource.from_path(source)


def list_sources(path: str = SOURCES_FILE) -> list[str]:
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def main(sources: list[str] | None = None, output_path: str | None = None, upload: bool = False) -> RunResult:
    storage = StorageManager()

    if sources is None:
        # fallback to file if not provided
        sources = list_sources()

    records: list[ExtractionRecord] = []
    failures: dict[str, str] = {}

    for source in sources:
        logger.info(f"Extracting URLs from: {source}")
        try:
            found = extract_from_source(build_source(source))
        except HarvestError as e:
            logger.error(f"Skipping {source}: {e}")
            failures[source] = str(e)
            continue
        logger.info(f"{len(found)} URLs from {source}")
        records.extend(found)

    # a caller-given path is used as is; only the default lives under the cache dir
    output_path = output_path or storage.default_path(EXPORT_FILENAME)
    saved_path = storage.save_file(output_path, generate_excel(records))

    logger.info(
        f"Run complete: {len(records)} URLs from {len(sources) - len(failures)}/{len(sources)} sources"
    )

    uploaded_uri = storage.upload_file(saved_path) if upload else None

    return RunResult(records, failures, saved_path, len(sources), uploaded_uri)


if __name__ == "__main__":
    main(sys.argv[1:] or None)
