from abc import ABC, abstractmethod

from url_harvester.models import SourceType


class TextSource(ABC):
    """Something that can be turned into raw text for URL extraction."""

    source_type: SourceType

    @property
    @abstractmethod
    def description(self) -> str:
        """Provenance note attached to every record extracted from this source."""

    @abstractmethod
    def read_text(self) -> str:
        """Return the full raw text of the source."""
