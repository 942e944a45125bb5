"""Extraction record: one discovered URL plus where it came from."""

from dataclasses import dataclass
from enum import Enum

# Column order for API payloads and the spreadsheet header row
RECORD_FIELDS = ("url", "sourceType", "sourceDescription")


class SourceType(str, Enum):
    WEBSITE = "website"
    PDF = "pdf"
    FILE = "file"


@dataclass(frozen=True)
class ExtractionRecord:
    url: str
    source_type: SourceType
    source_description: str = ""

    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url.strip():
            raise ValueError("ExtractionRecord.url must be non-empty text")
        # accept the plain string value too ("pdf" -> SourceType.PDF)
        object.__setattr__(self, "source_type", SourceType(self.source_type))

    def to_dict(self) -> dict:
        """Serialize using the public field names (url, sourceType, sourceDescription)."""
        return {
            "url": self.url,
            "sourceType": self.source_type.value,
            "sourceDescription": self.source_description,
        }

    def to_row(self) -> list[str]:
        return [self.url, self.source_type.value, self.source_description]

    @classmethod
    def from_dict(cls, data: dict) -> "ExtractionRecord":
        return cls(
            url=data["url"],
            source_type=data["sourceType"],
            source_description=data.get("sourceDescription") or "",
        )
