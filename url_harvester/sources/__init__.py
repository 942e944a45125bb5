# Source adapters: turn a remote page or a local file into raw text
from .base import TextSource
from .website import WebsiteSource, fetch_via_proxy
from .files import FileSource, read_file_text, detect_source_type

__all__ = [
    "TextSource",
    "WebsiteSource",
    "FileSource",
    "fetch_via_proxy",
    "read_file_text",
    "detect_source_type",
]
