"""
Local and uploaded files.

Plain files (TXT, CSV, HTML, ...) are decoded as text. PDFs go through
pdfplumber: page text plus the targets of link annotations, since most
PDF links live in annotations rather than in the visible text.
"""

import io
import os
from typing import BinaryIO, Optional, Union

import pdfplumber

from url_harvester.config import get_config
from url_harvester.errors import ReadError
from url_harvester.models import SourceType
from url_harvester.sources.base import TextSource
from url_harvester.utils.logger import setup_logger

logger = setup_logger()


def detect_source_type(filename: str, content_type: Optional[str] = None) -> SourceType:
    if content_type and "pdf" in content_type.lower():
        return SourceType.PDF
    if filename and filename.lower().endswith(".pdf"):
        return SourceType.PDF
    return SourceType.FILE


def extract_pdf_text(file_bytes: bytes) -> str:
    """
    Extract page text and hyperlink targets from a PDF.

    Raises:
        ReadError: If the PDF cannot be parsed.
    """
    try:
        with pdfplumber.open(io.BytesIO(file_bytes)) as pdf:
            parts = []
            for i, page in enumerate(pdf.pages):
                parts.append(page.extract_text() or "")
                for link in page.hyperlinks:
                    uri = link.get("uri")
                    if uri:
                        parts.append(uri)
                logger.info(f"Extracted page {i+1}/{len(pdf.pages)} from PDF")
            return "\n".join(parts)
    except Exception as e:
        raise ReadError(f"PDF parsing failed: {e}") from e


def read_file_text(
    fileobj: Union[BinaryIO, io.TextIOBase],
    filename: str = "",
    content_type: Optional[str] = None,
    encoding: Optional[str] = None,
) -> str:
    """
    Read a file-like object fully into text.

    Args:
        fileobj: Binary (or already-decoded text) file-like object
        filename: Original filename, used for type detection and messages
        content_type: MIME type reported by the uploader, if any
        encoding: Text encoding for non-PDF files (defaults to configured encoding)

    Raises:
        ReadError: On I/O, decoding or PDF parsing failure.
    """
    encoding = encoding or get_config().file_encoding
    try:
        data = fileobj.read()
    except (OSError, ValueError) as e:
        logger.error(f"Error reading file {filename}: {e}")
        raise ReadError(f"Error reading file {filename}: {e}") from e

    if isinstance(data, str):
        return data

    if detect_source_type(filename, content_type) == SourceType.PDF:
        try:
            return extract_pdf_text(data)
        except ReadError as e:
            logger.error(f"Error reading PDF {filename}: {e}")
            raise

    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.error(f"Could not decode {filename} as {encoding}: {e}")
        raise ReadError(f"Failed to read file content of {filename} as {encoding} text") from e


class FileSource(TextSource):

    def __init__(
        self,
        fileobj,
        filename: str,
        content_type: Optional[str] = None,
        encoding: Optional[str] = None,
    ):
        self.fileobj = fileobj
        self.filename = filename
        self.content_type = content_type
        self.encoding = encoding
        self.source_type = detect_source_type(filename, content_type)

    @classmethod
    def from_path(cls, path: str, encoding: Optional[str] = None) -> "FileSource":
        """Open a file from disk. The whole file is read into memory."""
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ReadError(f"Error reading file {path}: {e}") from e
        return cls(io.BytesIO(data), os.path.basename(path), encoding=encoding)

    @property
    def description(self) -> str:
        return f"Extracted from {self.filename}"

    def read_text(self) -> str:
        logger.info(f"Reading {self.source_type.value} source: {self.filename}")
        return read_file_text(
            self.fileobj,
            filename=self.filename,
            content_type=self.content_type,
            encoding=self.encoding,
        )

    def __repr__(self):
        return f"FileSource(filename='{self.filename}', type='{self.source_type.value}')"
