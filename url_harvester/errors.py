"""Errors raised by the harvester. Callers catch these and show them to the user."""


class HarvestError(Exception):
    """Base class for every failure surfaced by the harvester."""


class FetchError(HarvestError):
    """Remote page could not be fetched through the proxy, or came back in an unexpected shape."""


class ReadError(HarvestError):
    """Uploaded or local file could not be read as text."""


class ExportError(HarvestError):
    """Spreadsheet serialization failed."""
