"""URL utility functions shared across the harvester."""

import re

# http(s):// or a bare www. host, up to the first whitespace, quote or angle bracket.
# This is a heuristic, not RFC 3986 validation.
URL_PATTERN = re.compile(r'(https?://[^\s<>"\']+|www\.[^\s<>"\']+)')

# Sentence punctuation that is unlikely to be part of the URL
TRAILING_PUNCTUATION = '.,;:!?'


def normalize_url(url: str) -> str:
    """
    Trim trailing punctuation from a matched URL and give bare www. hosts a scheme.

    A closing parenthesis is only trimmed when the URL has no opening one,
    so links like https://en.wikipedia.org/wiki/Python_(language) survive.
    """
    url = url.rstrip(TRAILING_PUNCTUATION)
    while url.endswith(")") and url.count(")") > url.count("("):
        url = url[:-1].rstrip(TRAILING_PUNCTUATION)

    if url.startswith("www."):
        return f"https://{url}"
    return url


def _has_host(url: str) -> bool:
    # "www.." or "https://." trim down to nothing usable
    for scheme in ("http://", "https://"):
        if url.startswith(scheme):
            rest = url[len(scheme):]
            return bool(rest) and rest != "www."
    return False


def extract_urls_from_text(text: str) -> list[str]:
    """
    Extract unique http/https and www. URLs from text.

    Returns:
        List of unique normalized URLs found in the text, in order of first appearance.
    """
    if not text:
        return []

    # Deduplicate while preserving order
    seen: set[str] = set()
    unique: list[str] = []
    for match in URL_PATTERN.findall(text):
        url = normalize_url(match)
        if not _has_host(url) or url in seen:
            continue
        seen.add(url)
        unique.append(url)

    return unique
