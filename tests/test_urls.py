"""Tests for text URL extraction."""

from url_harvester.utils.urls import extract_urls_from_text, normalize_url


def test_no_urls_returns_empty_list():
    assert extract_urls_from_text("nothing to see here, just words.") == []
    assert extract_urls_from_text("") == []
    assert extract_urls_from_text(None) == []


def test_repeated_url_returned_once():
    text = " ".join(["https://example.com/a"] * 5)
    assert extract_urls_from_text(text) == ["https://example.com/a"]


def test_www_gets_https_scheme():
    assert extract_urls_from_text("see www.example.com now") == ["https://www.example.com"]


def test_http_and_https_urls_unmodified():
    urls = extract_urls_from_text("visit http://foo.com and https://bar.com/path?q=1")
    assert sorted(urls) == ["http://foo.com", "https://bar.com/path?q=1"]


def test_order_of_first_appearance():
    text = "https://b.com https://a.com https://b.com www.c.com"
    assert extract_urls_from_text(text) == [
        "https://b.com",
        "https://a.com",
        "https://www.c.com",
    ]


def test_match_stops_at_quotes_and_brackets():
    html = '<a href="https://example.com/page">x</a> <img src=\'http://cdn.example.com/i.png\'>'
    assert extract_urls_from_text(html) == [
        "https://example.com/page",
        "http://cdn.example.com/i.png",
    ]


def test_scheme_url_with_www_host_not_duplicated():
    assert extract_urls_from_text("go to http://www.foo.com today") == ["http://www.foo.com"]


def test_www_and_explicit_https_collapse():
    text = "www.example.com and https://www.example.com"
    assert extract_urls_from_text(text) == ["https://www.example.com"]


def test_trailing_sentence_punctuation_trimmed():
    text = "Read https://example.com/docs. Then try www.example.org, or http://foo.com!"
    assert extract_urls_from_text(text) == [
        "https://example.com/docs",
        "https://www.example.org",
        "http://foo.com",
    ]


def test_parentheses():
    text = "(see https://example.com/x) and https://en.wikipedia.org/wiki/Python_(language)"
    assert extract_urls_from_text(text) == [
        "https://example.com/x",
        "https://en.wikipedia.org/wiki/Python_(language)",
    ]


def test_bare_prefixes_ignored():
    assert extract_urls_from_text("www.. and https://. and www.)") == []


def test_normalize_url():
    assert normalize_url("www.example.com.") == "https://www.example.com"
    assert normalize_url("http://example.com/a?b=1") == "http://example.com/a?b=1"
