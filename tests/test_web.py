"""HTTP API tests using FastAPI's TestClient. The proxy is always mocked."""

from io import BytesIO
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from url_harvester.errors import FetchError
from url_harvester.models import ExtractionRecord, SourceType
from url_harvester.web import app


@pytest.fixture
def client():
    return TestClient(app)


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "ok"
    assert client.get("/health").json() == {"health": "ok"}


@patch("url_harvester.web.extract_from_website")
def test_extract_website(mock_extract, client):
    mock_extract.return_value = [
        ExtractionRecord("https://a.com", SourceType.WEBSITE, "Extracted from https://example.com"),
    ]

    resp = client.post("/extract/website", json={"url": " https://example.com "})

    assert resp.status_code == 200
    assert resp.json() == {
        "count": 1,
        "results": [{
            "url": "https://a.com",
            "sourceType": "website",
            "sourceDescription": "Extracted from https://example.com",
        }],
    }
    mock_extract.assert_called_once_with("https://example.com")


def test_extract_website_requires_url(client):
    assert client.post("/extract/website", json={"url": "   "}).status_code == 400


@patch("url_harvester.web.extract_from_website")
def test_extract_website_fetch_error(mock_extract, client):
    mock_extract.side_effect = FetchError("Failed to fetch website content")

    resp = client.post("/extract/website", json={"url": "https://example.com"})

    assert resp.status_code == 502
    assert resp.json()["detail"] == "Failed to extract URLs from the website"


@patch("url_harvester.sources.website.requests.get")
def test_extract_website_through_proxy(mock_get, client):
    mock_get.return_value.json.return_value = {"contents": "www.example.com and www.example.com"}

    resp = client.post("/extract/website", json={"url": "https://example.com"})

    assert resp.status_code == 200
    assert [r["url"] for r in resp.json()["results"]] == ["https://www.example.com"]


def test_extract_file(client):
    resp = client.post(
        "/extract/file",
        files={"file": ("links.txt", b"see www.example.com and http://foo.com", "text/plain")},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["count"] == 2
    assert body["results"][0] == {
        "url": "https://www.example.com",
        "sourceType": "file",
        "sourceDescription": "Extracted from links.txt",
    }


def test_extract_file_read_error(client):
    resp = client.post("/extract/file", files={"file": ("bad.txt", b"\xff\xfe\xfa", "text/plain")})

    assert resp.status_code == 422
    assert resp.json()["detail"] == "Failed to extract URLs from the file"


def test_export(client):
    records = [
        {"url": "https://a.com", "sourceType": "website", "sourceDescription": "Extracted from https://x.com"},
        {"url": "https://b.com", "sourceType": "pdf", "sourceDescription": "Extracted from b.pdf"},
    ]

    resp = client.post("/export", json={"records": records})

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert 'filename="extracted_urls.xlsx"' in resp.headers["content-disposition"]

    ws = load_workbook(BytesIO(resp.content)).active
    assert ws.max_row == 3
    assert [c.value for c in ws[1]] == ["url", "sourceType", "sourceDescription"]
    assert [c.value for c in ws[3]] == ["https://b.com", "pdf", "Extracted from b.pdf"]


def test_export_requires_records(client):
    assert client.post("/export", json={"records": []}).status_code == 400


def test_export_rejects_unknown_source_type(client):
    resp = client.post("/export", json={"records": [{"url": "https://a.com", "sourceType": "email"}]})
    assert resp.status_code == 422


def test_export_blank_url(client):
    resp = client.post("/export", json={"records": [{"url": "  ", "sourceType": "file"}]})
    assert resp.status_code == 400


def test_export_error(client):
    resp = client.post("/export", json={"records": [{"url": "https://a.com/\x01", "sourceType": "file"}]})

    assert resp.status_code == 500
    assert resp.json()["detail"] == "There was an error exporting to Excel"
