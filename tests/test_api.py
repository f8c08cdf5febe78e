"""Tests for the HTTP layer.

The FastAPI ``TestClient`` drives the real app (lifespan included); ``respx``
intercepts the app's outbound ``httpx`` requests so no network is used.
"""

from __future__ import annotations

from typing import Generator

import httpx
import pytest
import respx
from bs4 import BeautifulSoup
from fastapi.testclient import TestClient

from faleproxy.api.app import create_app


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client() -> Generator[TestClient, None, None]:
    app = create_app()
    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# POST /fetch
# ---------------------------------------------------------------------------

class TestFetchEndpoint:
    def test_replaces_yale_with_fale(self, client: TestClient, sample_html: str) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, html=sample_html)
            )
            resp = client.post("/fetch", json={"url": "https://example.com/"})

        assert route.called
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        data = resp.json()
        assert data["success"] is True
        assert data["title"] == "Fale University Test Page"
        assert data["originalUrl"] == "https://example.com/"

        soup = BeautifulSoup(data["content"], "html.parser")
        assert soup.title.get_text() == "Fale University Test Page"
        assert soup.h1.get_text() == "Welcome to Fale University"
        assert "Fale University is a private" in soup.find("p").get_text()
        assert soup.find("a", href="https://www.yale.edu/about") is not None
        assert soup.find("img", src="https://www.yale.edu/images/logo.png") is not None
        assert ">About Fale<" in data["content"]

    def test_form_encoded_body(self, client: TestClient, sample_html: str) -> None:
        with respx.mock:
            route = respx.get("https://example.com/").mock(
                return_value=httpx.Response(200, html=sample_html)
            )
            resp = client.post("/fetch", data={"url": "https://example.com/"})

        assert route.called
        assert resp.status_code == 200
        data = resp.json()
        assert data["success"] is True
        assert data["title"] == "Fale University Test Page"
        assert data["originalUrl"] == "https://example.com/"

    def test_form_encoded_missing_url(self, client: TestClient) -> None:
        resp = client.post("/fetch", data={"other": "value"})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "URL is required"}

    def test_missing_url(self, client: TestClient) -> None:
        resp = client.post("/fetch", json={})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "URL is required"}

    def test_missing_body(self, client: TestClient) -> None:
        resp = client.post("/fetch")
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "URL is required"}

    def test_invalid_url(self, client: TestClient) -> None:
        resp = client.post("/fetch", json={"url": "this is not a url"})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Invalid URL"}

    def test_non_string_url(self, client: TestClient) -> None:
        resp = client.post("/fetch", json={"url": 123})
        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Invalid request body"}

    def test_malformed_json(self, client: TestClient) -> None:
        resp = client.post(
            "/fetch",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["success"] is False

    def test_non_html_content(self, client: TestClient) -> None:
        with respx.mock:
            respx.get("https://example.com/logo.jpg").mock(
                return_value=httpx.Response(
                    200, content=b"\xff\xd8\xff", headers={"Content-Type": "image/jpeg"}
                )
            )
            resp = client.post("/fetch", json={"url": "https://example.com/logo.jpg"})

        assert resp.status_code == 400
        assert resp.json() == {"success": False, "error": "Invalid content type"}

    def test_fetch_failure(self, client: TestClient) -> None:
        with respx.mock:
            respx.get("https://not-a-real-site-for-test.invalid/").mock(
                side_effect=httpx.ConnectError(
                    "getaddrinfo ENOTFOUND not-a-real-site-for-test.invalid"
                )
            )
            resp = client.post(
                "/fetch", json={"url": "https://not-a-real-site-for-test.invalid/"}
            )

        assert resp.status_code == 500
        data = resp.json()
        assert data["success"] is False
        assert data["error"].startswith("Failed to fetch content:")
        assert "ENOTFOUND" in data["error"]
        assert "content" not in data


# ---------------------------------------------------------------------------
# GET /
# ---------------------------------------------------------------------------

class TestIndexPage:
    def test_serves_front_end(self, client: TestClient) -> None:
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "Faleproxy" in resp.text

    def test_missing_page_is_404(self, client: TestClient, tmp_path, monkeypatch) -> None:
        monkeypatch.setattr(
            "faleproxy.config.Settings.public_dir", property(lambda self: tmp_path)
        )
        resp = client.get("/")
        assert resp.status_code == 404
