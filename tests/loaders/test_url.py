"""Tests for the URL loader."""

import httpx
import pytest

from docrag.exceptions import LoaderError
from docrag.loaders import SAMPLE_ESSAY_URL, URLLoader


def _loader(handler) -> URLLoader:
    return URLLoader(transport=httpx.MockTransport(handler))


class TestURLLoader:
    def test_supports(self):
        loader = URLLoader()
        assert loader.supports("https://example.com/a.txt")
        assert loader.supports("HTTP://example.com")
        assert not loader.supports("/tmp/file.txt")
        assert not loader.supports("ftp://example.com/file")

    def test_sample_essay_url(self):
        assert SAMPLE_ESSAY_URL.startswith("https://")

    def test_load_plain_text(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, text="Para one.\n\nPara two.", headers={"content-type": "text/plain"}
            )

        source = _loader(handler).load("https://example.com/essay.txt")

        assert source.text == "Para one.\n\nPara two."
        assert source.source == "https://example.com/essay.txt"
        assert source.metadata["type"] == "text"
        assert source.metadata["url"] == "https://example.com/essay.txt"

    def test_load_html(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                text="<html><head><title>T</title></head><body><p>Body text.</p></body></html>",
                headers={"content-type": "text/html; charset=utf-8"},
            )

        source = _loader(handler).load("https://example.com/page")

        assert source.text == "Body text."
        assert source.metadata["type"] == "html"
        assert source.metadata["title"] == "T"

    def test_sends_user_agent(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["ua"] = request.headers["user-agent"]
            return httpx.Response(200, text="ok")

        _loader(handler).load("https://example.com/")

        assert "docrag/" in seen["ua"]

    def test_follows_redirects(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "https://example.com/new"})
            return httpx.Response(200, text="moved here")

        source = _loader(handler).load("https://example.com/old")

        assert source.text == "moved here"
        assert source.metadata["url"] == "https://example.com/new"

    def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="nope")

        with pytest.raises(LoaderError, match="HTTP 404") as exc_info:
            _loader(handler).load("https://example.com/missing")
        assert exc_info.value.location == "https://example.com/missing"

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LoaderError, match="Failed to fetch"):
            _loader(handler).load("https://example.com/")
