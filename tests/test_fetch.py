import pytest
import requests

from a11y_analyzer import Config, fetch
from a11y_analyzer.errors import (
    InvalidURLError,
    PageStatusError,
    PageTimeoutError,
    PageUnreachableError,
    RetrievalError,
)


class _Resp:
    def __init__(self, status_code, text=""):
        self.status_code = status_code
        self.text = text
        self.content = text.encode("utf-8")


def test_fetch_returns_body_and_sends_headers(monkeypatch):
    seen = {}

    def _get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return _Resp(200, "<html></html>")

    monkeypatch.setattr(fetch.requests, "get", _get)
    body = fetch.fetch_markup("https://example.com", Config(timeout=3))
    assert body == "<html></html>"
    assert seen["headers"] == {"User-Agent": "Accessibility-Analyzer/1.0"}
    assert seen["timeout"] == 3


@pytest.mark.parametrize("url", ["", "   ", "example.com", "ftp://example.com", "https://"])
def test_invalid_urls_rejected_before_request(monkeypatch, url):
    def _get(*args, **kwargs):
        raise AssertionError("should not be called")

    monkeypatch.setattr(fetch.requests, "get", _get)
    with pytest.raises(InvalidURLError):
        fetch.fetch_markup(url)


def test_connection_error_is_unreachable(monkeypatch):
    def _get(*args, **kwargs):
        raise requests.exceptions.ConnectionError("dns")

    monkeypatch.setattr(fetch.requests, "get", _get)
    with pytest.raises(PageUnreachableError) as info:
        fetch.fetch_markup("https://nowhere.invalid")
    assert info.value.url == "https://nowhere.invalid"


def test_timeout_is_classified(monkeypatch):
    def _get(*args, **kwargs):
        raise requests.exceptions.ReadTimeout("slow")

    monkeypatch.setattr(fetch.requests, "get", _get)
    with pytest.raises(PageTimeoutError):
        fetch.fetch_markup("https://example.com")


def test_other_request_errors_are_retrieval_errors(monkeypatch):
    def _get(*args, **kwargs):
        raise requests.exceptions.TooManyRedirects("loop")

    monkeypatch.setattr(fetch.requests, "get", _get)
    with pytest.raises(RetrievalError):
        fetch.fetch_markup("https://example.com")


def test_not_found_status(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda *a, **k: _Resp(404))
    with pytest.raises(PageStatusError) as info:
        fetch.fetch_markup("https://example.com/missing")
    assert info.value.status_code == 404
    assert "not found (404)" in str(info.value)


def test_server_error_status(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda *a, **k: _Resp(503))
    with pytest.raises(PageStatusError) as info:
        fetch.fetch_markup("https://example.com")
    assert info.value.status_code == 503
    assert "(503)" in str(info.value)
