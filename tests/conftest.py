"""Shared fixtures: an httpx client backed by an in-memory transport."""

from typing import Callable, List

import httpx
import pytest

from elibrary_scraper.config.settings import get_settings

SEARCH_URL = "https://www.gsaelibrary.gsa.gov/ElibMain/searchResults.do"


def search_page(*hrefs: str) -> str:
    """Build a search results page containing one anchor per href."""
    anchors = "\n".join(f'<a href="{h}">Contractor</a>' for h in hrefs)
    return (
        "<html><body>"
        '<a href="/ElibMain/home.do">Home</a>'
        f"<table><tr><td>{anchors}</td></tr></table>"
        "</body></html>"
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client():
    """Factory returning (AsyncClient, RecordingTransport) for a request handler."""

    def _make(handler):
        transport = RecordingTransport(handler)
        return httpx.AsyncClient(transport=transport), transport

    return _make


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("ELIBRARY_BASE_URL", "ELIBRARY_VERIFY_TLS", "HTTP_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
