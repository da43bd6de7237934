"""Contractor lookup - public entry points for resolving and fetching contractor pages."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from httpx import AsyncClient

from ..config.settings import Settings, get_settings
from ..infrastructure.elibrary.client import ELibraryClient
from ..infrastructure.http.client import HTTPClientFactory


def create_elibrary_client(
    http_client: AsyncClient,
    settings: Optional[Settings] = None,
) -> ELibraryClient:
    """Create an eLibrary client around a caller-owned HTTP client."""
    settings = settings or get_settings()
    return ELibraryClient(http_client=http_client, base_url=settings.elibrary_base_url)


@asynccontextmanager
async def _elibrary_session(
    http_client: Optional[AsyncClient], settings: Optional[Settings]
) -> AsyncIterator[ELibraryClient]:
    """Yield an eLibrary client for a single call.

    Without an injected HTTP client, a fresh one carrying the configured
    timeout and TLS verification is opened and closed around the call, so
    nothing outlives the running event loop.
    """
    settings = settings or get_settings()
    if http_client is not None:
        yield create_elibrary_client(http_client, settings)
        return
    async with HTTPClientFactory.create(
        settings.http_timeout_seconds, verify=settings.verify_tls
    ) as owned_client:
        yield create_elibrary_client(owned_client, settings)


async def get_contractor_info_url(
    contract: str,
    http_client: Optional[AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Resolve a contract number to its contractor detail page URL.

    Raises:
        InvalidContractError: If the search does not match exactly one contractor.
        httpx.RequestError: On transport failure.
    """
    async with _elibrary_session(http_client, settings) as client:
        return await client.get_contractor_info_url(contract)


async def get_contractor_info_html(
    url: str,
    http_client: Optional[AsyncClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Fetch the raw HTML of a contractor detail page.

    Raises:
        httpx.RequestError: On transport failure.
    """
    async with _elibrary_session(http_client, settings) as client:
        return await client.get_contractor_info_html(url)
