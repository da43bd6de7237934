"""GSA eLibrary client implementation."""

from __future__ import annotations

import logging
from urllib.parse import urljoin

from httpx import AsyncClient, RequestError

from ...config.settings import DEFAULT_BASE_URL
from ...domain.exceptions import InvalidContractError
from ...domain.models import SearchQuery
from .parser import extract_contractor_links

logger = logging.getLogger(__name__)

SEARCH_RESULTS_PATH = "/ElibMain/searchResults.do"


class ELibraryClient:
    """GSA eLibrary client: resolves a contract to its contractor page and fetches it.

    Every call issues exactly one GET and holds no state between calls, so
    concurrent lookups on the same client are independent. Transport errors
    from httpx propagate unchanged and response status codes are not checked.

    Usage:
        ```python
        client = ELibraryClient(http_client=async_client)
        url = await client.get_contractor_info_url("GS-35F-0119Y")
        html = await client.get_contractor_info_html(url)
        ```
    """

    def __init__(self, http_client: AsyncClient, base_url: str = DEFAULT_BASE_URL) -> None:
        """Initialize eLibrary client.

        Args:
            http_client: HTTP client for making requests.
            base_url: Site root. Defaults to the public GSA eLibrary.
        """
        self._client = http_client
        self.base_url = base_url.rstrip("/")
        self.search_results_url = f"{self.base_url}{SEARCH_RESULTS_PATH}"

    async def get_contractor_info_url(self, contract: str) -> str:
        """Resolve a contract number to the absolute URL of its contractor page.

        Args:
            contract: Contract or vendor identifier, sent as-is.

        Returns:
            Absolute URL of the contractor detail page.

        Raises:
            InvalidContractError: If the search yields zero or several contractor links.
            httpx.RequestError: If the request fails at the transport level.
        """
        query = SearchQuery(search_text=contract)
        logger.debug("Searching eLibrary for '%s'", contract)
        try:
            resp = await self._client.get(self.search_results_url, params=query.to_params())
        except RequestError:
            logger.warning("Transport error searching eLibrary for '%s'", contract, exc_info=True)
            raise

        links = extract_contractor_links(resp.text)
        if len(links) == 1:
            return urljoin(self.search_results_url, links[0])

        logger.info("Search for '%s' matched %d contractor links", contract, len(links))
        raise InvalidContractError(contract)

    async def get_contractor_info_html(self, url: str) -> str:
        """Fetch a contractor page and return its body verbatim.

        Args:
            url: Absolute URL, usually from get_contractor_info_url.

        Returns:
            Response body as text.

        Raises:
            httpx.RequestError: If the request fails at the transport level.
        """
        logger.debug("Fetching contractor page %s", url)
        try:
            resp = await self._client.get(url)
        except RequestError:
            logger.warning("Transport error fetching %s", url, exc_info=True)
            raise
        return resp.text
