"""Search results page parsing."""

from typing import List

from bs4 import BeautifulSoup

CONTRACTOR_INFO_PREFIX = "contractorInfo.do"

CONTRACTOR_LINK_SELECTOR = f'a[href^="{CONTRACTOR_INFO_PREFIX}"]'


def extract_contractor_links(html: str) -> List[str]:
    """Return the href of every contractor detail link in a search results page.

    Args:
        html: Raw HTML of the search response.

    Returns:
        Href values in document order, unresolved. Empty if there are none.
    """
    soup = BeautifulSoup(html, "html.parser")
    return [a["href"] for a in soup.select(CONTRACTOR_LINK_SELECTOR)]
