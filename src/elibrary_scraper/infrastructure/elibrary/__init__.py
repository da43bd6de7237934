"""GSA eLibrary scraping infrastructure."""

from .client import ELibraryClient, SEARCH_RESULTS_PATH
from .parser import CONTRACTOR_INFO_PREFIX, extract_contractor_links

__all__ = [
    "CONTRACTOR_INFO_PREFIX",
    "ELibraryClient",
    "SEARCH_RESULTS_PATH",
    "extract_contractor_links",
]
