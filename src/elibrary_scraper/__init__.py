"""Scraping client for contractor pages in the GSA eLibrary."""

from .application.contractor_lookup import get_contractor_info_html, get_contractor_info_url
from .domain.exceptions import InvalidContractError
from .infrastructure.elibrary.client import ELibraryClient

__all__ = [
    "ELibraryClient",
    "InvalidContractError",
    "get_contractor_info_html",
    "get_contractor_info_url",
]
