"""Domain layer - Core entities and errors."""

from .exceptions import InvalidContractError
from .models import ContractorPage, SearchQuery, SearchType

__all__ = ["ContractorPage", "InvalidContractError", "SearchQuery", "SearchType"]
