"""Core domain models for eLibrary contractor lookups."""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchType(str, Enum):
    """Search modes understood by the eLibrary search endpoint."""

    EXACT_WORDS = "exactWords"


class SearchQuery(BaseModel):
    """A single text search against the eLibrary catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    search_text: str = Field(alias="searchText")
    search_type: SearchType = Field(default=SearchType.EXACT_WORDS, alias="searchType")

    def to_params(self) -> Dict[str, str]:
        """Query parameters as sent on the wire."""
        return {
            "searchText": self.search_text,
            "searchType": self.search_type.value,
        }


class ContractorPage(BaseModel):
    """Result of a full lookup: the resolved detail page and, optionally, its HTML."""

    contract: str
    url: str
    html: Optional[str] = None
