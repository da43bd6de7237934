"""Application layer."""

from .contractor_lookup import (
    create_elibrary_client,
    get_contractor_info_html,
    get_contractor_info_url,
)

__all__ = [
    "create_elibrary_client",
    "get_contractor_info_html",
    "get_contractor_info_url",
]
