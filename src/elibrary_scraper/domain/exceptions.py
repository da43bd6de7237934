"""Domain errors."""

from typing import Optional


class InvalidContractError(Exception):
    """Raised when a contract search does not resolve to exactly one contractor."""

    def __init__(self, identifier: str, message: Optional[str] = None) -> None:
        self.identifier = identifier
        self.message = message or f"GSA eLibrary has no results for {identifier}"
        super().__init__(self.message)
