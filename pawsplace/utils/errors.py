"""Exception types shared across the PawsPlace core."""

from __future__ import annotations

from typing import Dict, Optional


class PawsPlaceError(Exception):
    """Base exception for PawsPlace."""


class ListingFetchError(PawsPlaceError):
    """A read against the listings table failed."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{operation} failed{detail}")


class EnquiryValidationError(PawsPlaceError):
    """Enquiry form failed validation; ``errors`` maps field to message."""

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(", ".join(f"{k}: {v}" for k, v in self.errors.items()))
