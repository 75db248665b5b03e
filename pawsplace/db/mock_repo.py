"""CSV-backed fixture listings used whenever Supabase is not available."""

from __future__ import annotations

from typing import List, Optional

from ..models.listing import Listing
from ..services.pipeline import listed_sort_value
from ..utils.io import dataframe_records, load_csv
from .mappers import rows_to_listings

FIXTURE_FILE = "mock_listings.csv"


class MockListingRepository:
    def __init__(self, filename: str = FIXTURE_FILE) -> None:
        self.filename = filename
        self._listings: Optional[List[Listing]] = None

    def list_listings(self) -> List[Listing]:
        """All fixtures, newest first, as a fresh list."""
        if self._listings is None:
            rows = dataframe_records(load_csv(self.filename))
            self._listings = sorted(rows_to_listings(rows), key=listed_sort_value, reverse=True)
        return list(self._listings)

    def search_by_location(self, term: str) -> List[Listing]:
        needle = (term or "").lower()
        return [item for item in self.list_listings() if needle in (item.location or "").lower()]
