"""Read access to the ``listings`` table.

Reads never raise: a failed query is returned as a :class:`FetchResult`
carrying a :class:`ListingFetchError`, and the caller decides which fallback
applies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from ..models.listing import Listing
from ..utils.errors import ListingFetchError
from ..utils.logging import get_logger
from .mappers import rows_to_listings

LOGGER = get_logger("db.repo")

LISTINGS_TABLE = "listings"
LISTED_COLUMN = "Listed"
LOCATION_COLUMN = "Location"


@dataclass
class FetchResult:
    listings: List[Listing] = field(default_factory=list)
    error: Optional[ListingFetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ListingRepository:
    def __init__(self, client: Any) -> None:
        self.client = client

    def fetch_all(self) -> FetchResult:
        return self._run(
            "fetch_listings",
            lambda table: table.select("*").order(LISTED_COLUMN, desc=True),
        )

    def search_by_location(self, term: str) -> FetchResult:
        return self._run(
            "search_listings_by_location",
            lambda table: table.select("*").ilike(LOCATION_COLUMN, f"%{term}%").order(LISTED_COLUMN, desc=True),
        )

    def _run(self, operation: str, build_query) -> FetchResult:
        if self.client is None:
            return FetchResult(error=ListingFetchError(operation, RuntimeError("no Supabase client")))
        try:
            response = build_query(self.client.table(LISTINGS_TABLE)).execute()
        except Exception as exc:
            LOGGER.error("%s failed: %s", operation, exc)
            return FetchResult(error=ListingFetchError(operation, exc))
        rows = getattr(response, "data", None) or []
        LOGGER.debug("%s rows=%d", operation, len(rows))
        return FetchResult(listings=rows_to_listings(rows))
