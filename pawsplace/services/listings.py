"""Listing reads with the live/mock switch and the fallback policy.

``fetch_listings`` falls back to the fixture set when the backend fails,
while ``search_listings_by_location`` falls back to an empty list. The
asymmetry is long-standing behaviour and is kept as is; both policies are
applied in :meth:`ListingService._resolve`.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from ..config import Settings, is_configured
from ..db.mock_repo import MockListingRepository
from ..db.repo import FetchResult, ListingRepository
from ..models.listing import Listing
from ..utils.logging import get_logger

LOGGER = get_logger("services.listings")


class ListingService:
    def __init__(
        self,
        settings: Settings,
        client: Any = None,
        mock_repository: Optional[MockListingRepository] = None,
    ) -> None:
        self.settings = settings
        self.repository = ListingRepository(client)
        self.mock_repository = mock_repository or MockListingRepository()

    @property
    def configured(self) -> bool:
        return is_configured(self.settings)

    def fetch_listings(self) -> List[Listing]:
        if not self.configured:
            return self.mock_repository.list_listings()
        return self._resolve(self.repository.fetch_all(), fallback=self.mock_repository.list_listings)

    def search_listings_by_location(self, term: str) -> List[Listing]:
        if not self.configured:
            return self.mock_repository.search_by_location(term)
        return self._resolve(self.repository.search_by_location(term), fallback=list)

    def _resolve(self, result: FetchResult, fallback: Callable[[], List[Listing]]) -> List[Listing]:
        if result.ok:
            return result.listings
        LOGGER.error("listing read failed, using fallback: %s", result.error)
        return fallback()
