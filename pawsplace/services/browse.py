"""Derived listing view: location search stage followed by the pipeline."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from ..models.listing import Listing
from ..utils.debounce import DEFAULT_WAIT_SECONDS, Debouncer, TimerFactory
from ..utils.logging import get_logger
from .pipeline import DEFAULT_SORT, apply_pipeline

LOGGER = get_logger("services.browse")


class ListingBrowser:
    """Holds the raw listing set and the view parameters.

    ``service`` is anything exposing ``fetch_listings`` and
    ``search_listings_by_location`` (a ListingService or the app's
    BackendClient).

    ``displayed`` is recomputed only when the raw set or one of the pipeline
    parameters changed since the last read. A search that returns after a
    newer one overwrites it; responses are not sequenced.
    """

    def __init__(
        self,
        service: Any,
        debounce_seconds: float = DEFAULT_WAIT_SECONDS,
        timer_factory: Optional[TimerFactory] = None,
    ) -> None:
        self.service = service
        self._debouncer = Debouncer(self.search, wait=debounce_seconds, timer_factory=timer_factory)
        self.search_term = ""
        self.property_type = ""
        self.pet_friendly_only = False
        self.sort_key = DEFAULT_SORT
        self._raw: List[Listing] = []
        self._version = 0
        self._cache_key: Optional[Tuple] = None
        self._cache: List[Listing] = []
        self.loaded = False

    @property
    def raw(self) -> List[Listing]:
        return list(self._raw)

    def load(self) -> List[Listing]:
        self._replace(self.service.fetch_listings())
        return self.raw

    def search(self, term: str) -> List[Listing]:
        self.search_term = term or ""
        if self.search_term.strip():
            LOGGER.info("location search term=%r", self.search_term)
            self._replace(self.service.search_listings_by_location(self.search_term))
        else:
            self._replace(self.service.fetch_listings())
        return self.raw

    def type_search(self, term: str) -> None:
        """Keystroke path: search once input has been idle for the debounce wait."""
        self._debouncer.call(term)

    def submit_search(self, term: str) -> List[Listing]:
        """Submit path: search now and drop any pending keystroke search."""
        self._debouncer.flush(term)
        return self.raw

    def set_filters(
        self,
        property_type: Optional[str] = None,
        pet_friendly_only: Optional[bool] = None,
        sort_key: Optional[str] = None,
    ) -> None:
        if property_type is not None:
            self.property_type = property_type
        if pet_friendly_only is not None:
            self.pet_friendly_only = pet_friendly_only
        if sort_key is not None:
            self.sort_key = sort_key

    @property
    def displayed(self) -> List[Listing]:
        key = (self._version, self.property_type, self.pet_friendly_only, self.sort_key)
        if key != self._cache_key:
            self._cache = apply_pipeline(self._raw, self.property_type, self.pet_friendly_only, self.sort_key)
            self._cache_key = key
        return list(self._cache)

    def _replace(self, listings: List[Listing]) -> None:
        self._raw = list(listings)
        self._version += 1
        self.loaded = True
