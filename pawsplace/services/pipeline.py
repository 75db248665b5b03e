"""Filter and sort pipeline applied to a listing collection before display.

The pipeline runs three steps over a copy of its input: a property-type
filter, an optional pet-friendly filter and a sort. Missing fields never
raise: counts and prices default to ``0`` for sorting, and a missing listing
date sorts as the earliest possible timestamp.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..models.listing import Listing


class PropertyType(str, Enum):
    STUDIO = "studio"
    ONE_BED = "one-bed"
    TWO_BED = "two-bed"
    THREE_BED = "three-bed"
    HOUSE_SHARE = "house-share"
    FURNISHED = "furnished"
    UNFURNISHED = "unfurnished"


class SortKey(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    CHEAPEST = "cheapest"
    EXPENSIVE = "expensive"
    BEDROOMS_ASC = "bedrooms-asc"
    BEDROOMS_DESC = "bedrooms-desc"


DEFAULT_SORT = SortKey.NEWEST.value

PROPERTY_TYPE_LABELS: Dict[str, str] = {
    "": "All Property Types",
    PropertyType.STUDIO.value: "Studio",
    PropertyType.ONE_BED.value: "1 Bedroom",
    PropertyType.TWO_BED.value: "2 Bedrooms",
    PropertyType.THREE_BED.value: "3+ Bedrooms",
    PropertyType.HOUSE_SHARE.value: "House Share",
    PropertyType.FURNISHED.value: "Furnished Only",
    PropertyType.UNFURNISHED.value: "Unfurnished Only",
}

SORT_LABELS: Dict[str, str] = {
    SortKey.NEWEST.value: "Newest First",
    SortKey.OLDEST.value: "Oldest First",
    SortKey.CHEAPEST.value: "Price: Low to High",
    SortKey.EXPENSIVE.value: "Price: High to Low",
    SortKey.BEDROOMS_ASC.value: "Bedrooms: Low to High",
    SortKey.BEDROOMS_DESC.value: "Bedrooms: High to Low",
}

PET_KEYWORDS: Tuple[str, ...] = ("pet", "dog", "cat")

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

Predicate = Callable[[Listing], bool]

PROPERTY_TYPE_PREDICATES: Dict[str, Predicate] = {
    PropertyType.STUDIO.value: lambda item: item.bedrooms == 0,
    PropertyType.ONE_BED.value: lambda item: item.bedrooms == 1,
    PropertyType.TWO_BED.value: lambda item: item.bedrooms == 2,
    PropertyType.THREE_BED.value: lambda item: item.bedrooms is not None and item.bedrooms >= 3,
    PropertyType.HOUSE_SHARE.value: lambda item: item.house_share is True,
    PropertyType.FURNISHED.value: lambda item: item.furnished is True,
    PropertyType.UNFURNISHED.value: lambda item: item.furnished is False,
}


def listed_sort_value(listing: Listing) -> datetime:
    return listing.listed or _EARLIEST


def is_pet_friendly(listing: Listing) -> bool:
    """Best-effort guess, not a guarantee that pets are accepted.

    A listing qualifies when it charges pet parking, has a garden, or its
    description mentions pets, dogs or cats anywhere (substring match, so
    "carpet" and "category" also count).
    """

    if (listing.pet_parking_costs or 0) > 0:
        return True
    if listing.garden is True:
        return True
    text = (listing.description or "").lower()
    return any(word in text for word in PET_KEYWORDS)


# key function and reverse flag per sort key
SORTERS: Dict[str, Tuple[Callable[[Listing], object], bool]] = {
    SortKey.NEWEST.value: (listed_sort_value, True),
    SortKey.OLDEST.value: (listed_sort_value, False),
    SortKey.CHEAPEST.value: (lambda item: item.rent or 0, False),
    SortKey.EXPENSIVE.value: (lambda item: item.rent or 0, True),
    SortKey.BEDROOMS_ASC.value: (lambda item: item.bedrooms or 0, False),
    SortKey.BEDROOMS_DESC.value: (lambda item: item.bedrooms or 0, True),
}


def _value(option) -> str:
    if isinstance(option, Enum):
        return option.value
    return option or ""


def filter_by_property_type(listings: Iterable[Listing], property_type: Optional[str]) -> List[Listing]:
    key = _value(property_type)
    predicate = PROPERTY_TYPE_PREDICATES.get(key)
    if predicate is None:
        return list(listings)
    return [item for item in listings if predicate(item)]


def sort_listings(listings: Iterable[Listing], sort_key: Optional[str]) -> List[Listing]:
    sorter = SORTERS.get(_value(sort_key))
    if sorter is None:
        return list(listings)
    key, reverse = sorter
    return sorted(listings, key=key, reverse=reverse)


def apply_pipeline(
    listings: Iterable[Listing],
    property_type: Optional[str] = None,
    pet_friendly_only: bool = False,
    sort_key: Optional[str] = DEFAULT_SORT,
) -> List[Listing]:
    """Return the listings to display; the input collection is left untouched."""

    result = filter_by_property_type(listings, property_type)
    if pet_friendly_only:
        result = [item for item in result if is_pet_friendly(item)]
    return sort_listings(result, sort_key)
