"""Display helpers for listing cards."""

from __future__ import annotations

from typing import List, Optional

from ..models.listing import Listing

TBC = "TBC"
RECENTLY_LISTED = "Recently listed"
DEFAULT_TITLE = "Property Listing"
DEFAULT_LOCATION = "London"


def format_rent(rent: Optional[int]) -> str:
    if rent is None:
        return f"£{TBC}"
    return f"£{rent:,}"


def format_count(value: Optional[int]) -> str:
    return TBC if value is None else str(value)


def format_listed_date(listing: Listing) -> str:
    if listing.listed is None:
        return RECENTLY_LISTED
    listed = listing.listed
    return f"{listed.day} {listed.strftime('%b %Y')}"


def furnishing_label(listing: Listing) -> str:
    return "Furnished" if listing.furnished else "Unfurnished"


def listing_features(listing: Listing) -> List[str]:
    features: List[str] = []
    if listing.furnished:
        features.append("Furnished")
    if listing.garden:
        features.append("Garden/Outdoor Space")
    if listing.stair_free_access:
        features.append("Stair-Free Access")
    if listing.house_share:
        features.append("House Share")
    if (listing.pet_parking_costs or 0) > 0:
        features.append(f"Pet Parking: £{listing.pet_parking_costs}")
    return features
