from pawsplace.models.listing import Listing
from pawsplace.services.formatting import (
    format_count,
    format_listed_date,
    format_rent,
    furnishing_label,
    listing_features,
)


def test_rent_and_counts():
    assert format_rent(2200) == "£2,200"
    assert format_rent(None) == "£TBC"
    assert format_count(None) == "TBC"
    assert format_count(0) == "0"


def test_listed_date():
    listing = Listing.model_validate({"id": 1, "Listed": "2024-01-05T11:20:00Z"})
    assert format_listed_date(listing) == "5 Jan 2024"
    assert format_listed_date(Listing(id=2)) == "Recently listed"


def test_features(fixtures):
    hackney = next(item for item in fixtures if item.id == 4)
    assert listing_features(hackney) == [
        "Furnished",
        "Garden/Outdoor Space",
        "Stair-Free Access",
        "House Share",
        "Pet Parking: £15",
    ]
    assert listing_features(Listing(id=9)) == []
    assert furnishing_label(Listing(id=9)) == "Unfurnished"
