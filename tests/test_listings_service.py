from datetime import datetime, timezone

from pawsplace.db.mappers import map_listing_row, rows_to_listings
from pawsplace.services.listings import ListingService


def _ids(listings):
    return [item.id for item in listings]


def test_mock_mode_returns_fixture_set(mock_settings):
    service = ListingService(mock_settings)
    listings = service.fetch_listings()
    assert _ids(listings) == [1, 2, 3, 4, 5]
    assert listings[0].listed == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)


def test_mock_search_is_case_insensitive(mock_settings):
    service = ListingService(mock_settings)
    assert _ids(service.search_listings_by_location("camden")) == [1]
    assert _ids(service.search_listings_by_location("e14")) == [5]
    assert service.search_listings_by_location("Leeds") == []


def test_live_fetch_orders_newest_first(live_settings, fake_client):
    service = ListingService(live_settings, fake_client)
    listings = service.fetch_listings()
    assert _ids(listings) == [11, 10, 12]
    query = fake_client.queries[-1]
    assert query.name == "listings"
    assert ("order", "Listed", True) in query.calls
    assert listings[0].rent == 1800
    assert listings[0].bedrooms == 2


def test_live_search_uses_ilike(live_settings, fake_client):
    service = ListingService(live_settings, fake_client)
    listings = service.search_listings_by_location("CAMDEN")
    assert sorted(_ids(listings)) == [11, 12]
    assert ("ilike", "Location", "%CAMDEN%") in fake_client.queries[-1].calls


def test_fetch_falls_back_to_fixtures_on_error(live_settings, fake_client):
    fake_client.fail_tables = True
    service = ListingService(live_settings, fake_client)
    assert _ids(service.fetch_listings()) == [1, 2, 3, 4, 5]


def test_search_falls_back_to_empty_on_error(live_settings, fake_client):
    fake_client.fail_tables = True
    service = ListingService(live_settings, fake_client)
    assert service.search_listings_by_location("Camden") == []


def test_configured_without_client_still_never_raises(live_settings):
    service = ListingService(live_settings, client=None)
    assert len(service.fetch_listings()) == 5
    assert service.search_listings_by_location("Camden") == []


def test_row_mapper_tolerates_malformed_values():
    mapped = map_listing_row(
        {"id": "7", "Rent": "abc", "Bedrooms": "3", "Furnished": "false", "Garden": None, "Listed": "not a date"}
    )
    assert mapped["id"] == 7
    assert mapped["Rent"] is None
    assert mapped["Bedrooms"] == 3
    assert mapped["Furnished"] is False
    assert mapped["Garden"] is None
    assert mapped["Listed"] is None


def test_rows_without_id_are_skipped():
    listings = rows_to_listings([{"Title": "orphan"}, {"id": "abc-1", "Title": "kept"}])
    assert _ids(listings) == ["abc-1"]
