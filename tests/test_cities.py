from __future__ import annotations

import pytest

from tzconvert import zones
from tzconvert.cities import (
    DEFAULT_SEARCH_LIMIT,
    city_from_coordinates,
    city_options,
    find_city,
    load_cities,
    search_cities,
)


@pytest.mark.unit
def test_load_cities() -> None:
    cities = load_cities()
    assert len(cities) == 306
    assert len({c.label for c in cities}) == len(cities)
    new_york = find_city("New York, United States")
    assert new_york is not None
    assert new_york.timezone == "America/New_York"
    assert new_york.lat == pytest.approx(40.7128)


@pytest.mark.unit
def test_load_cities_is_cached() -> None:
    assert load_cities() is load_cities()


@pytest.mark.integration
def test_every_catalogue_timezone_is_known() -> None:
    unknown = {c.timezone for c in load_cities() if not zones.is_known_timezone(c.timezone)}
    assert unknown == set()


@pytest.mark.unit
def test_search_by_name_is_case_insensitive() -> None:
    assert [c.name for c in search_cities("DUBAI")] == ["Dubai"]
    assert [c.name for c in search_cities("  new york ")] == ["New York"]


@pytest.mark.unit
def test_search_by_country_sorted_by_name() -> None:
    names = [c.name for c in search_cities("japan")]
    assert names == ["Fukuoka", "Kyoto", "Nagoya", "Osaka", "Sapporo", "Tokyo"]


@pytest.mark.unit
def test_search_empty_query_returns_first_cities_alphabetically() -> None:
    cities = search_cities("")
    assert len(cities) == DEFAULT_SEARCH_LIMIT
    names = [c.name.lower() for c in cities]
    assert names == sorted(names)
    assert cities[0].name == "Abu Dhabi"


@pytest.mark.unit
def test_search_limit_and_no_match() -> None:
    assert len(search_cities("united states", limit=5)) == 5
    assert search_cities("zzzz") == []


@pytest.mark.unit
def test_find_city_unknown_label() -> None:
    assert find_city("Atlantis, Nowhere") is None
    assert find_city("Dubai") is None


@pytest.mark.integration
def test_city_from_coordinates() -> None:
    city = city_from_coordinates(35.6762, 139.6503)
    assert city is not None
    assert city.timezone == "Asia/Tokyo"
    assert city.name == "35.6762, 139.6503"

    named = city_from_coordinates(48.8566, 2.3522, name="Pin")
    assert named is not None
    assert (named.name, named.timezone) == ("Pin", "Europe/Paris")


@pytest.mark.unit
def test_city_from_coordinates_without_zone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(zones, "timezone_at", lambda lat, lng: None)
    assert city_from_coordinates(0.0, 0.0) is None


@pytest.mark.unit
def test_city_options_come_from_search() -> None:
    assert city_options("japan") == [c.label for c in search_cities("japan")]
    assert city_options("zzzz") == []


@pytest.mark.unit
def test_city_options_keep_selection_first() -> None:
    options = city_options("japan", ["Dubai, United Arab Emirates", "Tokyo, Japan"])
    assert options[:2] == ["Dubai, United Arab Emirates", "Tokyo, Japan"]
    assert options.count("Tokyo, Japan") == 1
    assert "Osaka, Japan" in options
