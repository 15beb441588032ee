"""City catalogue — loading, search, and map-pick locations."""

import csv
import logging
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

from tzconvert import zones
from tzconvert.models import City

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent

DEFAULT_SEARCH_LIMIT = 50


@lru_cache(maxsize=1)
def load_cities() -> tuple[City, ...]:
    """Parse resources/cities.csv and return the city catalogue.

    File format: ``name,country,timezone,lat,lng`` with a header row.

    Returns:
        Tuple of City objects in file order.
    """
    csv_path = _ROOT / "resources" / "cities.csv"
    cities: list[City] = []
    with csv_path.open(encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            cities.append(
                City(
                    name=row["name"],
                    country=row["country"],
                    timezone=row["timezone"],
                    lat=float(row["lat"]),
                    lng=float(row["lng"]),
                )
            )
    logger.debug("Loaded %d cities from %s", len(cities), csv_path)
    return tuple(cities)


def search_cities(query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list[City]:
    """Case-insensitive substring search on city name or country, sorted by name.

    An empty query returns the first `limit` cities alphabetically.
    """
    q = query.strip().lower()
    matches = [
        c
        for c in load_cities()
        if not q or q in c.name.lower() or q in c.country.lower()
    ]
    return sorted(matches, key=lambda c: c.name.lower())[:limit]


def city_options(query: str, selected: Iterable[str] = ()) -> list[str]:
    """Labels for a picker: already-selected labels first, then search matches."""
    options = list(dict.fromkeys(selected))
    options += [c.label for c in search_cities(query) if c.label not in options]
    return options


def find_city(label: str) -> City | None:
    """Look up a city by its "Name, Country" label."""
    for city in load_cities():
        if city.label == label:
            return city
    return None


def city_from_coordinates(lat: float, lng: float, name: str | None = None) -> City | None:
    """Build a City from a map pick. Returns None if no timezone covers the point."""
    tz_name = zones.timezone_at(lat, lng)
    if tz_name is None:
        logger.info("No timezone at lat=%s, lng=%s", lat, lng)
        return None
    return City(
        name=name or f"{lat:.4f}, {lng:.4f}",
        country=tz_name,
        timezone=tz_name,
        lat=lat,
        lng=lng,
    )
