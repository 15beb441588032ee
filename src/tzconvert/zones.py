"""Timezone service layer — IANA zone lookup, wall-clock resolution, and coordinate lookup."""

import logging
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pytz import utc
from timezonefinder import TimezoneFinder

logger = logging.getLogger(__name__)

_tf = TimezoneFinder()

UNKNOWN_TIME_DISPLAY = "--:-- --"


class UnknownTimezoneError(Exception):
    """Timezone identifier not present in the IANA database."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown timezone: {name!r}")
        self.name = name


def get_zone(name: str) -> ZoneInfo:
    """Return the zone for an IANA identifier.

    Zones are read from the full 64-bit tz data, so DST rules hold for any year in
    the supported range, including dates past 2037.

    Raises:
        UnknownTimezoneError: If the identifier is empty or not in the database.
    """
    if not name:
        raise UnknownTimezoneError(name)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        raise UnknownTimezoneError(name) from None


def is_known_timezone(name: str) -> bool:
    try:
        get_zone(name)
    except UnknownTimezoneError:
        return False
    return True


def localize(naive: datetime, zone: ZoneInfo) -> datetime:
    """Attach a zone to a naive wall-clock datetime, resolving DST edge cases.

    The UTC offset is looked up for the specific date given, never cached per zone.

    - Ambiguous times (fall-back overlap) resolve to the earlier instant.
    - Nonexistent times (spring-forward gap) are read with the pre-transition
      offset, so the wall clock moves forward by the gap.

    Args:
        naive: Wall-clock datetime without tzinfo.
        zone: Zone from get_zone().

    Returns:
        Aware datetime in zone.
    """
    first = naive.replace(tzinfo=zone, fold=0)
    second = naive.replace(tzinfo=zone, fold=1)
    if first.utcoffset() == second.utcoffset():
        return first
    # fold=0 carries the pre-transition offset in both overlaps and gaps.
    if first.utcoffset() > second.utcoffset():
        logger.debug("Ambiguous local time %s in %s; using earlier instant", naive, zone)
        return first
    logger.debug("Nonexistent local time %s in %s; shifting past the gap", naive, zone)
    return render(first, zone)


def render(instant: datetime, zone: ZoneInfo) -> datetime:
    """Express an aware instant as wall-clock time in zone."""
    return instant.astimezone(utc).astimezone(zone)


def current_time_display(name: str, now: datetime | None = None) -> str:
    """Short current time in a zone ("3:05 PM"), or a placeholder for unknown zones.

    Args:
        name: IANA identifier.
        now: Aware instant to display. Defaults to the current time.
    """
    try:
        zone = get_zone(name)
    except UnknownTimezoneError:
        logger.warning("No current time for unknown timezone %r", name)
        return UNKNOWN_TIME_DISPLAY
    local = render(now or datetime.now(utc), zone)
    hour12 = local.hour % 12 or 12
    return f"{hour12}:{local.minute:02d} {'PM' if local.hour >= 12 else 'AM'}"


def timezone_at(lat: float, lng: float) -> str | None:
    """IANA zone covering a coordinate, or None (open ocean, invalid coordinate)."""
    try:
        return _tf.timezone_at(lat=lat, lng=lng)
    except ValueError:
        logger.warning("Invalid coordinate lat=%s, lng=%s", lat, lng)
        return None
