"""Conversion layer — civil date/time parsing and timezone-to-timezone conversion.

Input format:  ``MM/DD/YYYY H:MM AP``          ("02/02/2026 12:00 PM")
Output format: ``MM/DD/YYYY (Dow) at H:MM AP`` ("02/03/2026 (Tue) at 9:00 PM")
"""

import logging
import re
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from tzconvert import zones
from tzconvert.models import City, CivilDateTime, ConversionResult, ConversionRow

logger = logging.getLogger(__name__)

_CIVIL_PATTERN = re.compile(
    r"([0-9]{2})/([0-9]{2})/([0-9]{4}) ([0-9]{1,2}):([0-9]{2}) (AM|PM)", re.IGNORECASE
)

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

YEAR_MIN = 1900
YEAR_MAX = 2100


class MalformedInputError(ValueError):
    """Date/time string does not match the input format or a field is out of range."""


def _parse(value: str) -> CivilDateTime:
    """Parse and range-check a civil date/time string.

    Raises:
        MalformedInputError: On grammar mismatch or out-of-range field.
    """
    if not isinstance(value, str):
        raise MalformedInputError(f"Expected string, got {type(value).__name__}")
    match = _CIVIL_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedInputError(f"Does not match MM/DD/YYYY H:MM AP: {value!r}")

    month, day, year, hour, minute = (int(g) for g in match.groups()[:5])
    if not 1 <= month <= 12:
        raise MalformedInputError(f"Month out of range: {month}")
    if not 1 <= day <= 31:
        raise MalformedInputError(f"Day out of range: {day}")
    if not YEAR_MIN <= year <= YEAR_MAX:
        raise MalformedInputError(f"Year out of range: {year}")
    if not 1 <= hour <= 12:
        raise MalformedInputError(f"Hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise MalformedInputError(f"Minute out of range: {minute}")

    return CivilDateTime(
        month=month,
        day=day,
        year=year,
        hour=hour,
        minute=minute,
        meridiem=match.group(6).upper(),
    )


def is_valid_datetime(value: str) -> bool:
    """Return True if value matches ``MM/DD/YYYY H:MM AP`` with every field in range.

    Day is checked against 1-31 only, so "02/30/2026 12:00 PM" is valid.
    """
    try:
        _parse(value)
    except MalformedInputError:
        return False
    return True


def parse_civil_datetime(value: str) -> CivilDateTime | None:
    """Parse a civil date/time string. Returns None if malformed."""
    try:
        return _parse(value)
    except MalformedInputError as e:
        logger.debug("Malformed date/time input: %s", e)
        return None


def _to_naive(civil: CivilDateTime) -> datetime:
    # Days past the end of the month roll over into the next month (02/30 → 03/02).
    start = datetime(civil.year, civil.month, 1, civil.hour24, civil.minute)
    return start + timedelta(days=civil.day - 1)


def day_diff(source: date, target: date) -> int:
    """Signed calendar-day difference (target - source), ignoring time of day."""
    return target.toordinal() - source.toordinal()


def _convert(value: str, from_tz: str, to_tz: str) -> ConversionResult:
    civil = _parse(value)
    source_zone = zones.get_zone(from_tz)
    target_zone = zones.get_zone(to_tz)

    naive = _to_naive(civil)
    instant = zones.localize(naive, source_zone)
    local = zones.render(instant, target_zone)

    hour12 = local.hour % 12 or 12
    return ConversionResult(
        month=f"{local.month:02d}",
        day=f"{local.day:02d}",
        year=f"{local.year:04d}",
        day_of_week=_WEEKDAYS[local.weekday()],
        hour=str(hour12),
        minute=f"{local.minute:02d}",
        meridiem="PM" if local.hour >= 12 else "AM",
        day_diff=day_diff(naive.date(), local.date()),
    )


def convert_datetime(value: str, from_tz: str, to_tz: str) -> ConversionResult | None:
    """Convert a civil date/time in from_tz to the civil date/time in to_tz.

    The source offset is resolved for the given date, so DST is honoured on both
    sides. The result does not depend on the machine's local timezone.

    Args:
        value: Civil date/time string in ``MM/DD/YYYY H:MM AP`` format.
        from_tz: IANA identifier the value is expressed in.
        to_tz: IANA identifier to convert into.

    Returns:
        ConversionResult, or None if the input is malformed, a zone is unknown,
        or the conversion otherwise fails.
    """
    try:
        return _convert(value, from_tz, to_tz)
    except MalformedInputError as e:
        logger.debug("Malformed date/time input: %s", e)
    except zones.UnknownTimezoneError as e:
        logger.warning("Cannot convert %r from %s to %s: %s", value, from_tz, to_tz, e)
    except (ValueError, OverflowError) as e:
        logger.warning("Conversion of %r from %s to %s failed: %s", value, from_tz, to_tz, e)
    return None


def convert_for_cities(
    value: str, source_tz: str, cities: Iterable[City]
) -> list[ConversionRow]:
    """Convert one source date/time for each target city, keeping input order."""
    return [
        ConversionRow(city=city, result=convert_datetime(value, source_tz, city.timezone))
        for city in cities
    ]


def format_source_datetime(value: str) -> str:
    """Render a source date/time string in the output format, or "" if invalid."""
    civil = parse_civil_datetime(value)
    if civil is None:
        return ""
    naive = _to_naive(civil)
    return (
        f"{naive.month:02d}/{naive.day:02d}/{naive.year} ({_WEEKDAYS[naive.weekday()]})"
        f" at {civil.hour}:{civil.minute:02d} {civil.meridiem}"
    )


def format_datetime_input(raw: str) -> str:
    """Mask free typing into ``MM/DD/YYYY H:MM AP`` as the user types.

    Only digits and A/P are significant. The first 8 digits are the date; the rest
    are the time, where a leading digit above 1 (or a two-digit hour above 12)
    means a one-digit hour.

    Example: "12252024330P" → "12/25/2024 3:30 PM".
    """
    upper = raw.upper()
    digits = re.sub(r"[^0-9]", "", upper)

    result = ""
    for i, digit in enumerate(digits[:8]):
        if i in (2, 4):
            result += "/"
        result += digit

    if len(digits) <= 8:
        return result

    time_digits = digits[8:]
    if int(time_digits[0]) > 1:
        hour, minute = time_digits[0], time_digits[1:3]
    elif len(time_digits) >= 2:
        if int(time_digits[:2]) > 12:
            hour, minute = time_digits[0], time_digits[1:3]
        else:
            hour, minute = time_digits[:2], time_digits[2:4]
    else:
        hour, minute = time_digits[0], ""

    result += " " + hour
    if minute:
        result += ":" + minute
    if "P" in upper:
        result += " PM"
    elif "A" in upper:
        result += " AM"
    return result


def current_time_in_timezone(timezone: str, now: datetime | None = None) -> str:
    """Short current time in a zone, e.g. "3:05 PM"; "--:-- --" if unknown."""
    return zones.current_time_display(timezone, now)
