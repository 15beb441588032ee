"""Data model definitions — explicit boundaries between input, conversion, and render layers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CivilDateTime:
    """Wall-clock date/time with no timezone attached. Parsed, range-checked."""

    month: int  # 1-12
    day: int  # 1-31, not checked against month length
    year: int  # 1900-2100
    hour: int  # 1-12 (12-hour clock)
    minute: int  # 0-59
    meridiem: str  # "AM" or "PM"

    @property
    def hour24(self) -> int:
        """Hour on the 24-hour clock (12 AM → 0, 12 PM → 12)."""
        if self.meridiem == "PM":
            return self.hour if self.hour == 12 else self.hour + 12
        return 0 if self.hour == 12 else self.hour


@dataclass(frozen=True)
class ConversionResult:
    """Civil date/time in the target zone. The sole output of a conversion."""

    month: str  # "01"-"12"
    day: str  # "01"-"31"
    year: str  # "2026"
    day_of_week: str  # en-US short weekday ("Tue")
    hour: str  # "1"-"12", unpadded
    minute: str  # "00"-"59"
    meridiem: str  # "AM" or "PM"
    day_diff: int  # Calendar days from source date to target date (+ = later)

    @property
    def converted(self) -> str:
        """Display string: ``MM/DD/YYYY (Dow) at H:MM AP``."""
        return (
            f"{self.month}/{self.day}/{self.year} ({self.day_of_week})"
            f" at {self.hour}:{self.minute} {self.meridiem}"
        )


@dataclass(frozen=True)
class City:
    """A selectable location. Input to conversion as (name, timezone)."""

    name: str  # "New York"
    country: str  # "United States"
    timezone: str  # IANA key ("America/New_York")
    lat: float  # Latitude (decimal degrees)
    lng: float  # Longitude (decimal degrees)

    @property
    def label(self) -> str:
        return f"{self.name}, {self.country}"


@dataclass(frozen=True)
class ConversionRow:
    """One target location with its converted time. None result means pending."""

    city: City
    result: ConversionResult | None
