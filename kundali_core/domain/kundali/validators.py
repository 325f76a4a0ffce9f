"""
Fail-fast validation of birth input.

Runs before any astronomical computation; every violation raises
InvalidBirthDataError with a message the caller can show as-is.
"""

import math
import re
from datetime import datetime
from typing import Any

from kundali_core.domain.kundali.ayanamsa import SUPPORTED_AYANAMSAS, is_supported_ayanamsa
from kundali_core.domain.kundali.errors import InvalidBirthDataError, UnsupportedAyanamsaError
from kundali_core.domain.kundali.julian import to_utc_datetime

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_PATTERN = re.compile(r"^\d{2}:\d{2}$")

MAX_TIMEZONE_OFFSET = 14.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_date_format(date_str: str) -> str:
    """Validate ISO date format (YYYY-MM-DD) and that the date exists."""
    if not isinstance(date_str, str) or not DATE_PATTERN.match(date_str):
        raise InvalidBirthDataError("Invalid date format. Use YYYY-MM-DD")
    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError:
        raise InvalidBirthDataError(f"Invalid calendar date: {date_str}")
    return date_str


def validate_time_format(time_str: str) -> str:
    """Validate 24h time format (HH:MM)."""
    if not isinstance(time_str, str) or not TIME_PATTERN.match(time_str):
        raise InvalidBirthDataError("Invalid time format. Use HH:MM")
    try:
        datetime.strptime(time_str, "%H:%M")
    except ValueError:
        raise InvalidBirthDataError(f"Invalid time of day: {time_str}")
    return time_str


def validate_latitude(lat: float) -> float:
    """Validate latitude range."""
    if not _is_number(lat) or not math.isfinite(lat) or lat < -90 or lat > 90:
        raise InvalidBirthDataError("Invalid latitude. Must be between -90 and 90")
    return float(lat)


def validate_longitude(lon: float) -> float:
    """Validate longitude range."""
    if not _is_number(lon) or not math.isfinite(lon) or lon < -180 or lon > 180:
        raise InvalidBirthDataError("Invalid longitude. Must be between -180 and 180")
    return float(lon)


def validate_timezone_offset(offset: float) -> float:
    if (
        not _is_number(offset)
        or not math.isfinite(offset)
        or abs(offset) > MAX_TIMEZONE_OFFSET
    ):
        raise InvalidBirthDataError(
            f"Invalid timezone offset. Must be between -{MAX_TIMEZONE_OFFSET:g} "
            f"and {MAX_TIMEZONE_OFFSET:g} hours"
        )
    return float(offset)


def validate_ayanamsa(name: str) -> str:
    if not isinstance(name, str) or not is_supported_ayanamsa(name):
        raise UnsupportedAyanamsaError(
            f"Unsupported ayanamsa: {name}. Supported: {', '.join(SUPPORTED_AYANAMSAS)}"
        )
    return name


def validate_utc_instant(date_str: str, time_str: str, offset: float) -> None:
    """Reject local times whose UTC instant falls outside the calendar range."""
    try:
        to_utc_datetime(date_str, time_str, offset)
    except OverflowError:
        raise InvalidBirthDataError(
            f"Birth instant {date_str} {time_str} (UTC{offset:+g}) is outside the supported calendar range"
        )


def validate_birth_input(birth: Any) -> None:
    """
    Validate every field of a BirthInput, missing fields first.
    """
    missing = [
        field
        for field in (
            "birth_date",
            "birth_time",
            "latitude",
            "longitude",
            "timezone",
            "ayanamsa",
        )
        if getattr(birth, field, None) is None
    ]
    if missing:
        raise InvalidBirthDataError(f"Missing required birth data: {', '.join(missing)}")

    validate_date_format(birth.birth_date)
    validate_time_format(birth.birth_time)
    validate_latitude(birth.latitude)
    validate_longitude(birth.longitude)
    validate_timezone_offset(birth.timezone)
    validate_ayanamsa(birth.ayanamsa)
    validate_utc_instant(birth.birth_date, birth.birth_time, birth.timezone)
