"""
Tropical → sidereal conversion and cyclic degree arithmetic.

Every function here is pure. A chart stays consistent only if all of its
conversions use the same birth year.
"""

LAHIRI = "Lahiri"
SUPPORTED_AYANAMSAS = (LAHIRI,)

# Linear Lahiri approximation
LAHIRI_BASE_DEGREES = 23.85
LAHIRI_EPOCH_YEAR = 1900
LAHIRI_ANNUAL_RATE = 0.013972


def normalize_degrees(value: float) -> float:
    """
    Map any finite angle into [0, 360).
    """
    result = value % 360.0
    # tiny negatives round up to exactly 360.0
    if result >= 360.0:
        return 0.0
    return result


def signed_delta(start: float, end: float) -> float:
    """
    Shortest signed angular difference end - start, in (-180, 180].
    """
    delta = (end - start) % 360.0
    if delta > 180.0:
        delta -= 360.0
    return delta


def is_supported_ayanamsa(name: str) -> bool:
    return name.lower() in {a.lower() for a in SUPPORTED_AYANAMSAS}


def lahiri_ayanamsa(year: int) -> float:
    """
    Ayanamsa in degrees for a calendar year.
    """
    return LAHIRI_BASE_DEGREES + (year - LAHIRI_EPOCH_YEAR) * LAHIRI_ANNUAL_RATE


def tropical_to_sidereal(longitude: float, year: int) -> float:
    """
    Shift a tropical ecliptic longitude into the sidereal frame.
    """
    return normalize_degrees(longitude - lahiri_ayanamsa(year))
