import logging
import math
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import swisseph as swe

from kundali_core.domain.kundali import bodies
from kundali_core.domain.kundali.errors import EphemerisError

logger = logging.getLogger(__name__)


class Ephemeris(ABC):
    """
    External position capability used by the primary strategies.

    Implementations are pure functions of (body, instant) and should
    report failures as EphemerisError. Any exception they raise makes
    the primary strategies fall back.
    """

    @abstractmethod
    def ecliptic(self, body: str, julian_day: float) -> Tuple[float, float]:
        """
        Geocentric tropical ecliptic (longitude, latitude) in degrees.
        """
        raise NotImplementedError

    @abstractmethod
    def sidereal_time(self, julian_day: float) -> float:
        """
        Greenwich sidereal time in hours.
        """
        raise NotImplementedError


class SwissEphemeris(Ephemeris):
    """
    Ephemeris backed by pyswisseph.

    Tropical output only; the sidereal shift is applied by the caller
    so the global sidereal mode of the library is never touched.
    """

    BODY_MAPPING = {
        bodies.SUN: swe.SUN,
        bodies.MOON: swe.MOON,
        bodies.MERCURY: swe.MERCURY,
        bodies.VENUS: swe.VENUS,
        bodies.MARS: swe.MARS,
        bodies.JUPITER: swe.JUPITER,
        bodies.SATURN: swe.SATURN,
    }

    def __init__(self, ephemeris_path: Optional[str] = None):
        if ephemeris_path:
            logger.info(f"Using Swiss Ephemeris files from {ephemeris_path}")
            swe.set_ephe_path(ephemeris_path)

    def ecliptic(self, body: str, julian_day: float) -> Tuple[float, float]:
        pid = self.BODY_MAPPING.get(body)
        if pid is None:
            raise EphemerisError(f"Unsupported body for ephemeris: {body}")

        try:
            xx, _ = swe.calc_ut(julian_day, pid)
        except swe.Error as e:
            raise EphemerisError(f"Swiss Ephemeris failed for {body}: {e}") from e

        lon, lat = float(xx[0]), float(xx[1])
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise EphemerisError(f"Swiss Ephemeris returned non-finite position for {body}")
        return lon, lat

    def sidereal_time(self, julian_day: float) -> float:
        try:
            hours = float(swe.sidtime(julian_day))
        except swe.Error as e:
            raise EphemerisError(f"Swiss Ephemeris sidereal time failed: {e}") from e

        if not math.isfinite(hours):
            raise EphemerisError("Swiss Ephemeris returned non-finite sidereal time")
        return hours
