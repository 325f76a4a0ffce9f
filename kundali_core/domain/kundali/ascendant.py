import math
from abc import ABC, abstractmethod

from kundali_core.domain.kundali.ayanamsa import normalize_degrees, tropical_to_sidereal
from kundali_core.domain.kundali.derived.nakshatra_calculator import NakshatraCalculator
from kundali_core.domain.kundali.derived.rashi_calculator import SIGN_ORDER, sign_index
from kundali_core.domain.kundali.ephemeris import Ephemeris
from kundali_core.domain.kundali.errors import EphemerisError
from kundali_core.domain.kundali.julian import J2000, AstronomicalInstant
from kundali_core.domain.kundali.positions.base import ProviderOutcome
from kundali_core.domain.kundali.schemas import Ascendant

OBLIQUITY_DEGREES = 23.44
SIDEREAL_RATE = 1.00273790935
FALLBACK_LATITUDE_FACTOR = 0.25


def build_ascendant(sidereal_longitude: float) -> Ascendant:
    """
    Break a sidereal ascendant longitude into sign and degree.
    """
    longitude = normalize_degrees(sidereal_longitude)
    sign = sign_index(longitude)
    return Ascendant(
        longitude=longitude,
        sign=sign,
        degree=longitude % 30,
        sign_name=SIGN_ORDER[sign],
        nakshatra=NakshatraCalculator().calculate(longitude),
    )


class AscendantStrategy(ABC):
    """
    Strategy producing the sidereal ascendant for an instant and place.
    """

    strategy: str

    @abstractmethod
    def compute(
        self,
        instant: AstronomicalInstant,
        latitude: float,
        longitude: float,
    ) -> ProviderOutcome:
        raise NotImplementedError


class SiderealTimeAscendant(AscendantStrategy):
    """
    Primary ascendant: ephemeris sidereal time plus a simplified
    latitude correction scaled by the obliquity of the ecliptic.
    """

    strategy = "sidereal_time"

    def __init__(self, ephemeris: Ephemeris):
        self.ephemeris = ephemeris

    def compute(
        self,
        instant: AstronomicalInstant,
        latitude: float,
        longitude: float,
    ) -> ProviderOutcome:
        try:
            local_sidereal_hours = (
                self.ephemeris.sidereal_time(instant.julian_day) + longitude / 15.0
            )
            if not math.isfinite(local_sidereal_hours):
                raise EphemerisError("Non-finite sidereal time")

            tropical = normalize_degrees(
                (local_sidereal_hours * 15.0) % 360
                + math.sin(math.radians(latitude)) * OBLIQUITY_DEGREES
            )
            sidereal = tropical_to_sidereal(tropical, instant.year)
            ascendant = build_ascendant(sidereal)
        except Exception as e:
            return ProviderOutcome.failure(self.strategy, str(e))

        return ProviderOutcome.success(self.strategy, ascendant)


class JulianDayAscendant(AscendantStrategy):
    """
    Fallback ascendant: sidereal-time proxy from the Julian Day alone,
    a cruder latitude term and no obliquity term.
    """

    strategy = "julian_day_proxy"

    def compute(
        self,
        instant: AstronomicalInstant,
        latitude: float,
        longitude: float,
    ) -> ProviderOutcome:
        local_sidereal_hours = (
            (instant.julian_day - J2000) * SIDEREAL_RATE + longitude / 15.0
        )
        tropical = normalize_degrees(
            local_sidereal_hours * 15.0 + latitude * FALLBACK_LATITUDE_FACTOR
        )
        sidereal = tropical_to_sidereal(tropical, instant.year)
        return ProviderOutcome.success(self.strategy, build_ascendant(sidereal))
