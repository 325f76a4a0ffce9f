import math
from typing import Dict, Tuple

from kundali_core.domain.kundali import bodies
from kundali_core.domain.kundali.ayanamsa import signed_delta, tropical_to_sidereal
from kundali_core.domain.kundali.ephemeris import Ephemeris
from kundali_core.domain.kundali.errors import EphemerisError
from kundali_core.domain.kundali.julian import AstronomicalInstant
from kundali_core.domain.kundali.positions.base import PositionProvider, ProviderOutcome
from kundali_core.domain.kundali.schemas import BodyPosition


class EphemerisPositionProvider(PositionProvider):
    """
    Primary strategy: positions from an external ephemeris.

    Retrograde is inferred by sampling the same body a fixed number of
    hours later and checking the sign of the angular difference.
    """

    strategy = "swiss_ephemeris"

    def __init__(self, ephemeris: Ephemeris, sample_hours: float = 24.0):
        self.ephemeris = ephemeris
        self.sample_hours = sample_hours

    def compute(self, instant: AstronomicalInstant) -> ProviderOutcome:
        try:
            positions: Dict[str, BodyPosition] = {
                name: self._position(name, instant)
                for name in bodies.CLASSICAL_BODIES
            }
        except Exception as e:
            # Any primary failure hands the whole chart to the fallback
            return ProviderOutcome.failure(self.strategy, str(e))

        return ProviderOutcome.success(self.strategy, positions)

    # ─────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────

    def _sidereal(self, body: str, julian_day: float, year: int) -> Tuple[float, float]:
        lon, lat = self.ephemeris.ecliptic(body, julian_day)
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise EphemerisError(f"Non-finite ecliptic position for {body}")
        return tropical_to_sidereal(lon, year), lat

    def _position(self, body: str, instant: AstronomicalInstant) -> BodyPosition:
        # Birth year for both samples keeps one ayanamsa per chart
        year = instant.year
        longitude, latitude = self._sidereal(body, instant.julian_day, year)

        retrograde = False
        if body not in bodies.LUMINARIES:
            later = instant.shifted(self.sample_hours)
            later_longitude, _ = self._sidereal(body, later.julian_day, year)
            retrograde = signed_delta(longitude, later_longitude) < 0

        return BodyPosition(
            name=body,
            longitude=longitude,
            latitude=latitude,
            retrograde=retrograde,
        )
