from typing import Any, Dict, Optional

from kundali_core.domain.kundali.ascendant import (
    AscendantStrategy,
    JulianDayAscendant,
    SiderealTimeAscendant,
)
from kundali_core.domain.kundali.derived.house_calculator import HouseCalculator
from kundali_core.domain.kundali.ephemeris import Ephemeris
from kundali_core.domain.kundali.julian import AstronomicalInstant
from kundali_core.domain.kundali.nodes import calculate_lunar_nodes
from kundali_core.domain.kundali.positions.analytic_provider import AnalyticPositionProvider
from kundali_core.domain.kundali.positions.base import (
    PositionProvider,
    select_positions,
    select_strategy,
)
from kundali_core.domain.kundali.positions.ephemeris_provider import EphemerisPositionProvider


class KundaliCalculator:
    """
    Astronomical calculator for kundali generation.

    This class:
    - Resolves positions, nodes, ascendant and houses for one instant
    - Picks primary or fallback strategies, once per stage
    - Returns raw, structured data consumed by KundaliEngine
    """

    def __init__(
        self,
        ephemeris: Optional[Ephemeris] = None,
        retrograde_sample_hours: float = 24.0,
    ):
        self.ephemeris = ephemeris

        # No ephemeris means every chart uses the fallbacks
        self.primary_positions: Optional[PositionProvider] = None
        self.primary_ascendant: Optional[AscendantStrategy] = None
        if ephemeris is not None:
            self.primary_positions = EphemerisPositionProvider(
                ephemeris, sample_hours=retrograde_sample_hours
            )
            self.primary_ascendant = SiderealTimeAscendant(ephemeris)

        self.secondary_positions: PositionProvider = AnalyticPositionProvider()
        self.secondary_ascendant: AscendantStrategy = JulianDayAscendant()
        self.house_calculator = HouseCalculator()

    # ─────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────

    def calculate(
        self,
        instant: AstronomicalInstant,
        latitude: float,
        longitude: float,
    ) -> Dict[str, Any]:
        """
        Calculate core astronomical data for kundali.

        Stages run strictly in order so that houses and placements read
        longitudes resolved under the same ayanamsa.
        """

        # Step 1: Classical bodies (primary or fallback, never mixed)
        position_outcome = select_positions(
            instant, self.primary_positions, self.secondary_positions
        )
        planets = dict(position_outcome.value)

        # Step 2: Lunar nodes
        planets.update(calculate_lunar_nodes(instant))

        # Step 3: Ascendant
        ascendant_outcome = select_strategy(
            self.primary_ascendant,
            self.secondary_ascendant,
            instant,
            latitude,
            longitude,
        )
        ascendant = ascendant_outcome.value

        # Step 4: Houses
        houses = self.house_calculator.calculate(ascendant.longitude)

        return {
            "planets": planets,
            "ascendant": ascendant,
            "houses": houses,
            "position_strategy": position_outcome.strategy,
            "ascendant_strategy": ascendant_outcome.strategy,
        }
