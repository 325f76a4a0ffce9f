from typing import Tuple

from kundali_core.domain.kundali.ayanamsa import normalize_degrees
from kundali_core.domain.kundali.derived.rashi_calculator import sign_index
from kundali_core.domain.kundali.schemas import HouseCusp

HOUSE_SPAN = 30.0


class HouseCalculator:
    """
    Equal-house cusps counted from the ascendant.
    """

    def calculate(self, ascendant_longitude: float) -> Tuple[HouseCusp, ...]:
        """
        Calculate the 12 cusps; house 1 starts at the ascendant.
        """
        cusps = []
        for i in range(12):
            cusp = normalize_degrees(ascendant_longitude + HOUSE_SPAN * i)
            cusps.append(
                HouseCusp(
                    house=i + 1,
                    cusp=cusp,
                    sign=sign_index(cusp),
                )
            )

        return tuple(cusps)
