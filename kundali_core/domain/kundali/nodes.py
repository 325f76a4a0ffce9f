from typing import Dict

from kundali_core.domain.kundali import bodies
from kundali_core.domain.kundali.ayanamsa import normalize_degrees, tropical_to_sidereal
from kundali_core.domain.kundali.julian import AstronomicalInstant
from kundali_core.domain.kundali.schemas import BodyPosition

# Binary grid for node longitudes; sums and differences of grid values
# below 720 degrees are exact in double precision
NODE_GRID = 2.0 ** -32


def mean_node_longitude(year: int, day_of_year: int) -> float:
    """
    Simplified tropical longitude of the Moon's mean ascending node.
    """
    return normalize_degrees(
        125.0445479
        - 1934.1362891 * (year - 2000) / 365.25
        - 0.0020756 * day_of_year
    )


def _snap(longitude: float) -> float:
    return normalize_degrees(round(longitude / NODE_GRID) * NODE_GRID)


def calculate_lunar_nodes(instant: AstronomicalInstant) -> Dict[str, BodyPosition]:
    """
    Rahu and Ketu, exactly 180° apart and always retrograde.

    Rahu's sidereal longitude is snapped to NODE_GRID (about 2e-10°)
    and Ketu is derived from it, so the opposition holds without
    float drift. Independent of the position strategy in use.
    """
    rahu = _snap(
        tropical_to_sidereal(
            mean_node_longitude(instant.year, instant.day_of_year), instant.year
        )
    )
    ketu = normalize_degrees(rahu + 180.0)

    return {
        bodies.RAHU: BodyPosition(
            name=bodies.RAHU,
            longitude=rahu,
            latitude=0.0,
            retrograde=True,
        ),
        bodies.KETU: BodyPosition(
            name=bodies.KETU,
            longitude=ketu,
            latitude=0.0,
            retrograde=True,
        ),
    }
