"""
Secondary position strategy: closed-form truncated series.

Accuracy is degraded (degrees for the Moon, tens of degrees for the
planets, since geocentric parallax and perturbations are ignored). It
exists so a chart can always be produced when the ephemeris is missing.
"""

import math
from typing import Dict

from kundali_core.domain.kundali import bodies
from kundali_core.domain.kundali.ayanamsa import normalize_degrees, tropical_to_sidereal
from kundali_core.domain.kundali.julian import AstronomicalInstant
from kundali_core.domain.kundali.positions.base import PositionProvider, ProviderOutcome
from kundali_core.domain.kundali.schemas import BodyPosition


# Mean longitude at J2000 and rate in degrees per Julian century
MEAN_ELEMENTS = {
    bodies.MERCURY: (252.25032350, 149472.67411175),
    bodies.VENUS: (181.97909950, 58517.81538729),
    bodies.MARS: (355.43299958, 19140.30268499),
    bodies.JUPITER: (34.39644051, 3034.74612775),
    bodies.SATURN: (50.07744430, 1222.49362201),
}

# Per-planet constants of the retrograde approximation
RETROGRADE_FACTORS = {
    bodies.MERCURY: 0.2,
    bodies.VENUS: 0.15,
    bodies.MARS: 0.1,
    bodies.JUPITER: 0.08,
    bodies.SATURN: 0.08,
}


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def sun_longitude(t: float) -> float:
    """
    Tropical Sun longitude from the equation of center.

    ``t`` is Julian centuries since J2000.
    """
    mean_longitude = 280.46646 + 36000.76983 * t + 0.0003032 * t * t
    mean_anomaly = 357.52911 + 35999.05029 * t - 0.0001537 * t * t

    center = (
        (1.914602 - 0.004817 * t - 0.000014 * t * t) * _sin(mean_anomaly)
        + (0.019993 - 0.000101 * t) * _sin(2 * mean_anomaly)
        + 0.000289 * _sin(3 * mean_anomaly)
    )
    return normalize_degrees(mean_longitude + center)


def lunar_arguments(t: float) -> Dict[str, float]:
    """
    Fundamental arguments of the truncated lunar theory, in degrees.
    """
    return {
        "L": 218.3164477 + 481267.88123421 * t - 0.0015786 * t * t,
        "D": 297.8501921 + 445267.1114034 * t - 0.0018819 * t * t,
        "M": 357.5291092 + 35999.0502909 * t - 0.0001536 * t * t,
        "Mp": 134.9633964 + 477198.8675055 * t + 0.0087414 * t * t,
        "F": 93.2720950 + 483202.0175233 * t - 0.0036539 * t * t,
    }


def moon_longitude(t: float) -> float:
    """
    Tropical Moon longitude from the three largest periodic terms.
    """
    args = lunar_arguments(t)
    longitude = (
        args["L"]
        + 6.288774 * _sin(args["Mp"])
        + 1.274027 * _sin(2 * args["D"] - args["Mp"])
        + 0.658314 * _sin(2 * args["D"])
    )
    return normalize_degrees(longitude)


def mean_planet_longitude(body: str, t: float) -> float:
    """
    Linear mean longitude from epoch elements, perturbations ignored.
    """
    epoch_longitude, rate = MEAN_ELEMENTS[body]
    return normalize_degrees(epoch_longitude + rate * t)


def approximate_retrograde(body: str, day_of_year: int) -> bool:
    """
    Day-of-year oscillation standing in for a retrograde test.

    This is an approximation, not a velocity-sign check: it flags a
    planet on a fixed fraction of days with a deterministic pattern.
    """
    factor = RETROGRADE_FACTORS.get(body)
    if factor is None:
        return False
    return (day_of_year * factor) % 1 < factor


class AnalyticPositionProvider(PositionProvider):
    """
    Closed-form fallback for the seven classical bodies.
    """

    strategy = "analytic_series"

    def compute(self, instant: AstronomicalInstant) -> ProviderOutcome:
        t = instant.centuries_since_j2000
        positions: Dict[str, BodyPosition] = {}

        for name in bodies.CLASSICAL_BODIES:
            if name == bodies.SUN:
                tropical = sun_longitude(t)
            elif name == bodies.MOON:
                tropical = moon_longitude(t)
            else:
                tropical = mean_planet_longitude(name, t)

            positions[name] = BodyPosition(
                name=name,
                longitude=tropical_to_sidereal(tropical, instant.year),
                latitude=0.0,
                retrograde=approximate_retrograde(name, instant.day_of_year),
            )

        return ProviderOutcome.success(self.strategy, positions)
