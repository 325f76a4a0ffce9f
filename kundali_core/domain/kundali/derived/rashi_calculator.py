from kundali_core.domain.kundali.ayanamsa import normalize_degrees
from kundali_core.domain.kundali.schemas import RashiPlacement

SIGN_ORDER = [
    "Aries", "Taurus", "Gemini", "Cancer",
    "Leo", "Virgo", "Libra", "Scorpio",
    "Sagittarius", "Capricorn", "Aquarius", "Pisces",
]

SIGN_SPAN = 30.0


def sign_index(longitude: float) -> int:
    """
    0-based sign index of a longitude.
    """
    return int(normalize_degrees(longitude) // SIGN_SPAN) % 12


class RashiCalculator:
    """
    Utility to calculate the sidereal sign and degree-in-sign.
    """

    def calculate(self, longitude: float) -> RashiPlacement:
        absolute_degree = normalize_degrees(longitude)
        sign = sign_index(absolute_degree) + 1

        return RashiPlacement(
            sign=sign,
            degree=absolute_degree % SIGN_SPAN,
            name=SIGN_ORDER[sign - 1],
        )
