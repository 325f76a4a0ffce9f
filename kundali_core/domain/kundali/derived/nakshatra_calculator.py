from kundali_core.domain.kundali.ayanamsa import normalize_degrees
from kundali_core.domain.kundali.schemas import NakshatraPlacement

# Nakshatra names in order (Ashwini → Revati)
NAKSHATRAS = [
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira",
    "Ardra", "Punarvasu", "Pushya", "Ashlesha",
    "Magha", "Purva Phalguni", "Uttara Phalguni", "Hasta",
    "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana",
    "Dhanishta", "Shatabhisha", "Purva Bhadrapada",
    "Uttara Bhadrapada", "Revati"
]

NAKSHATRA_SPAN = 360 / 27  # 13.333333...
PADA_SPAN = 360 / 108  # 3.333333...


class NakshatraCalculator:
    """
    Utility to calculate nakshatra and pada from a sidereal longitude.
    """

    def calculate(self, longitude: float) -> NakshatraPlacement:
        absolute_degree = normalize_degrees(longitude)

        # 1-based, wrapped into 1..27
        index = int(absolute_degree // NAKSHATRA_SPAN) % 27 + 1

        degree_within_nakshatra = absolute_degree % NAKSHATRA_SPAN
        pada = min(int(degree_within_nakshatra // PADA_SPAN) + 1, 4)

        return NakshatraPlacement(
            index=index,
            pada=pada,
            name=NAKSHATRAS[index - 1],
        )
