from typing import Any, Dict, List

from kundali_core.domain.kundali.derived.rashi_calculator import sign_index
from kundali_core.domain.kundali.schemas import BirthChart


# ─────────────────────────────────────────────
# Domain → JSON
# ─────────────────────────────────────────────

def chart_to_dict(chart: BirthChart) -> Dict[str, Any]:
    """
    Convert a BirthChart into a JSON-safe dict.
    """
    return chart.model_dump(mode="json")


def chart_from_dict(data: Dict[str, Any]) -> BirthChart:
    """
    Rebuild a BirthChart from the output of chart_to_dict.
    """
    return BirthChart.model_validate(data)


# ─────────────────────────────────────────────
# Domain → Renderer rows
# ─────────────────────────────────────────────

def format_planets_for_chart(chart: BirthChart) -> List[Dict[str, Any]]:
    """
    Flatten body positions into rows for a chart renderer.

    ``sign`` is the 0-based sign index.
    """
    rows = []
    for name, planet in chart.planets.items():
        rows.append({
            "name": name,
            "longitude": planet.longitude,
            "latitude": planet.latitude,
            "sign": sign_index(planet.longitude),
            "degree": planet.longitude % 30,
            "retrograde": planet.retrograde,
        })
    return rows
