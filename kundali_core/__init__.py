"""
Vedic birth chart core.

Typical use::

    from kundali_core import BirthInput, build_engine

    chart = build_engine().generate(
        BirthInput("2000-01-01", "12:00", 28.6139, 77.2090, timezone=5.5)
    )
"""

from kundali_core.domain.kundali.converters import (
    chart_from_dict,
    chart_to_dict,
    format_planets_for_chart,
)
from kundali_core.domain.kundali.engine import (
    BirthInput,
    KundaliEngine,
    build_engine,
    generate_chart,
)
from kundali_core.domain.kundali.errors import (
    CalculationError,
    InvalidBirthDataError,
    KundaliError,
    UnsupportedAyanamsaError,
)
from kundali_core.domain.kundali.julian import estimate_timezone_offset
from kundali_core.domain.kundali.schemas import BirthChart

__all__ = [
    "BirthChart",
    "BirthInput",
    "KundaliEngine",
    "build_engine",
    "generate_chart",
    "chart_to_dict",
    "chart_from_dict",
    "format_planets_for_chart",
    "estimate_timezone_offset",
    "KundaliError",
    "InvalidBirthDataError",
    "UnsupportedAyanamsaError",
    "CalculationError",
]
