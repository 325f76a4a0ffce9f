from datetime import datetime
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# ─────────────────────────────────────────────
# Placements
# ─────────────────────────────────────────────

class NakshatraPlacement(FrozenModel):
    """
    Lunar mansion of a longitude.
    """
    index: int = Field(ge=1, le=27)
    pada: int = Field(ge=1, le=4)
    name: str


class RashiPlacement(FrozenModel):
    """
    Sidereal sign of a longitude.
    """
    sign: int = Field(ge=1, le=12)
    degree: float = Field(ge=0.0, lt=30.0)
    name: str


# ─────────────────────────────────────────────
# Core Atomic Schemas
# ─────────────────────────────────────────────

class BodyPosition(FrozenModel):
    """
    Represents a single body's sidereal position in a chart.
    """
    name: str
    longitude: float = Field(ge=0.0, lt=360.0)
    latitude: float = 0.0
    retrograde: bool = False


class Ascendant(FrozenModel):
    """
    Represents the ascendant (Lagna).

    ``sign`` is the 0-based sign index.
    """
    longitude: float = Field(ge=0.0, lt=360.0)
    sign: int = Field(ge=0, le=11)
    degree: float = Field(ge=0.0, lt=30.0)
    sign_name: str
    nakshatra: Optional[NakshatraPlacement] = None


class HouseCusp(FrozenModel):
    """
    Equal-house cusp. ``sign`` is the 0-based sign index.
    """
    house: int = Field(ge=1, le=12)
    cusp: float = Field(ge=0.0, lt=360.0)
    sign: int = Field(ge=0, le=11)


# ─────────────────────────────────────────────
# Birth Chart (D1)
# ─────────────────────────────────────────────

class BirthInfo(FrozenModel):
    """
    Echo of the birth input plus the derived time axes.
    """
    date: str
    time: str
    latitude: float
    longitude: float
    timezone: float
    julian_day: float
    utc: datetime


class ChartMetadata(FrozenModel):
    position_strategy: str
    ascendant_strategy: str
    fallback_used: bool
    ayanamsa: str
    ayanamsa_degrees: float
    computed_at: datetime
    calculation_version: str


class BirthChart(FrozenModel):
    """
    Represents the complete sidereal birth chart.
    """
    birth_info: BirthInfo
    ascendant: Ascendant
    planets: Dict[str, BodyPosition]
    houses: Tuple[HouseCusp, ...]
    nakshatras: Dict[str, NakshatraPlacement]
    rashis: Dict[str, RashiPlacement]
    metadata: ChartMetadata
