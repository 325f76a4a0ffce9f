import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from kundali_core.config import Settings, get_settings
from kundali_core.domain.kundali import bodies
from kundali_core.domain.kundali.ayanamsa import LAHIRI, lahiri_ayanamsa
from kundali_core.domain.kundali.calculator import KundaliCalculator
from kundali_core.domain.kundali.derived.nakshatra_calculator import NakshatraCalculator
from kundali_core.domain.kundali.derived.rashi_calculator import RashiCalculator
from kundali_core.domain.kundali.ephemeris import SwissEphemeris
from kundali_core.domain.kundali.errors import CalculationError, InvalidBirthDataError
from kundali_core.domain.kundali.julian import to_astronomical_instant
from kundali_core.domain.kundali.schemas import BirthChart, BirthInfo, ChartMetadata
from kundali_core.domain.kundali.validators import validate_birth_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BirthInput:
    """
    Immutable birth input used for kundali calculation.

    ``timezone`` is the UTC offset in hours of the local birth time.
    """
    birth_date: str
    birth_time: str
    latitude: float
    longitude: float
    timezone: float = 0.0
    ayanamsa: str = LAHIRI

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "BirthInput":
        """
        Build from a form-shaped mapping (date/time/lat/lng/timezone keys,
        or the field names themselves).
        """

        def pick(*keys: str, default: Any = None) -> Any:
            for key in keys:
                if payload.get(key) is not None:
                    return payload[key]
            return default

        return cls(
            birth_date=pick("birth_date", "date"),
            birth_time=pick("birth_time", "time"),
            latitude=pick("latitude", "lat"),
            longitude=pick("longitude", "lng", "lon"),
            timezone=pick("timezone", default=0.0),
            ayanamsa=pick("ayanamsa", default=LAHIRI),
        )


class KundaliEngine:
    """
    Orchestrates kundali calculation.

    This class:
    - Validates birth inputs before any computation
    - Delegates astronomy to the calculator
    - Maps every body to nakshatra and rashi
    - Is the single error boundary: callers see InvalidBirthDataError
      or CalculationError, nothing else
    """

    def __init__(
        self,
        calculator: KundaliCalculator,
        calculation_version: str = "v1",
    ):
        self.calculator = calculator
        self.calculation_version = calculation_version
        self.nakshatra_calculator = NakshatraCalculator()
        self.rashi_calculator = RashiCalculator()

    def generate(self, birth: BirthInput) -> BirthChart:
        """
        Generate the sidereal birth chart.

        Deterministic for a given input and ephemeris, apart from
        ``metadata.computed_at``.
        """
        validate_birth_input(birth)

        try:
            return self._generate(birth)
        except InvalidBirthDataError:
            raise
        except CalculationError as e:
            logger.error(f"Birth chart calculation failed: {e}")
            raise
        except Exception as e:
            logger.error(f"Birth chart calculation failed: {e}")
            raise CalculationError(f"Birth chart calculation failed: {e}") from e

    def _generate(self, birth: BirthInput) -> BirthChart:

        # ─────────────────────────────────────────────
        # Step 1: Time conversion
        # ─────────────────────────────────────────────

        instant = to_astronomical_instant(
            birth.birth_date, birth.birth_time, birth.timezone
        )

        # ─────────────────────────────────────────────
        # Step 2: Raw astronomical calculation
        # ─────────────────────────────────────────────

        raw_result = self.calculator.calculate(
            instant, birth.latitude, birth.longitude
        )
        planets = raw_result["planets"]

        # ─────────────────────────────────────────────
        # Step 3: Nakshatra & Rashi placements
        # ─────────────────────────────────────────────

        nakshatras = {
            name: self.nakshatra_calculator.calculate(planets[name].longitude)
            for name in bodies.ALL_BODIES
        }
        rashis = {
            name: self.rashi_calculator.calculate(planets[name].longitude)
            for name in bodies.ALL_BODIES
        }

        # ─────────────────────────────────────────────
        # Step 4: Assemble Birth Chart
        # ─────────────────────────────────────────────

        position_strategy = raw_result["position_strategy"]
        ascendant_strategy = raw_result["ascendant_strategy"]
        fallback_used = (
            position_strategy == self.calculator.secondary_positions.strategy
            or ascendant_strategy == self.calculator.secondary_ascendant.strategy
        )

        logger.debug(
            f"Chart assembled for {birth.birth_date} {birth.birth_time} "
            f"(positions={position_strategy}, ascendant={ascendant_strategy})"
        )

        return BirthChart(
            birth_info=BirthInfo(
                date=birth.birth_date,
                time=birth.birth_time,
                latitude=birth.latitude,
                longitude=birth.longitude,
                timezone=birth.timezone,
                julian_day=instant.julian_day,
                utc=instant.utc,
            ),
            ascendant=raw_result["ascendant"],
            planets={name: planets[name] for name in bodies.ALL_BODIES},
            houses=raw_result["houses"],
            nakshatras=nakshatras,
            rashis=rashis,
            metadata=ChartMetadata(
                position_strategy=position_strategy,
                ascendant_strategy=ascendant_strategy,
                fallback_used=fallback_used,
                ayanamsa=LAHIRI,
                ayanamsa_degrees=lahiri_ayanamsa(instant.year),
                computed_at=datetime.now(timezone.utc),
                calculation_version=self.calculation_version,
            ),
        )


def build_engine(settings: Optional[Settings] = None) -> KundaliEngine:
    """
    Wire an engine from configuration.
    """
    settings = settings or get_settings()

    ephemeris = None
    if settings.USE_EPHEMERIS:
        ephemeris = SwissEphemeris(settings.EPHEMERIS_PATH)

    calculator = KundaliCalculator(
        ephemeris=ephemeris,
        retrograde_sample_hours=settings.RETROGRADE_SAMPLE_HOURS,
    )
    return KundaliEngine(calculator, calculation_version=settings.CALCULATION_VERSION)


def generate_chart(
    birth_date: str,
    birth_time: str,
    latitude: float,
    longitude: float,
    timezone: float = 0.0,
    ayanamsa: str = LAHIRI,
) -> BirthChart:
    """
    Convenience entry point using the configured engine.
    """
    birth = BirthInput(
        birth_date=birth_date,
        birth_time=birth_time,
        latitude=latitude,
        longitude=longitude,
        timezone=timezone,
        ayanamsa=ayanamsa,
    )
    return build_engine().generate(birth)
