import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from kundali_core.domain.kundali.errors import CalculationError
from kundali_core.domain.kundali.julian import AstronomicalInstant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderOutcome:
    """
    Result of one strategy attempt: a value, or the reason it failed.
    """
    strategy: str
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, strategy: str, value: Any) -> "ProviderOutcome":
        return cls(strategy=strategy, value=value)

    @classmethod
    def failure(cls, strategy: str, error: str) -> "ProviderOutcome":
        return cls(strategy=strategy, error=error)


class PositionProvider(ABC):
    """
    Strategy producing sidereal positions of the seven classical bodies.
    """

    strategy: str

    @abstractmethod
    def compute(self, instant: AstronomicalInstant) -> ProviderOutcome:
        """
        Return an outcome whose value is a body → BodyPosition dict.
        """
        raise NotImplementedError


def select_strategy(
    primary: Optional[Any],
    secondary: Any,
    *args: Any,
) -> ProviderOutcome:
    """
    One-shot fallback policy shared by positions and ascendant.

    The primary is tried once; if it reports failure the secondary
    produces the whole result. A failing secondary has no further
    fallback.
    """
    if primary is not None:
        outcome = primary.compute(*args)
        if outcome.ok:
            return outcome
        logger.warning(
            f"Strategy '{primary.strategy}' failed ({outcome.error}); "
            f"falling back to '{secondary.strategy}'"
        )

    outcome = secondary.compute(*args)
    if not outcome.ok:
        raise CalculationError(
            f"Fallback strategy '{secondary.strategy}' failed: {outcome.error}"
        )
    return outcome


def select_positions(
    instant: AstronomicalInstant,
    primary: Optional[PositionProvider],
    secondary: PositionProvider,
) -> ProviderOutcome:
    return select_strategy(primary, secondary, instant)
