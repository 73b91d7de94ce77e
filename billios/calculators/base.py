"""Common base for field-test calculators.

Every calculator is an immutable value object: it holds its measurements,
applies one formula in ``calculate()`` and rounds the result to a fixed
number of decimals.
"""

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from billios.common.arithmetic import divide, round_half_away_from_zero
from billios.config import DEFAULT_CONFIG, FieldTestConfig

logger = logging.getLogger(__name__)


class Calculation(BaseModel, ABC):
    """A single field-test formula over a fixed set of measurements."""

    model_config = ConfigDict(frozen=True)

    # Decimal places of the reported result
    decimals: ClassVar[int] = 2

    def calculate(self, config: FieldTestConfig | None = None) -> float:
        """Evaluate the formula and round the result.

        Args:
            config: Calibration defaults and division policy. Uses DEFAULT_CONFIG
                when omitted.

        Returns:
            The rounded result. May be inf or NaN for degenerate inputs unless
            the strict division policy is enabled.
        """
        config = config_or_default(config)
        raw = self._evaluate(config)
        result = round_half_away_from_zero(raw, self.decimals)
        logger.debug(f"{type(self).__name__}: {raw!r} rounded to {result!r}")
        return result

    @abstractmethod
    def _evaluate(self, config: FieldTestConfig) -> float:
        """Apply the unrounded formula."""

    @staticmethod
    def _divide(
        numerator: float, denominator: float, config: FieldTestConfig, quantity: str
    ) -> float:
        return divide(numerator, denominator, strict=config.strict_division, quantity=quantity)


def resolve_choice(choice: float | Calculation, config: FieldTestConfig | None = None) -> float:
    """Resolve a literal-or-calculation input to a float.

    A literal is returned as is; a nested calculation is evaluated with the
    same configuration as its parent.
    """
    if isinstance(choice, Calculation):
        return choice.calculate(config)
    return float(choice)


def config_or_default(config: FieldTestConfig | None) -> FieldTestConfig:
    return DEFAULT_CONFIG if config is None else config
