"""Moisture content calculation."""

from typing import ClassVar

from pydantic import Field

from billios.calculators.base import Calculation
from billios.config import FieldTestConfig


class MoistureContent(Calculation):
    """Ratio of water mass to dry soil mass, as a fraction.

    Formula:
        moisture_content = (wet_weight - dry_weight) / (dry_weight - tare_pan)

    Attributes:
        wet_weight: Wet sample plus pan
        dry_weight: Oven-dried sample plus pan
        tare_pan: Empty pan
    """

    decimals: ClassVar[int] = 8

    wet_weight: float = Field(description="Wet sample plus pan")
    dry_weight: float = Field(description="Dry sample plus pan")
    tare_pan: float = Field(description="Empty pan")

    def _evaluate(self, config: FieldTestConfig) -> float:
        water = self.wet_weight - self.dry_weight
        dry_soil = self.dry_weight - self.tare_pan
        return self._divide(water, dry_soil, config, "moisture content")


# Either a known moisture content or a MoistureContent calculation to evaluate
MoistureContentChoice = float | MoistureContent
