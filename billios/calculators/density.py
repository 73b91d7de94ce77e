"""Dry density calculation."""

from typing import ClassVar

from pydantic import Field

from billios.calculators.base import Calculation, resolve_choice
from billios.calculators.moisture import MoistureContentChoice
from billios.calculators.sand_cone import WetDensityChoice
from billios.config import FieldTestConfig


class DryDensity(Calculation):
    """Dry density derived from wet density and moisture content.

    Each input may be given as a known value or as the calculation that
    produces it; nested calculations are evaluated when this one is.

    Formula:
        dry_density = wet_density / (1 + moisture_content)
    """

    decimals: ClassVar[int] = 0

    wet_density: WetDensityChoice = Field(description="Wet density, as a value or a WetDensity")
    moisture_content: MoistureContentChoice = Field(
        description="Moisture content, as a value or a MoistureContent"
    )

    def resolved_wet_density(self, config: FieldTestConfig | None = None) -> float:
        return resolve_choice(self.wet_density, config)

    def resolved_moisture_content(self, config: FieldTestConfig | None = None) -> float:
        return resolve_choice(self.moisture_content, config)

    def _evaluate(self, config: FieldTestConfig) -> float:
        return self._divide(
            self.resolved_wet_density(config),
            1.0 + self.resolved_moisture_content(config),
            config,
            "dry density",
        )


# Either a known dry density or a DryDensity calculation to evaluate
DryDensityChoice = float | DryDensity
