"""Percent compaction and oversize correction calculations.

Relative compaction compares the field dry density against the laboratory
maximum dry density. When the field sample holds oversize (rock) particles
the laboratory maximum is corrected for the oversize fraction first.
"""

from typing import ClassVar

from pydantic import Field

from billios.calculators.base import Calculation, config_or_default, resolve_choice
from billios.calculators.density import DryDensityChoice
from billios.config import CONSTANTS, FieldTestConfig


class Compaction(Calculation):
    """Relative compaction as a percentage of the laboratory maximum.

    Formula:
        compaction = (dry_density / lab_max) * 100
    """

    decimals: ClassVar[int] = 1

    dry_density: DryDensityChoice = Field(description="Dry density, as a value or a DryDensity")
    lab_max: float = Field(description="Laboratory maximum dry density")

    def resolved_dry_density(self, config: FieldTestConfig | None = None) -> float:
        return resolve_choice(self.dry_density, config)

    def _evaluate(self, config: FieldTestConfig) -> float:
        ratio = self._divide(self.resolved_dry_density(config), self.lab_max, config, "compaction")
        return ratio * CONSTANTS.PERCENT


class RockCorrection(Calculation):
    """Oversize fraction of the field sample.

    Formula:
        rock_correction = left_on_sieve_weight / pre_sieve_weight
    """

    decimals: ClassVar[int] = 1

    left_on_sieve_weight: float = Field(description="Mass retained on the oversize sieve")
    pre_sieve_weight: float = Field(description="Sample mass before sieving")

    def _evaluate(self, config: FieldTestConfig) -> float:
        return self._divide(
            self.left_on_sieve_weight, self.pre_sieve_weight, config, "rock correction"
        )


# Either a known oversize fraction or a RockCorrection calculation to evaluate
RockCorrectionChoice = float | RockCorrection


class LabMaxCorrection(Calculation):
    """Laboratory maximum dry density corrected for oversize particles.

    Formula:
        corrected = (1 - 0.05 * rc) / (rc / (62.4 * Gs) + (1 - rc) / lab_max)

    where rc is the oversize fraction and Gs the specific gravity of the
    oversize particles.

    Attributes:
        rock_correction: Oversize fraction, as a value or a RockCorrection
        lab_max: Laboratory maximum dry density of the fine fraction
        specific_gravity: Oversize specific gravity; None uses the configured constant
    """

    decimals: ClassVar[int] = 1

    rock_correction: RockCorrectionChoice = Field(
        description="Oversize fraction, as a value or a RockCorrection"
    )
    lab_max: float = Field(description="Laboratory maximum dry density")
    specific_gravity: float | None = Field(
        default=None, description="Oversize specific gravity; None uses the configured constant"
    )

    def resolved_rock_correction(self, config: FieldTestConfig | None = None) -> float:
        return resolve_choice(self.rock_correction, config)

    def resolved_specific_gravity(self, config: FieldTestConfig | None = None) -> float:
        if self.specific_gravity is not None:
            return self.specific_gravity
        return config_or_default(config).specific_gravity

    def _evaluate(self, config: FieldTestConfig) -> float:
        quantity = "lab max correction"
        rock = self.resolved_rock_correction(config)
        gravity = self.resolved_specific_gravity(config)
        oversize_unit_weight = CONSTANTS.WATER_UNIT_WEIGHT_PCF * gravity

        numerator = 1.0 - CONSTANTS.OVERSIZE_ADJUSTMENT * rock
        oversize_term = self._divide(rock, oversize_unit_weight, config, quantity)
        fine_term = self._divide(1.0 - rock, self.lab_max, config, quantity)

        return self._divide(numerator, oversize_term + fine_term, config, quantity)
