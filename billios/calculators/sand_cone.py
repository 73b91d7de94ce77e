"""Sand-cone density replacement test calculations.

The hole excavated at the test location is filled with calibrated sand. The
mass of sand used gives the hole volume, and the excavated soil mass over
that volume gives the in-place wet density.
"""

from typing import ClassVar

from pydantic import Field

from billios.calculators.base import Calculation, config_or_default, resolve_choice
from billios.config import FieldTestConfig


class SandUsed(Calculation):
    """Mass of sand that filled the test hole.

    Formula:
        sand_used = cone_pre_test - (cone_post_test + sand_in_cone)

    Attributes:
        cone_pre_test: Mass of the sand cone apparatus before the test
        cone_post_test: Mass of the sand cone apparatus after the test
        sand_in_cone: Sand retained in the cone and plate; None uses the
            configured calibration constant
    """

    decimals: ClassVar[int] = 2

    cone_pre_test: float = Field(description="Apparatus mass before the test")
    cone_post_test: float = Field(description="Apparatus mass after the test")
    sand_in_cone: float | None = Field(
        default=None, description="Sand in cone; None uses the calibration constant"
    )

    def resolved_sand_in_cone(self, config: FieldTestConfig | None = None) -> float:
        """Sand in cone, falling back to the configured calibration constant."""
        if self.sand_in_cone is not None:
            return self.sand_in_cone
        return config_or_default(config).sand_in_cone

    def _evaluate(self, config: FieldTestConfig) -> float:
        return self.cone_pre_test - (self.cone_post_test + self.resolved_sand_in_cone(config))


# Either a known sand mass or a SandUsed calculation to evaluate
SandUsedChoice = float | SandUsed


class WetDensity(Calculation):
    """In-place wet density of the excavated soil.

    Formula:
        wet_density = (soil / sand_used) * sand_density

    Attributes:
        soil: Mass of wet soil removed from the hole
        sand_used: Sand used to fill the hole, as a value or a SandUsed calculation
        sand_density: Bulk density of the calibrated sand; None uses the
            configured calibration constant
    """

    decimals: ClassVar[int] = 4

    soil: float = Field(description="Wet soil mass removed from the hole")
    sand_used: SandUsedChoice = Field(description="Sand used, as a value or a SandUsed")
    sand_density: float | None = Field(
        default=None, description="Sand bulk density; None uses the calibration constant"
    )

    def resolved_sand_used(self, config: FieldTestConfig | None = None) -> float:
        return resolve_choice(self.sand_used, config)

    def resolved_sand_density(self, config: FieldTestConfig | None = None) -> float:
        """Sand density, falling back to the configured calibration constant."""
        if self.sand_density is not None:
            return self.sand_density
        return config_or_default(config).sand_density

    def _evaluate(self, config: FieldTestConfig) -> float:
        ratio = self._divide(self.soil, self.resolved_sand_used(config), config, "wet density")
        return ratio * self.resolved_sand_density(config)


# Either a known wet density or a WetDensity calculation to evaluate
WetDensityChoice = float | WetDensity
