"""Field density assessment.

Chains the field-test calculators for a single sand-cone test location:
sand used, wet density, moisture content, dry density, and relative
compaction against the (optionally oversize-corrected) laboratory maximum.
"""

import logging
import time

from billios.calculators import (
    Calculation,
    Compaction,
    DryDensity,
    LabMaxCorrection,
    MoistureContent,
    RockCorrection,
    SandUsed,
    WetDensity,
)
from billios.config import DEFAULT_CONFIG, FieldTestConfig
from billios.models import FieldDensityMeasurements, FieldDensityResult

logger = logging.getLogger(__name__)


class FieldDensityAssessment:
    """Field density assessment for one test location."""

    def __init__(
        self,
        measurements: FieldDensityMeasurements,
        config: FieldTestConfig | None = None,
    ):
        """Initialize field density assessment.

        Args:
            measurements: Readings taken at the test location
            config: Calibration defaults and division policy (DEFAULT_CONFIG,
                as used by a bare calculate(), when omitted)
        """
        self.measurements = measurements
        self.config = config if config is not None else DEFAULT_CONFIG

    def run(self) -> FieldDensityResult:
        """Run the field density calculations.

        Steps:
        1. Sand used from the cone readings
        2. Wet density from the soil mass and sand used
        3. Moisture content from the oven-dried sample
        4. Dry density from wet density and moisture content
        5. Oversize correction of the lab max (only if sieve weights were recorded)
        6. Relative compaction

        Returns:
            FieldDensityResult with every intermediate value

        Raises:
            DegenerateDenominatorError: If strict division is configured and a
                formula divides by zero
        """
        m = self.measurements
        logger.info(f"Running field density assessment for test {m.test_id or '<unlabelled>'}")
        t_total = time.perf_counter()

        sand_used = SandUsed(
            cone_pre_test=m.cone_pre_test,
            cone_post_test=m.cone_post_test,
            sand_in_cone=m.sand_in_cone,
        )
        wet_density = WetDensity(soil=m.soil, sand_used=sand_used, sand_density=m.sand_density)
        moisture_content = MoistureContent(
            wet_weight=m.wet_weight, dry_weight=m.dry_weight, tare_pan=m.tare_pan
        )
        dry_density = DryDensity(wet_density=wet_density, moisture_content=moisture_content)

        rock_correction = None
        lab_max = m.lab_max
        if m.has_oversize_data():
            rock_correction = RockCorrection(
                left_on_sieve_weight=m.left_on_sieve_weight,
                pre_sieve_weight=m.pre_sieve_weight,
            )
            lab_max = self._step(
                "lab_max_correction",
                LabMaxCorrection(
                    rock_correction=rock_correction,
                    lab_max=m.lab_max,
                    specific_gravity=m.specific_gravity,
                ),
            )
        else:
            logger.info("No sieve weights recorded, skipping oversize correction")

        compaction = Compaction(dry_density=dry_density, lab_max=lab_max)

        result = FieldDensityResult(
            test_id=m.test_id,
            sand_used=self._step("sand_used", sand_used),
            wet_density=self._step("wet_density", wet_density),
            moisture_content=self._step("moisture_content", moisture_content),
            dry_density=self._step("dry_density", dry_density),
            rock_correction=(
                self._step("rock_correction", rock_correction)
                if rock_correction is not None
                else None
            ),
            lab_max=lab_max,
            compaction=self._step("compaction", compaction),
        )

        logger.info(f"Field density assessment complete in {time.perf_counter() - t_total:.3f}s")
        return result

    def _step(self, name: str, calculation: Calculation) -> float:
        t0 = time.perf_counter()
        value = calculation.calculate(self.config)
        logger.info(f"[timing] {name}: {time.perf_counter() - t0:.6f}s -> {value}")
        return value
