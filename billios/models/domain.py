"""Domain models for a field density test at one location.

These models represent the measurements taken in the field and the derived
results as immutable value objects, separate from the calculators that
produce them.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FieldDensityMeasurements(BaseModel):
    """Raw readings recorded for a sand-cone field density test.

    Attributes:
        test_id: Optional label for the test location
        cone_pre_test: Sand cone apparatus mass before the test
        cone_post_test: Sand cone apparatus mass after the test
        soil: Wet soil mass removed from the hole
        wet_weight: Moisture sample wet mass plus pan
        dry_weight: Moisture sample dry mass plus pan
        tare_pan: Empty pan mass
        lab_max: Laboratory maximum dry density
        sand_in_cone: Sand in cone override (None uses the calibration constant)
        sand_density: Sand bulk density override (None uses the calibration constant)
        specific_gravity: Oversize specific gravity override
        left_on_sieve_weight: Oversize mass retained on the sieve (None if not sieved)
        pre_sieve_weight: Sample mass before sieving (None if not sieved)
    """

    model_config = ConfigDict(frozen=True)

    test_id: str | None = Field(default=None, description="Test location label")

    cone_pre_test: float = Field(description="Apparatus mass before the test")
    cone_post_test: float = Field(description="Apparatus mass after the test")
    soil: float = Field(description="Wet soil mass removed from the hole")

    wet_weight: float = Field(description="Wet sample plus pan")
    dry_weight: float = Field(description="Dry sample plus pan")
    tare_pan: float = Field(description="Empty pan")

    lab_max: float = Field(description="Laboratory maximum dry density")

    sand_in_cone: float | None = Field(default=None, description="Sand in cone override")
    sand_density: float | None = Field(default=None, description="Sand density override")
    specific_gravity: float | None = Field(
        default=None, description="Oversize specific gravity override"
    )

    left_on_sieve_weight: float | None = Field(
        default=None, description="Oversize mass retained on the sieve"
    )
    pre_sieve_weight: float | None = Field(
        default=None, description="Sample mass before sieving"
    )

    @model_validator(mode="after")
    def sieve_weights_recorded_together(self) -> "FieldDensityMeasurements":
        if (self.left_on_sieve_weight is None) != (self.pre_sieve_weight is None):
            missing = "pre_sieve_weight" if self.pre_sieve_weight is None else "left_on_sieve_weight"
            msg = f"Sieve weights must be recorded together, {missing} is missing"
            raise ValueError(msg)
        return self

    def has_oversize_data(self) -> bool:
        """Check if sieve weights were recorded.

        Returns:
            True if the lab max should be corrected for oversize particles
        """
        return self.left_on_sieve_weight is not None and self.pre_sieve_weight is not None


class FieldDensityResult(BaseModel):
    """Derived values for one field density test.

    Attributes:
        test_id: Test location label copied from the measurements
        sand_used: Mass of sand that filled the hole
        wet_density: In-place wet density
        moisture_content: Moisture content as a fraction
        dry_density: In-place dry density
        rock_correction: Oversize fraction (None if no sieve data)
        lab_max: Lab max the compaction was measured against (corrected if sieved)
        compaction: Relative compaction (%)
    """

    model_config = ConfigDict(frozen=True)

    test_id: str | None = Field(default=None, description="Test location label")
    sand_used: float = Field(description="Sand used")
    wet_density: float = Field(description="Wet density")
    moisture_content: float = Field(description="Moisture content (fraction)")
    dry_density: float = Field(description="Dry density")
    rock_correction: float | None = Field(
        default=None, description="Oversize fraction, None if not sieved"
    )
    lab_max: float = Field(description="Lab max applied, corrected for oversize if sieved")
    compaction: float = Field(description="Relative compaction (%)")

    def is_oversize_corrected(self) -> bool:
        return self.rock_correction is not None

    def meets_compaction(self, required_percent: float) -> bool:
        """Check the relative compaction against a required minimum.

        Args:
            required_percent: Minimum relative compaction (e.g., 95.0)

        Returns:
            True if compaction is at least the required percentage. NaN never passes.
        """
        return self.compaction >= required_percent
