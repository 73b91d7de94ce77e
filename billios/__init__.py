"""billios - soil field-test calculations.

Sand-cone density replacement, moisture content, dry density, relative
compaction and oversize correction, as immutable calculation records.

Example:
    >>> from billios import SandUsed
    >>> SandUsed(cone_pre_test=14.65, cone_post_test=8.75).calculate()
    2.31
"""

from billios.assessments import FieldDensityAssessment
from billios.calculators import (
    Compaction,
    DryDensity,
    LabMaxCorrection,
    MoistureContent,
    RockCorrection,
    SandUsed,
    WetDensity,
)
from billios.config import DEFAULT_CONFIG, FieldTestConfig
from billios.errors import DegenerateDenominatorError, FieldTestError
from billios.models import FieldDensityMeasurements, FieldDensityResult

__all__ = [
    "SandUsed",
    "WetDensity",
    "MoistureContent",
    "DryDensity",
    "Compaction",
    "RockCorrection",
    "LabMaxCorrection",
    "FieldDensityAssessment",
    "FieldDensityMeasurements",
    "FieldDensityResult",
    "FieldTestConfig",
    "DEFAULT_CONFIG",
    "FieldTestError",
    "DegenerateDenominatorError",
]
