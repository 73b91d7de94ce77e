"""Field-test calculators for soil density testing.

This package contains immutable calculation records. Each holds its
measurements and evaluates one formula in ``calculate()``. Composite
calculations accept either a known value or a nested calculation for each
derived input.
"""

from billios.calculators.base import Calculation, resolve_choice
from billios.calculators.compaction import (
    Compaction,
    LabMaxCorrection,
    RockCorrection,
    RockCorrectionChoice,
)
from billios.calculators.density import DryDensity, DryDensityChoice
from billios.calculators.moisture import MoistureContent, MoistureContentChoice
from billios.calculators.sand_cone import SandUsed, SandUsedChoice, WetDensity, WetDensityChoice

__all__ = [
    "Calculation",
    "resolve_choice",
    "SandUsed",
    "SandUsedChoice",
    "WetDensity",
    "WetDensityChoice",
    "MoistureContent",
    "MoistureContentChoice",
    "DryDensity",
    "DryDensityChoice",
    "Compaction",
    "RockCorrection",
    "RockCorrectionChoice",
    "LabMaxCorrection",
]
