"""Configuration and constants for field-test calculations.

This module defines the calibration constants used when a calculation is
constructed without an explicit value, and the policy applied to divisions
by zero.

Configuration can be overridden via:
1. Environment variables (e.g., BILLIOS_SAND_IN_CONE=3.62, BILLIOS_STRICT_DIVISION=true)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class PhysicalConstants:
    """Physical constants and fixed factors used in the formulae.

    These are NOT configurable. Calibration values that vary between sand
    batches and cones live in FieldTestConfig instead.
    """

    WATER_UNIT_WEIGHT_PCF: float = 62.4
    OVERSIZE_ADJUSTMENT: float = 0.05  # Lab max correction numerator factor
    PERCENT: float = 100.0


# Module-level singleton for physical constants
CONSTANTS = PhysicalConstants()


class FieldTestConfig(BaseSettings):
    """Calibration defaults and division policy for field-test calculations.

    Can be overridden via environment variables with BILLIOS_ prefix:
    - BILLIOS_SAND_IN_CONE
    - BILLIOS_SAND_DENSITY
    - BILLIOS_SPECIFIC_GRAVITY
    - BILLIOS_STRICT_DIVISION

    Attributes:
        sand_in_cone: Calibrated mass of sand filling the cone
        sand_density: Calibrated bulk density of the test sand (pcf)
        specific_gravity: Specific gravity of oversize particles
        strict_division: Raise DegenerateDenominatorError on a zero denominator
            instead of returning inf/NaN
    """

    model_config = SettingsConfigDict(
        env_prefix="BILLIOS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    sand_in_cone: float = Field(default=3.59, description="Calibrated sand mass in the cone")
    sand_density: float = Field(default=88.0, description="Calibrated sand bulk density (pcf)")
    specific_gravity: float = Field(
        default=2.7, description="Specific gravity of oversize particles"
    )
    strict_division: bool = Field(
        default=False,
        description="Raise on zero denominators instead of returning inf/NaN",
    )


DEFAULT_CONFIG = FieldTestConfig()
