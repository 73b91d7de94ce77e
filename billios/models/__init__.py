"""Domain models for field density testing."""

from billios.models.domain import FieldDensityMeasurements, FieldDensityResult

__all__ = [
    "FieldDensityMeasurements",
    "FieldDensityResult",
]
