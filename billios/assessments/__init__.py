"""Assessments that chain calculators over a full set of field readings."""

from billios.assessments.field_density import FieldDensityAssessment

__all__ = ["FieldDensityAssessment"]
