"""Validation primitives."""

from .guards import (
    require_min_length,
    validate_consistent_timezones,
    validate_date,
    validate_finite_number,
    validate_non_negative_number,
    validate_number,
    validate_number_series,
    validate_positive_number,
    validate_ratio,
)

__all__ = [
    "require_min_length",
    "validate_consistent_timezones",
    "validate_date",
    "validate_finite_number",
    "validate_non_negative_number",
    "validate_number",
    "validate_number_series",
    "validate_positive_number",
    "validate_ratio",
]
