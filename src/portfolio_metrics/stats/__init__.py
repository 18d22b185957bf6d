"""Statistics helpers."""

from .primitives import DAYS_PER_YEAR, mean, sample_std_dev, years_between

__all__ = ["DAYS_PER_YEAR", "mean", "sample_std_dev", "years_between"]
