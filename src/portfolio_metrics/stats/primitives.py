"""First and second moments plus year-fraction arithmetic."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

DAYS_PER_YEAR = 365.25


def mean(series: Sequence[float]) -> float:
    if len(series) == 0:
        return 0.0
    return float(np.mean(np.asarray(series, dtype=float)))


def sample_std_dev(series: Sequence[float]) -> float:
    """Standard deviation with Bessel's correction (divides by n - 1)."""
    if len(series) < 2:
        return 0.0
    return float(np.std(np.asarray(series, dtype=float), ddof=1))


def years_between(start: pd.Timestamp, end: pd.Timestamp, days_per_year: float = DAYS_PER_YEAR) -> float:
    """Signed elapsed years using a fixed-length year (365.25 days by default)."""
    return (pd.Timestamp(end) - pd.Timestamp(start)) / pd.Timedelta(days=days_per_year)
