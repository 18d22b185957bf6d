"""Sharpe ratio over a series of periodic returns."""

from __future__ import annotations

import math
from typing import Sequence

from ..config import DEFAULT_SETTINGS, MetricsSettings
from ..stats import mean, sample_std_dev
from ..validation import validate_finite_number, validate_number_series


def calculate_sharpe_ratio(
    returns: Sequence[float],
    risk_free_rate: float,
    *,
    settings: MetricsSettings | None = None,
) -> float:
    """Mean excess return per unit of sample volatility.

    ``risk_free_rate`` is per period, matching ``returns``. Volatility under
    ``zero_volatility_threshold`` counts as zero: the ratio is then ``inf``,
    ``-inf`` or ``0.0`` depending on how the mean compares with the rate.
    """
    settings = settings or DEFAULT_SETTINGS
    series = validate_number_series(returns, "returns")
    rate = validate_finite_number(risk_free_rate, "risk_free_rate")

    avg = mean(series)
    vol = sample_std_dev(series)
    if vol < settings.zero_volatility_threshold:
        if avg > rate:
            return math.inf
        if avg < rate:
            return -math.inf
        return 0.0
    return (avg - rate) / vol
