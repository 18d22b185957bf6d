"""Performance summary for a dated equity curve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from ..config import DEFAULT_SETTINGS, MetricsSettings
from ..returns import calculate_cagr
from ..risk import calculate_max_drawdown, calculate_sharpe_ratio
from ..stats import sample_std_dev
from ..validation import validate_number_series


@dataclass
class PerformanceSummary:
    cagr: float
    volatility: float
    sharpe_ratio: Optional[float]
    max_drawdown: float
    periods: int


def compute_summary(
    equity_curve: pd.Series,
    risk_free_rate: float = 0.0,
    periods_per_year: int = 12,
    *,
    settings: MetricsSettings | None = None,
) -> PerformanceSummary:
    settings = settings or DEFAULT_SETTINGS
    curve = equity_curve.sort_index()
    values = validate_number_series(curve.tolist(), "equity_curve", non_negative=True)
    dates = list(curve.index)
    cagr = calculate_cagr(values[0], values[-1], dates[0], dates[-1], settings=settings)
    # A period starting from zero has no defined return.
    previous = np.asarray(values[:-1])
    invested = previous > 0
    returns = (np.diff(values)[invested] / previous[invested]).tolist()
    sharpe = None
    volatility = 0.0
    if len(returns) >= 2:
        sharpe = calculate_sharpe_ratio(returns, risk_free_rate, settings=settings)
        volatility = sample_std_dev(returns) * float(np.sqrt(periods_per_year))
    max_drawdown = calculate_max_drawdown(values)
    return PerformanceSummary(cagr, volatility, sharpe, max_drawdown, len(values))
