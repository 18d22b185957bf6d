"""Maximum peak-to-trough decline."""

from __future__ import annotations

from typing import Sequence

from ..validation import validate_number_series


def calculate_max_drawdown(values: Sequence[float]) -> float:
    """Worst decline from a running peak, e.g. ``-0.25`` for a 25% drawdown.

    Returns ``0.0`` when the series never falls below a prior peak.
    """
    series = validate_number_series(values, "values", non_negative=True)
    peak = series[0]
    worst = 0.0
    for value in series[1:]:
        if value > peak:
            peak = value
        elif peak > 0:
            drawdown = (value - peak) / peak
            if drawdown < worst:
                worst = drawdown
    return worst
