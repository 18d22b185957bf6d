"""Compound annual growth rate."""

from __future__ import annotations

from datetime import date
from typing import Optional

import numpy as np

from ..config import DEFAULT_SETTINGS, MetricsSettings
from ..errors import ErrorKind, ValidationError
from ..stats import years_between
from ..validation import (
    validate_consistent_timezones,
    validate_date,
    validate_non_negative_number,
    validate_positive_number,
    validate_ratio,
)


def calculate_cagr(
    initial_value: float,
    final_value: float,
    start_date: date,
    end_date: date,
    expense_ratio: Optional[float] = None,
    *,
    settings: MetricsSettings | None = None,
) -> float:
    """Annual rate that grows ``initial_value`` into ``final_value``.

    A zero final value is a total loss and returns exactly ``-1.0``. When
    ``expense_ratio`` is given the gross rate is converted to a net rate as a
    drag compounded once per year: ``(1 + cagr) * (1 - expense_ratio) - 1``.
    """
    settings = settings or DEFAULT_SETTINGS
    initial = validate_positive_number(initial_value, "initial_value")
    final = validate_non_negative_number(final_value, "final_value")
    start = validate_date(start_date, "start_date")
    end = validate_date(end_date, "end_date")
    validate_consistent_timezones([start, end], "start_date/end_date")
    if start >= end:
        raise ValidationError(ErrorKind.INVALID_DATE_ORDERING, "start_date", "must be before end_date")
    ratio = validate_ratio(expense_ratio, "expense_ratio") if expense_ratio is not None else None

    years = years_between(start, end, settings.days_per_year)
    if final == 0:
        return -1.0

    with np.errstate(over="ignore"):
        cagr = float(np.power(final / initial, 1.0 / years)) - 1.0
    if ratio is not None:
        cagr = (1.0 + cagr) * (1.0 - ratio) - 1.0
    return cagr
