"""Net present value of dated cashflows."""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from ..stats import DAYS_PER_YEAR, years_between
from .models import Cashflow


def npv(
    rate: float,
    cashflows: Sequence[Cashflow],
    reference_date: pd.Timestamp,
    days_per_year: float = DAYS_PER_YEAR,
) -> float:
    """Discount ``cashflows`` to ``reference_date`` at ``rate`` per year.

    Exponents are signed year fractions, so flows dated before the reference
    are compounded forward. Overflowing discount factors follow IEEE rules
    (the term goes to 0, or to +/-inf when the factor underflows) instead of
    raising.
    """
    amounts = np.array([cf.amount for cf in cashflows], dtype=float)
    years = np.array([years_between(reference_date, cf.date, days_per_year) for cf in cashflows], dtype=float)
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        factors = np.power(1.0 + rate, years)
        return float(np.sum(amounts / factors))
