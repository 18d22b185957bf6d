"""XIRR by bisection over the NPV of irregularly dated cashflows."""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable

from ..cashflows import Cashflow, coerce_cashflows, npv
from ..config import DEFAULT_SETTINGS, MetricsSettings
from ..errors import ErrorKind, SolverError, ValidationError

logger = logging.getLogger(__name__)


def _same_sign(left: float, right: float) -> bool:
    return (left > 0 and right > 0) or (left < 0 and right < 0)


def calculate_xirr(
    cashflows: Iterable[Any],
    *,
    settings: MetricsSettings | None = None,
) -> float:
    """Annualised rate at which the cashflows' NPV is zero.

    ``cashflows`` holds at least two entries with both a positive and a
    negative amount. Entries are copied and sorted by date; the earliest
    date is the discounting reference. Raises ``SolverError`` with kind
    ``NO_ROOT_IN_BRACKET`` when NPV has the same sign at both bracket ends
    and ``NON_CONVERGENCE`` when the iteration cap is reached without the
    final midpoint meeting ``acceptance_tolerance``.
    """
    settings = settings or DEFAULT_SETTINGS
    solver = settings.xirr

    flows = coerce_cashflows(cashflows)
    if not any(cf.amount > 0 for cf in flows) or not any(cf.amount < 0 for cf in flows):
        raise ValidationError(
            ErrorKind.DEGENERATE_INPUT,
            "cashflows",
            "must contain at least one positive and one negative amount",
        )
    # On a single date NPV is the plain sum at every rate: a non-zero sum is
    # left to the bracket check, a zero sum leaves the rate undetermined.
    if len({cf.date for cf in flows}) == 1 and math.fsum(cf.amount for cf in flows) == 0:
        raise ValidationError(
            ErrorKind.DEGENERATE_INPUT,
            "cashflows",
            "must span more than one date when the amounts net to zero",
        )

    ordered: list[Cashflow] = sorted(flows, key=lambda cf: cf.date)
    reference = ordered[0].date

    def f(rate: float) -> float:
        return npv(rate, ordered, reference, settings.days_per_year)

    low, high = solver.lower_bound, solver.upper_bound
    npv_low, npv_high = f(low), f(high)
    logger.debug("XIRR bracket [%s, %s] -> NPV [%s, %s]", low, high, npv_low, npv_high)
    if math.isnan(npv_low) or math.isnan(npv_high) or _same_sign(npv_low, npv_high):
        logger.warning("XIRR has no sign change between %s and %s", low, high)
        raise SolverError(ErrorKind.NO_ROOT_IN_BRACKET, f"No XIRR solution between {low} and {high}")

    for iteration in range(solver.max_iterations):
        mid = (low + high) / 2
        npv_mid = f(mid)
        if abs(npv_mid) < solver.tolerance:
            logger.debug("XIRR converged to %s after %d iterations", mid, iteration + 1)
            return mid
        # Keep the half whose endpoints still straddle the sign change.
        if _same_sign(npv_mid, npv_low):
            low, npv_low = mid, npv_mid
        else:
            high = mid

    final_rate = (low + high) / 2
    residual = f(final_rate)
    if not abs(residual) <= solver.acceptance_tolerance:
        logger.warning("XIRR did not converge: NPV %s at rate %s", residual, final_rate)
        raise SolverError(ErrorKind.NON_CONVERGENCE, f"XIRR did not converge after {solver.max_iterations} iterations")
    return final_rate
