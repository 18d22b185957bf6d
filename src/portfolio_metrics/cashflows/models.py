"""Cashflow value type and coercion of caller-supplied entries."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Iterable

import pandas as pd

from ..errors import ErrorKind, ValidationError
from ..validation import (
    require_min_length,
    validate_consistent_timezones,
    validate_date,
    validate_finite_number,
)


@dataclass(frozen=True)
class Cashflow:
    """Money leaving (negative) or entering (positive) the portfolio."""

    date: pd.Timestamp
    amount: float


def coerce_cashflow(entry: Any, label: str) -> Cashflow:
    """Validate one entry into a fresh ``Cashflow``.

    Accepts ``Cashflow`` instances, mappings with ``date``/``amount`` keys and
    ``(date, amount)`` pairs.
    """
    if isinstance(entry, Cashflow):
        raw_date, raw_amount = entry.date, entry.amount
    elif isinstance(entry, Mapping):
        if "date" not in entry or "amount" not in entry:
            raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must have 'date' and 'amount'")
        raw_date, raw_amount = entry["date"], entry["amount"]
    elif isinstance(entry, (tuple, list)) and len(entry) == 2:
        raw_date, raw_amount = entry
    else:
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must be a cashflow, mapping or (date, amount) pair")
    return Cashflow(
        date=validate_date(raw_date, f"{label}.date"),
        amount=validate_finite_number(raw_amount, f"{label}.amount"),
    )


def coerce_cashflows(entries: Iterable[Any], label: str = "cashflows") -> list[Cashflow]:
    items = require_min_length(entries, label)
    cashflows = [coerce_cashflow(entry, f"{label}[{idx}]") for idx, entry in enumerate(items)]
    validate_consistent_timezones([cf.date for cf in cashflows], f"{label} dates")
    return cashflows
