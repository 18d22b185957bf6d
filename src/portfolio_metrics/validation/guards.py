"""Input guards shared by every metric."""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable, Sequence
from datetime import date
from typing import Any

import numpy as np
import pandas as pd

from ..errors import ErrorKind, ValidationError


def validate_date(value: Any, label: str) -> pd.Timestamp:
    """Return ``value`` as a ``pandas.Timestamp`` or raise.

    Strings are rejected rather than parsed; NaT is not a calendar instant.
    """
    if not isinstance(value, (date, np.datetime64)):
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must be a date or datetime")
    if pd.isna(value):
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must be a valid calendar instant")
    try:
        return pd.Timestamp(value)
    except (ValueError, OverflowError) as exc:
        raise ValidationError(ErrorKind.OUT_OF_RANGE_VALUE, label, "is outside the supported date range") from exc


def validate_number(value: Any, label: str) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must be a number")
    number = float(value)
    if math.isnan(number):
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must not be NaN")
    return number


def validate_finite_number(value: Any, label: str) -> float:
    number = validate_number(value, label)
    if math.isinf(number):
        raise ValidationError(ErrorKind.OUT_OF_RANGE_VALUE, label, "must be finite")
    return number


def validate_positive_number(value: Any, label: str) -> float:
    number = validate_finite_number(value, label)
    if number <= 0:
        raise ValidationError(ErrorKind.OUT_OF_RANGE_VALUE, label, "must be a positive number")
    return number


def validate_non_negative_number(value: Any, label: str) -> float:
    number = validate_finite_number(value, label)
    if number < 0:
        raise ValidationError(ErrorKind.OUT_OF_RANGE_VALUE, label, "must be a non-negative number")
    return number


def validate_ratio(value: Any, label: str) -> float:
    """Bounded ratio in ``[0, 1)``, e.g. an annual expense ratio."""
    number = validate_finite_number(value, label)
    if number < 0 or number >= 1:
        raise ValidationError(ErrorKind.OUT_OF_RANGE_VALUE, label, "must be between 0 (inclusive) and 1 (exclusive)")
    return number


def require_min_length(values: Any, label: str, minimum: int = 2) -> list:
    if values is None or isinstance(values, (str, bytes, dict)) or not isinstance(values, Iterable):
        raise ValidationError(ErrorKind.INVALID_ARGUMENT_TYPE, label, "must be a sequence")
    items = list(values)
    if len(items) < minimum:
        raise ValidationError(ErrorKind.INSUFFICIENT_DATA, label, f"must contain at least {minimum} entries")
    return items


def validate_number_series(values: Any, label: str, non_negative: bool = False) -> list[float]:
    items = require_min_length(values, label)
    check = validate_non_negative_number if non_negative else validate_finite_number
    return [check(item, f"{label}[{idx}]") for idx, item in enumerate(items)]


def validate_consistent_timezones(timestamps: Sequence[pd.Timestamp], label: str) -> None:
    aware = {ts.tzinfo is not None for ts in timestamps}
    if len(aware) > 1:
        raise ValidationError(
            ErrorKind.INVALID_ARGUMENT_TYPE,
            label,
            "must be all timezone-aware or all timezone-naive",
        )
