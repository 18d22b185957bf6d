"""Typed errors raised by the metric functions."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT_TYPE = "invalid_argument_type"
    OUT_OF_RANGE_VALUE = "out_of_range_value"
    INVALID_DATE_ORDERING = "invalid_date_ordering"
    INSUFFICIENT_DATA = "insufficient_data"
    DEGENERATE_INPUT = "degenerate_input"
    NO_ROOT_IN_BRACKET = "no_root_in_bracket"
    NON_CONVERGENCE = "non_convergence"


class MetricsError(ValueError):
    """Base error; ``kind`` lets callers branch without parsing messages."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class ValidationError(MetricsError):
    def __init__(self, kind: ErrorKind, label: str, constraint: str):
        super().__init__(kind, f"{label} {constraint}")
        self.label = label
        self.constraint = constraint


class SolverError(MetricsError):
    pass


__all__ = ["ErrorKind", "MetricsError", "ValidationError", "SolverError"]
