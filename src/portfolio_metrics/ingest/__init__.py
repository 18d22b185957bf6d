"""File readers feeding the metric functions."""

from .files import read_cashflows, read_equity_curve, read_series

__all__ = ["read_cashflows", "read_equity_curve", "read_series"]
