"""Cashflow types and discounting."""

from .models import Cashflow, coerce_cashflow, coerce_cashflows
from .npv import npv

__all__ = ["Cashflow", "coerce_cashflow", "coerce_cashflows", "npv"]
