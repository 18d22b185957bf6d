"""Return metrics: CAGR and XIRR."""

from .cagr import calculate_cagr
from .xirr import calculate_xirr

__all__ = ["calculate_cagr", "calculate_xirr"]
