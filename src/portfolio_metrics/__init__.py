"""Portfolio Metrics: CAGR, XIRR, Sharpe ratio and max drawdown."""

from importlib.metadata import version as _version

from .cashflows import Cashflow, npv
from .config import MetricsSettings, SolverSettings, load_settings
from .errors import ErrorKind, MetricsError, SolverError, ValidationError
from .reports import PerformanceSummary, compute_summary
from .returns import calculate_cagr, calculate_xirr
from .risk import calculate_max_drawdown, calculate_sharpe_ratio

__all__ = [
    "Cashflow",
    "ErrorKind",
    "MetricsError",
    "MetricsSettings",
    "PerformanceSummary",
    "SolverError",
    "SolverSettings",
    "ValidationError",
    "calculate_cagr",
    "calculate_max_drawdown",
    "calculate_sharpe_ratio",
    "calculate_xirr",
    "compute_summary",
    "get_version",
    "load_settings",
    "npv",
]


def get_version() -> str:
    """Return the installed package version."""
    try:
        return _version("portfolio-metrics")
    except Exception:  # pragma: no cover - fallback for editable installs
        return "0.0.0"
