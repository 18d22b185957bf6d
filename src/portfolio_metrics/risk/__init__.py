"""Risk metrics."""

from .drawdown import calculate_max_drawdown
from .sharpe import calculate_sharpe_ratio

__all__ = ["calculate_max_drawdown", "calculate_sharpe_ratio"]
