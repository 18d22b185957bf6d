"""Root logger configuration for command-line use."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "PORTFOLIO_METRICS_LOG_LEVEL"
_IS_CONFIGURED = False


def _resolve_level(level: Optional[str]) -> int:
    name = level or os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING"
    resolved = logging.getLevelName(name.upper())
    if not isinstance(resolved, int):
        logging.getLogger(__name__).warning("Unknown log level %s, falling back to WARNING", name)
        return logging.WARNING
    return resolved


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Install a rich console handler on the root logger once."""
    global _IS_CONFIGURED
    root = logging.getLogger()
    if _IS_CONFIGURED:
        return root
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    _IS_CONFIGURED = True
    return root
