"""Load YAML settings for the metric functions."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

CONFIG_ENV_VAR = "PORTFOLIO_METRICS_CONFIG"


class SolverSettings(BaseModel):
    lower_bound: float = Field(-0.999, description="Lowest trial rate; must stay above -1")
    upper_bound: float = Field(100000.0, description="Highest trial rate")
    tolerance: float = Field(1e-6, description="Early-exit |NPV| threshold per iteration")
    acceptance_tolerance: float = Field(1e-4, description="|NPV| accepted after the iteration cap")
    max_iterations: int = 100

    @field_validator("lower_bound")
    @classmethod
    def _above_total_loss(cls, value: float) -> float:
        if value <= -1:
            raise ValueError("lower_bound must be greater than -1")
        return value

    @field_validator("tolerance", "acceptance_tolerance")
    @classmethod
    def _positive_tolerance(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("tolerances must be positive")
        return value

    @field_validator("max_iterations")
    @classmethod
    def _at_least_one_iteration(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_iterations must be at least 1")
        return value

    @model_validator(mode="after")
    def _ordered_bracket(self) -> "SolverSettings":
        if self.lower_bound >= self.upper_bound:
            raise ValueError("lower_bound must be below upper_bound")
        return self


class MetricsSettings(BaseModel):
    days_per_year: float = 365.25
    zero_volatility_threshold: float = 1e-10
    xirr: SolverSettings = Field(default_factory=SolverSettings)

    @field_validator("days_per_year")
    @classmethod
    def _positive_year(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("days_per_year must be positive")
        return value

    @field_validator("zero_volatility_threshold")
    @classmethod
    def _non_negative_threshold(cls, value: float) -> float:
        if value < 0:
            raise ValueError("zero_volatility_threshold must be non-negative")
        return value


DEFAULT_SETTINGS = MetricsSettings()


def load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _resolve_path(path: Path | str | None) -> Optional[Path]:
    if path:
        return Path(path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else None


def load_settings(path: Path | str | None = None) -> MetricsSettings:
    """Read ``metrics`` settings from ``path`` or ``$PORTFOLIO_METRICS_CONFIG``."""
    file_path = _resolve_path(path)
    if file_path is None:
        return MetricsSettings()
    if not file_path.exists():
        raise FileNotFoundError(f"Settings file {file_path} not found")
    data = load_yaml(file_path)
    return MetricsSettings(**(data.get("metrics") or {}))
