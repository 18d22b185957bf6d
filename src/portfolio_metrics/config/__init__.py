"""Configuration models and loaders."""

from .loader import DEFAULT_SETTINGS, MetricsSettings, SolverSettings, load_settings

__all__ = ["DEFAULT_SETTINGS", "MetricsSettings", "SolverSettings", "load_settings"]
