"""Reporting helpers built on the metric functions."""

from .performance import PerformanceSummary, compute_summary

__all__ = ["PerformanceSummary", "compute_summary"]
