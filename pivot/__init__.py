"""Pivot module for regrouping projects by member."""

from .aggregator import pivot_projects

__all__ = ["pivot_projects"]
