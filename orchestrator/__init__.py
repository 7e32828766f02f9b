"""Orchestrator module for running the conversion pipeline."""

from .pipeline import run_pipeline

__all__ = [
    "run_pipeline",
]
