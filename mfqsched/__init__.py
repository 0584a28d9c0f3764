"""Multilevel feedback queue scheduling simulator: input parsing, simulation and text reports."""

__version__ = "0.1.0"
__all__ = ["model", "scheduler", "report", "cli"]