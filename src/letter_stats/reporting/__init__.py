"""Reporting package for letter statistics."""

from .reporter import LetterStatsReporter

__all__ = ["LetterStatsReporter"]
