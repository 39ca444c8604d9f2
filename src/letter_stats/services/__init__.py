"""Service layer for letter_stats."""

from .statistics_service import StatisticsService

__all__ = ["StatisticsService"]
