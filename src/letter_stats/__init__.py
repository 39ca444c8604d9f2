"""Letter and doubled-letter frequency statistics over character streams."""

from letter_stats._version import __version__
from letter_stats.models import CharType, LetterStats, LetterStatsTable
from letter_stats.reporting.reporter import LetterStatsReporter
from letter_stats.services.statistics_service import StatisticsService

__all__ = [
    "CharType",
    "LetterStats",
    "LetterStatsReporter",
    "LetterStatsTable",
    "StatisticsService",
    "__version__",
]
