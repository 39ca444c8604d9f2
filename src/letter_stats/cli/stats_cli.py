"""Command-line interface for the letter statistics tool.

This module computes single-letter statistics for one text file and
doubled-letter statistics for another, filters each by letter class and
prints the sorted results with their totals.
"""

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from letter_stats.infrastructure.exceptions.stream_exceptions import StreamError
from letter_stats.infrastructure.streams.character_stream import (
    CharacterStream,
    FileCharacterStream,
)
from letter_stats.models import CharType, LetterStatsTable
from letter_stats.reporting.reporter import LetterStatsReporter
from letter_stats.services.statistics_service import StatisticsService

EXCLUDE_CHOICES = {
    "vowel": CharType.VOWEL,
    "consonant": CharType.CONSONANT,
    "none": None,
}


@dataclass
class AnalysisJob:
    """A single analysis to run over one input file."""

    title: str
    file_path: Path
    compute: Callable[[CharacterStream], LetterStatsTable]
    exclude: CharType | None


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        verbose: If True, set log level to DEBUG, otherwise INFO
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list to parse (default: sys.argv[1:])

    Returns
    -------
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Print letter and doubled-letter statistics for text files"
    )

    parser.add_argument(
        "single_file",
        type=Path,
        help="File to compute case-sensitive single-letter statistics for",
    )

    parser.add_argument(
        "double_file",
        type=Path,
        help="File to compute case-insensitive doubled-letter statistics for",
    )

    parser.add_argument(
        "--single-exclude",
        choices=sorted(EXCLUDE_CHOICES),
        default="vowel",
        help="Letter class removed from single-letter statistics (default: vowel)",
    )

    parser.add_argument(
        "--double-exclude",
        choices=sorted(EXCLUDE_CHOICES),
        default="consonant",
        help="Letter class removed from doubled-letter statistics (default: consonant)",
    )

    parser.add_argument(
        "--encoding",
        type=str,
        default="utf-8",
        help="Text encoding of the input files (default: utf-8)",
    )

    parser.add_argument(
        "--total-label",
        type=str,
        default="TOTAL",
        help="Label for the total line of each report (default: TOTAL)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    return parser.parse_args(argv)


def build_jobs(args: argparse.Namespace) -> list[AnalysisJob]:
    """Create the analyses requested on the command line.

    Args:
        args: Parsed command-line arguments

    Returns
    -------
        The single-letter job followed by the doubled-letter job
    """
    return [
        AnalysisJob(
            title="Single letter statistics",
            file_path=args.single_file,
            compute=StatisticsService.fill_single_letter_stats,
            exclude=EXCLUDE_CHOICES[args.single_exclude],
        ),
        AnalysisJob(
            title="Double letter statistics",
            file_path=args.double_file,
            compute=StatisticsService.fill_double_letter_stats,
            exclude=EXCLUDE_CHOICES[args.double_exclude],
        ),
    ]


def run_job(job: AnalysisJob, encoding: str = "utf-8") -> LetterStatsTable:
    """Compute and filter the statistics for one job.

    Args:
        job: The analysis to run
        encoding: Text encoding of the input file

    Returns
    -------
        The filtered statistics table

    Raises
    ------
        StreamError: If the input file cannot be opened or read
    """
    logger = logging.getLogger(__name__)

    with FileCharacterStream(job.file_path, encoding=encoding) as stream:
        letters = job.compute(stream)

    if job.exclude is not None:
        StatisticsService.remove_char_stats_by_type(letters, job.exclude)
        logger.debug(f"{job.title}: {len(letters)} entries after removing {job.exclude}")

    return letters


def main(argv: list[str] | None = None) -> int:
    """Run the letter statistics tool.

    Returns
    -------
        Process exit status
    """
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)
    reporter = LetterStatsReporter(total_label=args.total_label)
    jobs = build_jobs(args)

    iterator = tqdm(jobs, desc="Analyzing files") if not args.no_progress else jobs
    try:
        for job in iterator:
            logger.info(f"{job.title} for {job.file_path}")
            letters = run_job(job, encoding=args.encoding)
            reporter.print_statistic(letters)
    except StreamError as e:
        logger.error(f"Error reading input: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
