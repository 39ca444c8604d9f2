"""Module for generating letter statistics reports."""

from collections.abc import Callable

from letter_stats.models import LetterStatsTable


class LetterStatsReporter:
    """Formats letter statistics tables as sorted text reports."""

    def __init__(self, total_label: str = "TOTAL") -> None:
        """Initialize the reporter.

        Args:
            total_label: Label of the final line holding the total count
        """
        self.total_label = total_label

    def format_lines(self, letters: LetterStatsTable) -> list[str]:
        """Build the report lines for a statistics table.

        Args:
            letters: The statistics table to report

        Returns
        -------
            One "{letter} : {count}" line per entry in ascending key order,
            followed by the total line
        """
        report = [str(entry) for entry in letters.sorted_entries()]
        report.append(f"{self.total_label} : {letters.total}")
        return report

    def format_report(self, letters: LetterStatsTable) -> str:
        """Generate the report as a single newline-separated string."""
        return "\n".join(self.format_lines(letters))

    def print_statistic(
        self,
        letters: LetterStatsTable,
        sink: Callable[[str], object] | None = None,
    ) -> int:
        """Write the report line by line to a sink.

        Args:
            letters: The statistics table to report
            sink: Callable receiving each line (default: print)

        Returns
        -------
            The total count written on the last line
        """
        write = sink if sink is not None else print
        for line in self.format_lines(letters):
            write(line)
        return letters.total
