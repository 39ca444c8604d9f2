"""Allow running the CLI with ``python -m letter_stats``."""

from letter_stats.cli.stats_cli import main

if __name__ == "__main__":
    raise SystemExit(main())
