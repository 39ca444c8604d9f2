"""Command-line entry points for letter_stats."""
