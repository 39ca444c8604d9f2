"""Custom exceptions for the letter_stats infrastructure layer."""
