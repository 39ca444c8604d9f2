"""Version information for the letter-stats package."""

__version__ = "0.1.0"
