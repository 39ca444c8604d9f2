"""Infrastructure layer: character streams and exception types."""
