"""Web package - HTTP boundary."""
