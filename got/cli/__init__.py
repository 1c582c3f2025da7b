"""Command-line interface for Got."""
