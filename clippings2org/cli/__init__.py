"""Command-line interface for clippings2org."""
