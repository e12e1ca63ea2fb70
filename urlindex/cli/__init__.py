"""Command-line interface for urlindex."""
