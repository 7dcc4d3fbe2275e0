"""Command-line interface for the autoland report pipeline."""
