"""Autoland report ingestion: PDF text extraction, field parsing, fleet compliance."""

__version__ = "0.1.0"
