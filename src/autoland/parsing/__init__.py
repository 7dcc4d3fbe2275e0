"""Autoland report PDF extraction and parsing pipeline.

Provides deterministic PDF-to-text extraction (pdf_extractor), the
field cascade grammar (patterns) and the report field parser
(report_parser).
"""

from autoland.parsing.pdf_extractor import (
    extract_text,
    extract_text_from_file,
    is_extraction_viable,
)
from autoland.parsing.report_parser import detect_result, parse_autoland_report

__all__ = [
    "extract_text",
    "extract_text_from_file",
    "is_extraction_viable",
    "parse_autoland_report",
    "detect_result",
]
