"""Orchestrates extraction and parsing of one autoland report PDF.

Runs the free local text extraction, checks viability, then parses the
fields. Every failure is returned as data on a
:class:`ProcessingOutcome`; nothing is raised for any bytes input. There
is no paid fallback: when the free method fails, the failure is reported.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from autoland.config import AutolandSettings, get_settings
from autoland.models.extraction import ExtractedText, ExtractionErrorKind
from autoland.models.processing import AttemptTrace, CostMetrics, ProcessingOutcome
from autoland.models.report import ParseOutcome
from autoland.parsing.pdf_extractor import extract_text, is_extraction_viable
from autoland.parsing.report_parser import parse_autoland_report

UNSUPPORTED_FORMAT_WARNING = (
    "extraction succeeded but parsing failed - PDF format may not be supported"
)


def _viability_error(extracted: ExtractedText, settings: AutolandSettings) -> str:
    if not extracted.success:
        return extracted.error_message or "extraction: failed"
    return (
        f"viability: extracted text ({len(extracted.text.strip())} chars) is shorter than "
        f"{settings.min_text_length} chars or lacks any of "
        f"{', '.join(settings.viability_tokens)}"
    )


def process_pdf(data: bytes, settings: AutolandSettings | None = None) -> ProcessingOutcome:
    """Extract and parse one autoland report.

    Args:
        data: Raw PDF bytes, fully materialized by the caller.
        settings: Optional settings; defaults to :func:`get_settings`.

    Returns:
        :class:`ProcessingOutcome` carrying the record on success, or the
        errors of whichever stage failed.
    """
    settings = settings or get_settings()
    metrics = CostMetrics(cost_saved=settings.paid_cost_per_pdf)

    try:
        extracted = extract_text(data)
    except Exception as e:
        logger.exception("Unexpected error during text extraction")
        extracted = ExtractedText(
            success=False, error=ExtractionErrorKind.CORRUPT, detail=f"unexpected error: {e}"
        )

    if not is_extraction_viable(extracted, settings):
        error = _viability_error(extracted, settings)
        logger.warning("PDF not viable for parsing: {error}", error=error)
        return ProcessingOutcome(
            success=False,
            attempts=AttemptTrace(extraction_success=extracted.success, parsing_success=False),
            metrics=metrics,
            errors=[error],
        )

    try:
        parsed = parse_autoland_report(extracted.text)
    except Exception as e:
        logger.exception("Unexpected error while parsing report text")
        parsed = ParseOutcome(success=False, errors=[f"parse: unexpected error: {e}"])

    attempts = AttemptTrace(extraction_success=True, parsing_success=parsed.success)
    if parsed.success:
        return ProcessingOutcome(
            success=True,
            data=parsed.data,
            fields=parsed.fields,
            attempts=attempts,
            metrics=metrics,
            warnings=list(parsed.warnings),
        )

    return ProcessingOutcome(
        success=False,
        fields=parsed.fields,
        attempts=attempts,
        metrics=metrics,
        errors=list(parsed.errors),
        warnings=[*parsed.warnings, UNSUPPORTED_FORMAT_WARNING],
    )


def process_pdf_file(
    pdf_path: str | Path,
    settings: AutolandSettings | None = None,
) -> ProcessingOutcome:
    """Read a PDF from disk and run :func:`process_pdf` on it.

    Raises:
        FileNotFoundError: If pdf_path does not exist.
    """
    path = Path(pdf_path)
    if not path.exists():
        msg = f"PDF file not found: {path}"
        raise FileNotFoundError(msg)

    logger.info("Processing {pdf}", pdf=path.name)
    return process_pdf(path.read_bytes(), settings)
