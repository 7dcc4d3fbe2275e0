"""Deterministic PDF-to-text extraction for autoland reports.

Wraps PyMuPDF's text-stream extraction: each page's text-showing operators
are read in reading order (top-to-bottom, left-to-right) and pages are
joined in page order. No rendering, no OCR, no network -- this module is
purely local and never raises on bad input; failures come back as an
:class:`ExtractedText` with ``success=False``.
"""

from __future__ import annotations

from pathlib import Path

import pymupdf
from loguru import logger

from autoland.config import AutolandSettings, get_settings
from autoland.models.extraction import (
    ExtractedText,
    ExtractionErrorKind,
    ExtractionMetadata,
)

# MuPDF's own errors (e.g. FzErrorFormat on a malformed page tree) do not
# derive from RuntimeError.
_PDF_ERRORS: tuple[type[Exception], ...] = (pymupdf.mupdf.FzErrorBase, RuntimeError, ValueError)


def _failure(
    kind: ExtractionErrorKind,
    detail: str,
    pages: int | None = None,
) -> ExtractedText:
    logger.warning("PDF text extraction failed ({kind}): {detail}", kind=kind.value, detail=detail)
    return ExtractedText(
        success=False,
        error=kind,
        detail=detail,
        metadata=ExtractionMetadata(pages=pages),
    )


def extract_text(data: bytes) -> ExtractedText:
    """Extract the linear text of a PDF held in memory.

    Args:
        data: Raw PDF bytes. Not modified.

    Returns:
        :class:`ExtractedText`. On failure ``error`` is one of
        ``empty-input``, ``corrupt``, ``encrypted``, ``no-text-stream`` or
        ``empty-output``.
    """
    if not data:
        return _failure(ExtractionErrorKind.EMPTY_INPUT, "no bytes supplied")

    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except _PDF_ERRORS as e:
        return _failure(ExtractionErrorKind.CORRUPT, str(e) or type(e).__name__)

    with doc:
        page_texts: list[str] = []
        try:
            if doc.needs_pass:
                return _failure(ExtractionErrorKind.ENCRYPTED, "document is password protected")
            page_count = doc.page_count
            if page_count == 0:
                return _failure(ExtractionErrorKind.CORRUPT, "document has no pages", 0)
            for page in doc:
                page_texts.append(page.get_text("text", sort=True))
        except _PDF_ERRORS as e:
            return _failure(
                ExtractionErrorKind.CORRUPT,
                f"unreadable page content: {str(e) or type(e).__name__}",
            )

    if not any(page_texts):
        return _failure(
            ExtractionErrorKind.NO_TEXT_STREAM,
            f"none of {page_count} page(s) contain a text stream",
            page_count,
        )

    text = "\n".join(t.rstrip("\n") for t in page_texts)
    if not text.strip():
        return _failure(ExtractionErrorKind.EMPTY_OUTPUT, "extracted text is blank", page_count)

    logger.info("Extracted {n} chars from {pages} page(s)", n=len(text), pages=page_count)
    return ExtractedText(
        success=True,
        text=text,
        metadata=ExtractionMetadata(pages=page_count, text_length=len(text)),
    )


def extract_text_from_file(pdf_path: str | Path) -> ExtractedText:
    """Extract text from a PDF on disk.

    Raises:
        FileNotFoundError: If pdf_path does not exist.
    """
    path = Path(pdf_path)
    if not path.exists():
        msg = f"PDF file not found: {path}"
        raise FileNotFoundError(msg)
    return extract_text(path.read_bytes())


def is_extraction_viable(
    extracted: ExtractedText,
    settings: AutolandSettings | None = None,
) -> bool:
    """Decide whether extracted text is worth handing to the field parser.

    Viable only if extraction succeeded, the stripped text is at least
    ``min_text_length`` characters, and at least one of the configured
    structural tokens (e.g. ``AUTOLAND``, ``A/C REG``) appears,
    case-insensitively.
    """
    if not extracted.success:
        return False

    settings = settings or get_settings()
    stripped = extracted.text.strip()
    if not stripped or len(stripped) < settings.min_text_length:
        return False

    upper = stripped.upper()
    return any(token.upper() in upper for token in settings.viability_tokens)
