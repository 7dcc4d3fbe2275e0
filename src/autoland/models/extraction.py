"""Text extraction models.

The extractor never raises on bad input; it returns an
:class:`ExtractedText` whose ``error`` names the failure class.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

EXTRACTION_BACKEND = "pymupdf"


class ExtractionErrorKind(StrEnum):
    """Failure classes reported by the text extractor.

    EMPTY_INPUT: Zero-length byte buffer.
    CORRUPT: Malformed or non-PDF data that cannot be opened.
    ENCRYPTED: Password-protected document.
    NO_TEXT_STREAM: Document opened but no page carries any text.
    EMPTY_OUTPUT: Text streams exist but contain only whitespace.
    """

    EMPTY_INPUT = "empty-input"
    CORRUPT = "corrupt"
    ENCRYPTED = "encrypted"
    NO_TEXT_STREAM = "no-text-stream"
    EMPTY_OUTPUT = "empty-output"


class ExtractionMetadata(BaseModel):
    """Bookkeeping about a single extraction call."""

    model_config = ConfigDict(frozen=True)

    backend: str = Field(default=EXTRACTION_BACKEND, description="Extraction library used")
    pages: int | None = Field(default=None, ge=0, description="Page count, if the PDF opened")
    text_length: int = Field(default=0, ge=0, description="Length of the extracted text")


class ExtractedText(BaseModel):
    """Linear text recovered from a PDF, or the reason it could not be."""

    model_config = ConfigDict(frozen=True)

    success: bool
    text: str = ""
    error: ExtractionErrorKind | None = None
    detail: str | None = Field(default=None, description="Human-readable failure reason")
    metadata: ExtractionMetadata = Field(default_factory=ExtractionMetadata)

    @property
    def error_message(self) -> str | None:
        """Error class and detail combined for reporting, or None on success."""
        if self.error is None:
            return None
        if self.detail:
            return f"extraction: {self.error.value}: {self.detail}"
        return f"extraction: {self.error.value}"
