"""Shared fixtures: sample report text and real PDFs built with PyMuPDF."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from reports import SAMPLE_FIELDS, build_pdf, render_report


@pytest.fixture()
def report_text() -> str:
    """A complete SUCCESSFUL report in the newline layout."""
    return render_report(SAMPLE_FIELDS)


@pytest.fixture()
def report_pdf(report_text: str) -> bytes:
    return build_pdf([report_text])


@pytest.fixture()
def make_pdf() -> Callable[[list[str]], bytes]:
    return build_pdf


@pytest.fixture()
def write_pdf(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a single-page report PDF into ``tmp_path`` and return its path."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_bytes(build_pdf([text]))
        return path

    return _write
