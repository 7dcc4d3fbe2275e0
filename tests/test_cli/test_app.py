"""Tests for the autoland CLI application."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger
from reports import SAMPLE_FIELDS, render_report, with_values
from typer.testing import CliRunner

from autoland.cli.app import app

runner = CliRunner()

WritePdf = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """The CLI rebinds loguru to the runner's stderr; put the default sink back."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestVersionCommand:
    def test_version_exits_zero(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "autoland-reports" in result.output


class TestExtractCommand:
    def test_extract_shows_text(self, write_pdf: WritePdf) -> None:
        pdf = write_pdf("report.pdf", render_report(SAMPLE_FIELDS))
        result = runner.invoke(app, ["extract", str(pdf)])
        assert result.exit_code == 0
        assert "VN-A546" in result.output
        assert "viable" in result.output

    def test_extract_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["extract", str(tmp_path / "missing.pdf")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_extract_rejects_non_pdf(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("AUTOLAND REPORT")
        result = runner.invoke(app, ["extract", str(path)])
        assert result.exit_code == 1
        assert "Expected a PDF file" in result.output

    def test_extract_corrupt_pdf_fails(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.pdf"
        path.write_bytes(b"not really a pdf")
        result = runner.invoke(app, ["extract", str(path)])
        assert result.exit_code == 1
        assert "Extraction failed" in result.output

    def test_extract_pageless_pdf_fails_cleanly(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"%PDF-1.7\n%%EOF\n")
        result = runner.invoke(app, ["extract", str(path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "corrupt" in result.output


class TestParseCommand:
    def test_parse_single_report(self, write_pdf: WritePdf) -> None:
        pdf = write_pdf("AR-2025-001.pdf", render_report(SAMPLE_FIELDS))
        result = runner.invoke(app, ["parse", str(pdf)])
        assert result.exit_code == 0
        assert "AR-2025-001" in result.output
        assert "SUCCESSFUL" in result.output
        assert "Cost Savings" in result.output

    def test_parse_failure_exits_nonzero(self, write_pdf: WritePdf) -> None:
        good = write_pdf("good.pdf", render_report(SAMPLE_FIELDS))
        bad = write_pdf("bad.pdf", render_report(with_values(DATE_UTC="32/12/2025")))
        result = runner.invoke(app, ["parse", str(good), str(bad)])
        assert result.exit_code == 1
        assert "date_utc" in result.output
        assert "FAILED" in result.output

    def test_parse_writes_json(self, write_pdf: WritePdf, tmp_path: Path) -> None:
        pdf = write_pdf("AR-2025-001.pdf", render_report(SAMPLE_FIELDS))
        out = tmp_path / "out" / "results.json"
        result = runner.invoke(app, ["parse", str(pdf), "--output", str(out)])
        assert result.exit_code == 0
        data = json.loads(out.read_text())
        assert len(data) == 1
        assert data[0]["file"] == "AR-2025-001.pdf"
        assert data[0]["success"] is True
        assert data[0]["data"]["time_utc"] == "14:35"
        assert data[0]["data"]["datetime_utc"] == "2025-12-30T14:35:00Z"

    def test_parse_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.pdf")])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestFleetCommand:
    def test_fleet_table(self, write_pdf: WritePdf, tmp_path: Path) -> None:
        write_pdf("a546.pdf", render_report(SAMPLE_FIELDS))
        write_pdf(
            "a547.pdf",
            render_report(
                with_values(REPORT_NO="AR-2025-002", A_C_REG="VN-A547", DATE_UTC="01/11/2025")
            ),
        )
        result = runner.invoke(app, ["fleet", str(tmp_path), "--as-of", "2026-01-05"])
        assert result.exit_code == 0
        assert "Fleet Autoland Compliance" in result.output
        assert "VN-A546" in result.output
        assert "VN-A547" in result.output
        assert "2 aircraft" in result.output

    def test_fleet_skips_unparseable(self, write_pdf: WritePdf, tmp_path: Path) -> None:
        write_pdf("a546.pdf", render_report(SAMPLE_FIELDS))
        write_pdf("bad.pdf", render_report(with_values(DATE_UTC="32/12/2025")))
        result = runner.invoke(app, ["fleet", str(tmp_path), "--as-of", "2026-01-05"])
        assert result.exit_code == 0
        assert "Skipped bad.pdf" in result.output

    def test_fleet_invalid_as_of(self, write_pdf: WritePdf, tmp_path: Path) -> None:
        write_pdf("a546.pdf", render_report(SAMPLE_FIELDS))
        result = runner.invoke(app, ["fleet", str(tmp_path), "--as-of", "05/01/2026"])
        assert result.exit_code == 1
        assert "Invalid --as-of" in result.output

    def test_fleet_missing_dir(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["fleet", str(tmp_path / "nope")])
        assert result.exit_code == 1
        assert "Directory not found" in result.output

    def test_fleet_empty_dir(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["fleet", str(tmp_path)])
        assert result.exit_code == 1
        assert "No PDF files" in result.output
