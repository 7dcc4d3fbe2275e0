"""Autoland CLI application entry point.

Local tooling over the report pipeline: inspect extracted text, parse
report PDFs, and compute fleet compliance from a folder of reports.

Usage:
    autoland extract <pdf>
    autoland parse <pdf>... [--output results.json]
    autoland fleet <pdf-dir> [--as-of 2025-12-31]
"""

from __future__ import annotations

import sys
from datetime import date, datetime
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

app = typer.Typer(
    name="autoland",
    help="Extract and parse Autoland Report PDFs and track fleet autoland compliance.",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    """Route loguru to stderr at DEBUG when verbose, else the configured level."""
    from autoland.config import get_settings

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else get_settings().log_level)


def _check_pdf(path: Path) -> None:
    if not path.exists():
        console.print(f"[bold red]Error:[/bold red] File not found: {path}")
        raise typer.Exit(code=1)
    if path.suffix.lower() != ".pdf":
        console.print(f"[bold red]Error:[/bold red] Expected a PDF file, got: {path.suffix}")
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show the current version."""
    from autoland import __version__

    console.print(f"autoland-reports {__version__}")


@app.command()
def extract(
    pdf: Annotated[
        Path,
        typer.Argument(help="Path to an Autoland Report PDF"),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Show the text extracted from a PDF and whether it is viable for parsing."""
    from autoland.cli.display import display_extraction
    from autoland.parsing.pdf_extractor import extract_text_from_file, is_extraction_viable

    _configure_logging(verbose)
    _check_pdf(pdf)

    extracted = extract_text_from_file(pdf)
    display_extraction(extracted, is_extraction_viable(extracted), console)
    if not extracted.success:
        raise typer.Exit(code=1)


@app.command()
def parse(
    pdfs: Annotated[
        list[Path],
        typer.Argument(help="One or more Autoland Report PDFs"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write outcomes as JSON to this file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parse Autoland Report PDFs into structured records.

    Prints every parsed field with errors and warnings, then a cost-savings
    summary for the batch. Exits non-zero if any report failed.
    """
    from autoland.cli.display import display_cost_savings, display_outcome
    from autoland.pipeline.metrics import calculate_cost_savings
    from autoland.pipeline.processor import process_pdf_file

    _configure_logging(verbose)
    for pdf in pdfs:
        _check_pdf(pdf)

    outcomes = []
    for idx, pdf in enumerate(pdfs, start=1):
        console.print(f"\n[bold blue][{idx}/{len(pdfs)}][/bold blue] Parsing {pdf.name}...")
        outcome = process_pdf_file(pdf)
        outcomes.append(outcome)
        display_outcome(pdf, outcome, console)

    console.print()
    display_cost_savings(calculate_cost_savings(outcomes), console)

    if output is not None:
        import json

        json_data = [
            {"file": pdf.name, **outcome.model_dump(mode="json")}
            for pdf, outcome in zip(pdfs, outcomes, strict=True)
        ]
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(json_data, indent=2))
        console.print(f"\n[green]Outcomes written to {output}[/green]")

    if not all(o.success for o in outcomes):
        raise typer.Exit(code=1)


@app.command()
def fleet(
    pdf_dir: Annotated[
        Path,
        typer.Argument(help="Directory containing Autoland Report PDFs"),
    ],
    as_of: Annotated[
        str | None,
        typer.Option("--as-of", help="Reference date YYYY-MM-DD (default: today, UTC)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compute fleet autoland compliance from a directory of report PDFs.

    Reports that fail to parse are listed and skipped.
    """
    from datetime import UTC

    from autoland.cli.display import display_fleet
    from autoland.fleet.compliance import compute_fleet_compliance, summarize_fleet
    from autoland.pipeline.processor import process_pdf_file

    _configure_logging(verbose)

    if not pdf_dir.is_dir():
        console.print(f"[bold red]Error:[/bold red] Directory not found: {pdf_dir}")
        raise typer.Exit(code=1)

    if as_of is None:
        reference = datetime.now(tz=UTC).date()
    else:
        try:
            reference = date.fromisoformat(as_of)
        except ValueError as e:
            console.print(f"[bold red]Error:[/bold red] Invalid --as-of date: {as_of}")
            raise typer.Exit(code=1) from e

    pdfs = sorted(p for p in pdf_dir.iterdir() if p.suffix.lower() == ".pdf")
    if not pdfs:
        console.print(f"[bold red]Error:[/bold red] No PDF files found in {pdf_dir}")
        raise typer.Exit(code=1)

    console.print(f"\n[bold blue][1/2][/bold blue] Parsing {len(pdfs)} reports...")
    records = []
    for pdf in pdfs:
        outcome = process_pdf_file(pdf)
        if outcome.success and outcome.data is not None:
            records.append(outcome.data)
        else:
            console.print(
                f"  [yellow]Skipped {pdf.name}:[/yellow] {escape('; '.join(outcome.errors))}"
            )

    console.print(f"[bold blue][2/2][/bold blue] Computing compliance as of {reference}...")
    compliance = compute_fleet_compliance(records, reference)
    summary = summarize_fleet(compliance, records, reference)

    console.print()
    display_fleet(compliance, summary, console)
