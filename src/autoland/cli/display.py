"""Rich display helpers for terminal output.

Provides formatted display functions for processed reports, batch cost
savings and fleet compliance using Rich tables and panels.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from autoland.models.extraction import ExtractedText
from autoland.models.fleet import AircraftCompliance, ComplianceStatus, FleetSummary
from autoland.models.processing import CostSavingsSummary, ProcessingOutcome
from autoland.models.report import LandingResult

_STATUS_STYLES: dict[ComplianceStatus, str] = {
    ComplianceStatus.ON_TIME: "green",
    ComplianceStatus.DUE_SOON: "yellow",
    ComplianceStatus.OVERDUE: "bold red",
}


def display_extraction(extracted: ExtractedText, viable: bool, console: Console) -> None:
    """Print extracted text with its metadata and viability verdict."""
    if not extracted.success:
        message = escape(extracted.error_message or "")
        console.print(f"[bold red]Extraction failed:[/bold red] {message}")
        return

    verdict = "[green]viable[/green]" if viable else "[yellow]not viable[/yellow]"
    console.print(
        Panel(
            extracted.text,
            title=f"Extracted text ({extracted.metadata.pages} page(s), "
            f"{extracted.metadata.text_length} chars)",
            subtitle=verdict,
        )
    )


def display_outcome(pdf: Path, outcome: ProcessingOutcome, console: Console) -> None:
    """Print the parsed fields of one report plus its errors and warnings.

    Fields come from ``outcome.fields`` so partially parsed reports are
    still shown.
    """
    status = "[green]OK[/green]" if outcome.success else "[bold red]FAILED[/bold red]"
    table = Table(title=f"{pdf.name} {status}", show_lines=False)
    table.add_column("Field", style="bold cyan", no_wrap=True)
    table.add_column("Value", max_width=60)

    for name, value in outcome.fields.model_dump(mode="json").items():
        if value is None:
            table.add_row(name, Text("-", style="dim"))
        elif name == "result":
            style = "green" if value == LandingResult.SUCCESSFUL.value else "red"
            table.add_row(name, Text(str(value), style=style))
        else:
            table.add_row(name, str(value))

    console.print(table)

    for error in outcome.errors:
        console.print(f"  [bold red]error:[/bold red] {escape(error)}")
    for warning in outcome.warnings:
        console.print(f"  [yellow]warning:[/yellow] {escape(warning)}")


def display_cost_savings(summary: CostSavingsSummary, console: Console) -> None:
    """Print a batch cost-savings table."""
    table = Table(title="Cost Savings", show_lines=True)
    table.add_column("Processed", justify="right")
    table.add_column("Succeeded", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Success Rate", justify="right")
    table.add_column("Paid Cost Avoided", justify="right")
    table.add_column("Actual Cost", justify="right")

    table.add_row(
        str(summary.total_processed),
        str(summary.free_success_count),
        str(summary.free_fail_count),
        f"{summary.free_success_rate:.1f}%",
        f"${summary.savings:.4f}",
        f"${summary.actual_cost:.4f}",
    )
    console.print(table)


def display_fleet(
    fleet: list[AircraftCompliance],
    summary: FleetSummary,
    console: Console,
) -> None:
    """Print per-aircraft compliance and the fleet summary line.

    Columns: Aircraft, Last Autoland, Report, Next Required, Days, Status.
    """
    table = Table(title="Fleet Autoland Compliance", show_lines=True)
    table.add_column("Aircraft", style="bold cyan", no_wrap=True)
    table.add_column("Last Autoland")
    table.add_column("Report", style="dim")
    table.add_column("Next Required")
    table.add_column("Days", justify="right")
    table.add_column("Status")

    for a in fleet:
        table.add_row(
            a.aircraft_reg,
            a.last_autoland_date.isoformat() if a.last_autoland_date else "never",
            a.last_autoland_report or "",
            a.next_required_date.isoformat() if a.next_required_date else "",
            str(a.days_remaining) if a.days_remaining is not None else "",
            Text(a.status.value, style=_STATUS_STYLES[a.status]),
        )

    console.print(table)
    console.print(
        f"\n[bold]{summary.total_aircraft}[/bold] aircraft: "
        f"[bold red]{summary.overdue_count} overdue[/bold red], "
        f"[yellow]{summary.due_soon_count} due soon[/yellow], "
        f"[green]{summary.on_time_count} on time[/green]; "
        f"success rate {summary.success_rate:.1f}%"
    )
