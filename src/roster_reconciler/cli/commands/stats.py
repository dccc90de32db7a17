from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from roster_reconciler.cli.utils import parse_as_of, run_reconciliation

console = Console()


def stats_command(
    registry_a: Path = typer.Argument(..., exists=True, readable=True),
    registry_b: Path = typer.Argument(..., exists=True, readable=True),
    as_of: Optional[str] = typer.Option(
        None,
        "--as-of",
        help="Reference date for activity checks (default: today)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show finding counts per inconsistency type and per organization.
    """
    report = run_reconciliation(registry_a, registry_b, as_of=parse_as_of(as_of), verbose=verbose)
    summary = report.summary

    by_type = Table(title="Findings by Type")
    by_type.add_column("Inconsistency", style="bold")
    by_type.add_column("Count", justify="right")
    for name, count in summary.counts_by_type.items():
        by_type.add_row(name, str(count))
    by_type.add_row("Total findings", str(summary.total_findings), style="bold")

    by_org = Table(title="Findings by Organization")
    by_org.add_column("Organization", style="bold")
    by_org.add_column("Findings", justify="right")
    for name, count in summary.counts_by_organization.items():
        by_org.add_row(name, str(count))

    console.print(by_type)
    console.print(by_org)
