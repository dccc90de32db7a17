from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_reconciler.cli.utils import parse_as_of, run_reconciliation, write_payload
from roster_reconciler.exporter import dumps_report

console = Console(stderr=True)


def reconcile_command(
    registry_a: Path = typer.Argument(..., exists=True, readable=True, help="Employment registry (JSON)"),
    registry_b: Path = typer.Argument(..., exists=True, readable=True, help="Training registry (JSON)"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
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
    Reconcile two registries and emit the findings report as JSON.
    """
    report = run_reconciliation(
        registry_a,
        registry_b,
        as_of=parse_as_of(as_of),
        verbose=verbose,
    )

    if verbose:
        console.log("Exporting JSON")

    write_payload(dumps_report(report, pretty=pretty), out=out)

    if verbose:
        console.log(f"Export complete: {report.summary.total_findings} findings")
