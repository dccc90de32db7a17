from __future__ import annotations

import time
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from roster_reconciler.config import get_config
from roster_reconciler.core.context import ReconcileContext
from roster_reconciler.core.exceptions import ReconcileExecutionError
from roster_reconciler.core.pipeline import Pipeline
from roster_reconciler.dates import parse_date
from roster_reconciler.logging import configure_logging, get_logger
from roster_reconciler.reporting.findings import ReconciliationReport

console = Console(stderr=True)


def parse_as_of(value: Optional[str]) -> Optional[date]:
    """
    Turn the --as-of option into a date. Empty means "today".
    """
    if not value:
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise typer.BadParameter(f"Unrecognized date: {value!r}", param_hint="--as-of")
    return parsed


def run_reconciliation(
    registry_a: Path,
    registry_b: Path,
    *,
    as_of: Optional[date] = None,
    verbose: bool = False,
) -> ReconciliationReport:
    """
    Build a context, run the pipeline and turn failures into a clean exit.
    """
    ctx = ReconcileContext(
        config=get_config(),
        logger=get_logger("cli"),
        registry_a_path=str(registry_a),
        registry_b_path=str(registry_b),
        as_of=as_of,
        debug=verbose,
    )

    if verbose:
        configure_logging(verbose=True)

    t0 = time.perf_counter()
    try:
        report = Pipeline(ctx).run()
    except ReconcileExecutionError as exc:
        console.print(f"[bold red]Reconciliation failed:[/bold red] {exc}")
        raise typer.Exit(code=1)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Reconciled {ctx.stats['registry_a']} + {ctx.stats['registry_b']} records "
            f"in {elapsed:.2f}s"
        )

    return report


def write_payload(payload: str, *, out: Optional[Path]) -> None:
    """
    Write rendered output to a file, or to stdout when no file was given.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
