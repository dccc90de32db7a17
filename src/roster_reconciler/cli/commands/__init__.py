"""
CLI command modules for roster_reconciler.

Each command module defines a single Typer-compatible command function.
"""

from roster_reconciler.cli.commands.reconcile import reconcile_command
from roster_reconciler.cli.commands.stats import stats_command

__all__ = [
    "reconcile_command",
    "stats_command",
]
