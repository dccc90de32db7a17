from __future__ import annotations

import typer

from roster_reconciler.cli.commands.reconcile import reconcile_command
from roster_reconciler.cli.commands.stats import stats_command

app = typer.Typer(
    name="roster",
    help="Cross-check an employment registry against a training registry",
    add_completion=False,
)

app.command("reconcile")(reconcile_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
