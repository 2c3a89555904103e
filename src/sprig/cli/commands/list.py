# topmark:header:start
#
#   project      : Sprig
#   file         : list.py
#   file_relpath : src/sprig/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig `list` command.

Lists the diagnostic catalog grouped by lifecycle phase. With ``-v`` each
scenario is followed by the first line of its constructor's docstring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sprig.catalog import entries_for_phase
from sprig.diagnostic.model import DiagnosticPhase

if TYPE_CHECKING:
    from sprig.catalog import CatalogEntry
    from sprig.cli.console import ConsoleLike


@click.command(
    name="list",
    help="List the diagnostic catalog, grouped by phase.",
)
@click.option(
    "--phase",
    "phase",
    type=click.Choice([p.value for p in DiagnosticPhase]),
    default=None,
    help="Only list scenarios of this phase.",
)
@click.pass_context
def list_command(ctx: click.Context, phase: str | None) -> None:
    """List catalog scenarios."""
    console: ConsoleLike = ctx.obj["console"]
    verbose: bool = ctx.obj["verbosity_level"] > 0

    phases: list[DiagnosticPhase] = [DiagnosticPhase(phase)] if phase else list(DiagnosticPhase)
    for i, current in enumerate(phases):
        if i:
            console.print()
        console.print(console.styled(f"{current.value}:", bold=True))
        entries: list[CatalogEntry] = entries_for_phase(current)
        for entry in entries:
            console.print(f"  {entry.name}")
            if verbose and entry.summary:
                console.print(f"      {console.styled(entry.summary, dim=True)}")
