# topmark:header:start
#
#   project      : Sprig
#   file         : version.py
#   file_relpath : src/sprig/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig `version` command.

Prints the current Sprig version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from sprig.constants import SPRIG_VERSION

if TYPE_CHECKING:
    from sprig.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Sprig.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Sprig."""
    console: ConsoleLike = ctx.obj["console"]
    if ctx.obj["verbosity_level"] > 0:
        console.print(console.styled("Sprig version:", bold=True, underline=True))
        console.print(f"    {console.styled(SPRIG_VERSION, bold=True)}")
    else:
        console.print(SPRIG_VERSION)
