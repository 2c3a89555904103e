# topmark:header:start
#
#   project      : Sprig
#   file         : render.py
#   file_relpath : src/sprig/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig `render` command.

Reads diagnostics in their machine form (one JSON object, or NDJSON with one
object per line) from a file or STDIN and writes their rendering to stderr,
the way a top-level reporter would.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from sprig.cli.errors import SprigDataError, SprigFileNotFoundError, SprigUnexpectedError
from sprig.config.logging import get_logger
from sprig.diagnostic.machine import (
    DiagnosticPayloadError,
    iter_ndjson_diagnostics,
    loads_diagnostic,
)

if TYPE_CHECKING:
    from sprig.cli.console import ConsoleLike
    from sprig.diagnostic.model import Diagnostic

logger = get_logger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return click.get_text_stream("stdin").read()
    path = Path(source)
    if not path.is_file():
        raise SprigFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SprigDataError(f"{source} is not UTF-8 text: {exc}") from exc
    except OSError as exc:
        raise SprigUnexpectedError(f"Could not read {source}: {exc}") from exc


def _decode(text: str) -> list[Diagnostic]:
    # A single (possibly pretty-printed) object first, then NDJSON.
    try:
        return [loads_diagnostic(text)]
    except DiagnosticPayloadError:
        logger.debug("Input is not a single JSON object; decoding as NDJSON")
    return list(iter_ndjson_diagnostics(text))


@click.command(
    name="render",
    help="Render diagnostics read from FILE (JSON or NDJSON; '-' for STDIN).",
)
@click.argument("source", default="-", metavar="FILE")
@click.pass_context
def render_command(ctx: click.Context, source: str) -> None:
    """Render machine-form diagnostics."""
    console: ConsoleLike = ctx.obj["console"]
    try:
        diagnostics: list[Diagnostic] = _decode(_read_input(source))
    except DiagnosticPayloadError as exc:
        raise SprigDataError(str(exc)) from exc

    logger.info("Rendering %d diagnostic(s) from %s", len(diagnostics), source)
    for diagnostic in diagnostics:
        console.error(diagnostic.render(color=console.enable_color), nl=False)
