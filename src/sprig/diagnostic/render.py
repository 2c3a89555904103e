# topmark:header:start
#
#   project      : Sprig
#   file         : render.py
#   file_relpath : src/sprig/diagnostic/render.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Render engine turning a diagnostic into terminal text.

Layout, top to bottom:

1. the heading, bold red;
2. the location (``file:line``) in gray, only when it is not the zero location;
3. the message, indented one level and wrapped at `COLS`, then exactly one
   blank line (trailing newlines of the message are dropped);
4. a bold ``Learn more at:`` followed by the cyan, underlined documentation URL,
   indented like the message but kept on one line.

Rendering is pure: the same diagnostic always yields the same string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sprig.config.logging import get_logger
from sprig.constants import COLS, DOCS_BASE_URL
from sprig.formatter.formatter import Formatter
from sprig.formatter.markup import escape_markup

if TYPE_CHECKING:
    from sprig.config.logging import SprigLogger
    from sprig.diagnostic.types import DiagnosticLike

logger: SprigLogger = get_logger(__name__)


def doc_url(doc_link: str) -> str:
    """Return the documentation URL for an anchor."""
    return DOCS_BASE_URL + doc_link


def render(diagnostic: DiagnosticLike, *, color: bool = False) -> str:
    """Render a diagnostic to a single formatted string.

    Args:
        diagnostic: The diagnostic (or any `DiagnosticLike`) to render.
        color: If True, expand markup to ANSI styling via `yachalk`;
            otherwise markup is dropped and plain text is produced.

    Returns:
        The rendered text. Never raises for unusual markup.
    """
    logger.trace("Rendering diagnostic %r (color=%s)", diagnostic.heading, color)
    fmt = Formatter(color=color)

    out: str = fmt.f("{{bold}}{{red}}%s{{/}}\n", diagnostic.heading)
    if not diagnostic.location.is_zero:
        out += fmt.f("{{gray}}%s{{/}}\n", escape_markup(str(diagnostic.location)))
    # Trailing newlines are dropped so the message is followed by exactly one blank line.
    message: str = fmt.fiw(1, COLS, diagnostic.message.rstrip("\n")).rstrip("\n")
    if message:
        out += message + "\n\n"
    if diagnostic.doc_link:
        # Indented but never wrapped: the URL stays on the "Learn more at:" line.
        out += fmt.fi(
            1,
            "{{bold}}Learn more at:{{/}} {{cyan}}{{underline}}%s{{/}}\n",
            doc_url(diagnostic.doc_link),
        )
    return out
