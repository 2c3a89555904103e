# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/formatter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Markup-aware text formatting.

Diagnostic text carries inline style markup such as ``{{bold}}...{{/}}``. This
package keeps that mini-language separate from message content:

- [`sprig.formatter.markup`][sprig.formatter.markup] tokenizes, strips and expands
  markup (expansion uses `yachalk`).
- [`sprig.formatter.formatter`][sprig.formatter.formatter] adds template
  substitution, indentation and word-wrapping on top of it.
"""

from __future__ import annotations

from sprig.formatter.formatter import COLS, Formatter
from sprig.formatter.markup import (
    STYLE_NAMES,
    StyleToken,
    TextToken,
    escape_markup,
    expand,
    strip_markup,
    tokenize,
    visible_length,
)

__all__ = [
    "COLS",
    "STYLE_NAMES",
    "Formatter",
    "StyleToken",
    "TextToken",
    "escape_markup",
    "expand",
    "strip_markup",
    "tokenize",
    "visible_length",
]
