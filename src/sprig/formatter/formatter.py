# topmark:header:start
#
#   project      : Sprig
#   file         : formatter.py
#   file_relpath : src/sprig/formatter/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Template substitution, indentation and word-wrapping for markup text.

`Formatter` exposes three entry points with increasing amounts of layout:

- `Formatter.f`: substitute ``%``-style arguments, then expand markup.
- `Formatter.fi`: as `f`, and indent every non-empty line by two spaces per level.
- `Formatter.fiw`: as `fi`, and greedy word-wrap each line to a column width.

Wrapping is measured on *visible* characters, so markup tokens never count
towards the width. A single word longer than the available width is kept whole.
"""

from __future__ import annotations

from dataclasses import dataclass

from sprig.constants import COLS
from sprig.formatter.markup import expand, visible_length

__all__ = ["COLS", "Formatter"]

INDENT: str = "  "


def _substitute(template: str, args: tuple[object, ...]) -> str:
    # Without args the template is taken literally, so a bare "%" is safe.
    if not args:
        return template
    return template % args


def _wrap_line(line: str, max_width: int) -> list[str]:
    if visible_length(line) <= max_width:
        return [line]

    out_lines: list[str] = []
    words: list[str] = line.split(" ")
    out_words: list[str] = [words[0]]
    length: int = visible_length(words[0])
    for word in words[1:]:
        word_length: int = visible_length(word)
        if length + word_length + 1 <= max_width:
            length += word_length + 1
            out_words.append(word)
            continue
        out_lines.append(" ".join(out_words))
        out_words = [word]
        length = word_length
    out_lines.append(" ".join(out_words))
    return out_lines


def wrap(text: str, indentation: int, max_width: int) -> str:
    """Indent and word-wrap markup text without expanding it.

    Args:
        text: Text possibly containing markup; explicit newlines are preserved.
        indentation: Indentation level (two spaces per level). Blank lines stay blank.
        max_width: Total column width including indentation. ``0`` disables wrapping.

    Returns:
        The laid-out text, markup tokens intact.
    """
    lines: list[str] = text.split("\n")
    if max_width > 0:
        available: int = max(max_width - len(INDENT) * indentation, 1)
        lines = [wrapped for line in lines for wrapped in _wrap_line(line, available)]
    if indentation > 0:
        padding: str = INDENT * indentation
        lines = [padding + line if line else line for line in lines]
    return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class Formatter:
    """Markup-aware text formatter.

    Attributes:
        color: Whether markup expands to ANSI styling (True) or is dropped (False).
    """

    color: bool = False

    def f(self, template: str, *args: object) -> str:
        """Substitute ``args`` into ``template`` and expand the markup."""
        return expand(_substitute(template, args), color=self.color)

    def fi(self, indentation: int, template: str, *args: object) -> str:
        """Like `f`, indenting every non-empty line by ``indentation`` levels."""
        return self.fiw(indentation, 0, template, *args)

    def fiw(self, indentation: int, max_width: int, template: str, *args: object) -> str:
        """Like `fi`, also word-wrapping each line to ``max_width`` columns.

        Args:
            indentation: Indentation level (two spaces per level).
            max_width: Total column width including indentation; ``0`` disables wrapping.
            template: Markup template with optional ``%``-style placeholders.
            *args: Values substituted into ``template``.

        Returns:
            The laid-out, expanded text.
        """
        text: str = _substitute(template, args)
        return expand(wrap(text, indentation, max_width), color=self.color)
