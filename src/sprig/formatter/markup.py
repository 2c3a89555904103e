# topmark:header:start
#
#   project      : Sprig
#   file         : markup.py
#   file_relpath : src/sprig/formatter/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Tokenizer and expander for Sprig's inline style markup.

Markup tokens are written ``{{name}}`` inside ordinary text. The vocabulary is
closed:

    * ``{{bold}}``, ``{{underline}}``
    * colors: ``{{red}}``, ``{{green}}``, ``{{yellow}}``, ``{{blue}}``,
      ``{{magenta}}``, ``{{cyan}}``, ``{{gray}}``
    * ``{{/}}`` resets every active style

Styles accumulate until the next reset. Anything that looks like a token but is
not in the vocabulary (``{{orange}}``, ``{{ bold }}``) is kept as literal text,
so malformed markup degrades to readable output instead of failing.

A backslash right before a known token (``\\{{red}}``) makes it literal text
(``{{red}}``). `escape_markup` applies this to caller-supplied values, so they
render verbatim.

Expansion to ANSI styling goes through `yachalk`; with color disabled the
tokens are simply dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Protocol

from yachalk import ChalkFactory, ColorMode

if TYPE_CHECKING:
    from collections.abc import Iterable

RESET: Final[str] = "/"
ESCAPE: Final[str] = "\\"

# Token name -> yachalk builder attribute
_STYLE_ATTRS: Final[dict[str, str]] = {
    "bold": "bold",
    "underline": "underline",
    "red": "red",
    "green": "green",
    "yellow": "yellow",
    "blue": "blue",
    "magenta": "magenta",
    "cyan": "cyan",
    "gray": "gray",
}

STYLE_NAMES: Final[frozenset[str]] = frozenset((*_STYLE_ATTRS, RESET))

_TOKEN_RE: Final[re.Pattern[str]] = re.compile(r"(\\?)\{\{([^{}]*)\}\}")

# Styling follows the `color` argument, never yachalk's import-time TTY detection.
_CHALK: Final[ChalkFactory] = ChalkFactory(ColorMode.Basic16)


@dataclass(frozen=True, slots=True)
class TextToken:
    """A run of literal text."""

    text: str


@dataclass(frozen=True, slots=True)
class StyleToken:
    """A recognized style token (``name`` is a member of `STYLE_NAMES`)."""

    name: str

    @property
    def is_reset(self) -> bool:
        """Return True for the ``{{/}}`` token."""
        return self.name == RESET


Token = TextToken | StyleToken


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into text and style tokens.

    Adjacent literal text (including unrecognized ``{{...}}`` sequences and
    escaped tokens, minus their backslash) is merged into a single `TextToken`.

    Args:
        text: Text possibly containing markup.

    Returns:
        Tokens in source order. Concatenating the text tokens yields
        `strip_markup(text)`.
    """
    tokens: list[Token] = []
    pending: list[str] = []
    pos = 0
    for match in _TOKEN_RE.finditer(text):
        escaped, name = match.group(1), match.group(2)
        if name not in STYLE_NAMES:
            continue
        pending.append(text[pos : match.start()])
        pos = match.end()
        if escaped:
            pending.append(match.group(0)[len(ESCAPE) :])
            continue
        if any(pending):
            tokens.append(TextToken("".join(pending)))
        pending = []
        tokens.append(StyleToken(name))
    pending.append(text[pos:])
    if any(pending):
        tokens.append(TextToken("".join(pending)))
    return tokens


def strip_markup(text: str) -> str:
    """Return ``text`` with every recognized style token removed."""
    return "".join(t.text for t in tokenize(text) if isinstance(t, TextToken))


def escape_markup(text: str) -> str:
    """Escape every known token in ``text`` so it renders literally.

    Use this for caller-supplied values (panic payloads, reprs, host names)
    embedded into markup templates. Unknown ``{{...}}`` sequences are already
    literal and are left untouched.
    """
    return _TOKEN_RE.sub(
        lambda m: m.group(0) if m.group(2) not in STYLE_NAMES else ESCAPE + m.group(0),
        text,
    )


def visible_length(text: str) -> int:
    """Return the number of characters ``text`` occupies once markup is removed."""
    return len(strip_markup(text))


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic list
    of arguments and a `sep` keyword. Sprig always calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments into a display string."""
        ...


def _builder_for(styles: Iterable[str]) -> Colorizer:
    builder: Any = _CHALK
    for name in styles:
        builder = getattr(builder, _STYLE_ATTRS[name])
    return builder


def expand(text: str, *, color: bool) -> str:
    """Expand markup into terminal styling.

    Args:
        text: Text possibly containing markup.
        color: If True, styled runs are wrapped with `yachalk` ANSI sequences.
            If False, style tokens are dropped and only the plain text remains.

    Returns:
        The expanded string.
    """
    tokens: list[Token] = tokenize(text)
    if not color:
        return "".join(t.text for t in tokens if isinstance(t, TextToken))

    out: list[str] = []
    active: list[str] = []
    for token in tokens:
        if isinstance(token, StyleToken):
            if token.is_reset:
                active.clear()
            elif token.name not in active:
                active.append(token.name)
            continue
        out.append(_builder_for(active)(token.text) if active else token.text)
    return "".join(out)
