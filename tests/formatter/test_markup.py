# topmark:header:start
#
#   project      : Sprig
#   file         : test_markup.py
#   file_relpath : tests/formatter/test_markup.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Unit tests for the markup tokenizer and expander."""

from __future__ import annotations

import re

from hypothesis import given

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
from tests.conftest import parametrize
from tests.strategies_sprig import s_markup_text

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def test_vocabulary_is_closed() -> None:
    assert STYLE_NAMES == {
        "bold",
        "underline",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "gray",
        "/",
    }


def test_tokenize_splits_text_and_styles() -> None:
    tokens = tokenize("a {{bold}}b{{/}} c")
    assert tokens == [
        TextToken("a "),
        StyleToken("bold"),
        TextToken("b"),
        StyleToken("/"),
        TextToken(" c"),
    ]
    assert tokens[3].is_reset  # type: ignore[union-attr]


def test_tokenize_keeps_unknown_tokens_as_text() -> None:
    """Unrecognized tokens merge into the surrounding literal text."""
    assert tokenize("x{{orange}}y{{bold}}z") == [
        TextToken("x{{orange}}y"),
        StyleToken("bold"),
        TextToken("z"),
    ]


def test_tokenize_empty_string() -> None:
    assert tokenize("") == []


def test_strip_markup_removes_known_tokens_only() -> None:
    assert strip_markup("{{bold}}{{red}}Hi{{/}} {{ bold }}") == "Hi {{ bold }}"


def test_visible_length_ignores_tokens() -> None:
    assert visible_length("{{cyan}}{{underline}}abc{{/}}") == 3


def test_expand_without_color_drops_tokens() -> None:
    assert expand("{{bold}}Learn more at:{{/}} {{cyan}}x{{/}}", color=False) == (
        "Learn more at: x"
    )


def test_expand_without_color_passes_unknown_tokens_through() -> None:
    assert expand("{{sparkle}}hi", color=False) == "{{sparkle}}hi"


def test_expand_with_color_keeps_visible_text() -> None:
    """Whatever styling yachalk applies, the visible text is unchanged."""
    text = "plain {{bold}}{{red}}loud{{/}} plain {{gray}}quiet"
    styled = expand(text, color=True)
    assert "\x1b[" in styled
    assert ANSI_RE.sub("", styled) == strip_markup(text)
    assert "{{" not in styled


def test_expand_never_raises_on_odd_markup() -> None:
    for text in ("{{", "}}", "{{}}", "{{/", "{{{bold}}}", "{{bold}}{{bold}}x{{/}}{{/}}"):
        expand(text, color=True)
        expand(text, color=False)


@given(text=s_markup_text)
def test_strip_roundtrip_leaves_no_delimiters(text: str) -> None:
    """Stripping generated markup leaves exactly the words, no braces."""
    stripped = strip_markup(text)
    assert "{" not in stripped and "}" not in stripped
    assert expand(text, color=False) == stripped
    assert visible_length(text) == len(stripped)


def test_expand_with_color_styles_runs() -> None:
    assert expand("{{bold}}x{{/}}", color=True) != "x"
    assert expand("plain", color=True) == "plain"


def test_escaped_token_is_literal_text() -> None:
    assert tokenize("a \\{{red}}b{{/}}") == [TextToken("a {{red}}b"), StyleToken("/")]
    assert strip_markup("\\{{bold}}x") == "{{bold}}x"


def test_escaped_unknown_token_keeps_backslash() -> None:
    assert strip_markup("\\{{sparkle}}") == "\\{{sparkle}}"


@parametrize(
    "payload",
    [
        "expected {{red}}x{{/}} got y",
        "{'a': 1} {{x}}",
        "already \\{{bold}} escaped",
        "C:\\temp\\{{/}}",
    ],
)
def test_escape_markup_renders_verbatim(payload: str) -> None:
    escaped = escape_markup(payload)
    assert strip_markup(escaped) == payload
    assert expand(escaped, color=False) == payload
    assert ANSI_RE.sub("", expand(escaped, color=True)) == payload


@given(text=s_markup_text)
def test_escape_markup_then_strip_is_identity(text: str) -> None:
    assert strip_markup(escape_markup(text)) == text
