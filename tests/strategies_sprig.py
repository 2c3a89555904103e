# topmark:header:start
#
#   project      : Sprig
#   file         : strategies_sprig.py
#   file_relpath : tests/strategies_sprig.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating diagnostics and markup text.

Generated text avoids ``{`` and ``}`` outside of the markup tokens themselves,
so every token in a sample is one the strategy put there on purpose.
"""

from __future__ import annotations

from hypothesis import strategies as st

from sprig.core.location import ZERO_LOCATION, CodeLocation
from sprig.diagnostic.model import Diagnostic
from sprig.formatter.markup import STYLE_NAMES

EXCLUDED_CATEGORIES: tuple[str, ...] = ("Cs", "Cc", "Zl", "Zp")

# Words never contain braces, backslashes, spaces or newlines.
s_word: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(
        exclude_categories=EXCLUDED_CATEGORIES,  # type: ignore[arg-type]
        exclude_characters="{}\\ \n\r",
    ),
    min_size=1,
    max_size=12,
)

s_token: st.SearchStrategy[str] = st.sampled_from(sorted(STYLE_NAMES)).map(
    lambda name: "{{" + name + "}}"
)


@st.composite
def s_markup_line(draw: st.DrawFn) -> str:
    """A line of words separated by single spaces, with tokens glued to some words."""
    words: list[str] = draw(st.lists(s_word, min_size=0, max_size=25))
    out: list[str] = []
    for word in words:
        prefix: str = draw(st.one_of(st.just(""), s_token))
        suffix: str = draw(st.one_of(st.just(""), s_token))
        out.append(prefix + word + suffix)
    return " ".join(out)


s_markup_text: st.SearchStrategy[str] = st.lists(s_markup_line(), min_size=1, max_size=5).map(
    "\n".join
)

s_location: st.SearchStrategy[CodeLocation] = st.one_of(
    st.just(ZERO_LOCATION),
    st.builds(
        CodeLocation,
        file_name=s_word,
        line_number=st.integers(min_value=1, max_value=100_000),
    ),
)

s_diagnostic: st.SearchStrategy[Diagnostic] = st.builds(
    Diagnostic,
    heading=s_word,
    message=st.one_of(st.just(""), s_markup_text),
    doc_link=st.one_of(st.just(""), s_word),
    location=s_location,
)
