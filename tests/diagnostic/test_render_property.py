# topmark:header:start
#
#   project      : Sprig
#   file         : test_render_property.py
#   file_relpath : tests/diagnostic/test_render_property.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

# pyright: strict

"""Property tests for the render engine.

For generated diagnostics this suite asserts:
1) rendering is deterministic and depends only on field values,
2) the location line appears iff the location is non-zero,
3) the "Learn more at:" line appears iff a doc link is set,
4) the plain rendering of the message equals its markup-stripped text, laid out.
"""

from __future__ import annotations

import dataclasses

import pytest
from hypothesis import given, settings

from sprig.constants import COLS, DOCS_BASE_URL
from sprig.diagnostic.model import Diagnostic
from sprig.diagnostic.render import render
from sprig.formatter.formatter import wrap
from sprig.formatter.markup import strip_markup
from tests.strategies_sprig import s_diagnostic


@given(d=s_diagnostic)
def test_render_is_deterministic(d: Diagnostic) -> None:
    copy = dataclasses.replace(d)
    assert copy is not d
    assert render(d) == render(copy)
    assert render(d, color=True) == render(copy, color=True)


@given(d=s_diagnostic)
def test_location_line_iff_non_zero(d: Diagnostic) -> None:
    lines = render(d).split("\n")
    if d.location.is_zero:
        assert lines[1:2] != [str(d.location)]
    else:
        assert lines[1] == str(d.location)


@given(d=s_diagnostic)
def test_learn_more_iff_doc_link(d: Diagnostic) -> None:
    out = render(d)
    expected_line = f"  Learn more at: {DOCS_BASE_URL}{d.doc_link}\n"
    if d.doc_link:
        assert out.endswith(expected_line)
    else:
        assert "Learn more at:" not in out


@given(d=s_diagnostic)
def test_message_block_is_stripped_layout(d: Diagnostic) -> None:
    out = render(d)
    head = d.heading + "\n" + ("" if d.location.is_zero else f"{d.location}\n")
    assert out.startswith(head)
    rest = out[len(head) :]
    block = strip_markup(wrap(d.message.rstrip("\n"), 1, COLS)).rstrip("\n")
    if block:
        # Exactly one blank line separates the message from what follows.
        assert rest.startswith(block + "\n\n")
        rest = rest[len(block) + 2 :]
        assert not rest.startswith("\n")
    if d.doc_link:
        assert rest == f"  Learn more at: {DOCS_BASE_URL}{d.doc_link}\n"
    else:
        assert rest == ""


@pytest.mark.hypothesis_slow
@settings(max_examples=2000, deadline=None)
@given(d=s_diagnostic)
def test_plain_render_never_contains_known_tokens(d: Diagnostic) -> None:
    out = render(d)
    assert strip_markup(out) == out
