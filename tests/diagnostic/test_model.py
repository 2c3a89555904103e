# topmark:header:start
#
#   project      : Sprig
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Unit tests for the diagnostic model."""

from __future__ import annotations

import dataclasses

import pytest

from sprig.core.location import ZERO_LOCATION, CodeLocation
from sprig.diagnostic.model import Diagnostic, DiagnosticError, DiagnosticPhase
from sprig.diagnostic.types import DiagnosticLike


def test_defaults() -> None:
    d = Diagnostic(heading="Oops")
    assert d.message == ""
    assert d.doc_link == ""
    assert d.location == ZERO_LOCATION
    assert not d.has_location


def test_is_immutable() -> None:
    d = Diagnostic(heading="Oops")
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.heading = "Other"  # type: ignore[misc]


def test_equal_fields_make_equal_values(suite_location: CodeLocation) -> None:
    a = Diagnostic("H", "M", "anchor", suite_location)
    b = Diagnostic("H", "M", "anchor", CodeLocation("suite_test.x", 42))
    assert a == b
    assert hash(a) == hash(b)
    assert a.has_location


def test_render_method_matches_render_function(suite_location: CodeLocation) -> None:
    from sprig.diagnostic.render import render

    d = Diagnostic("H", "M", "anchor", suite_location)
    assert d.render() == render(d)
    assert d.render(color=False) == render(d, color=False)


def test_satisfies_diagnostic_like() -> None:
    def heading_of(d: DiagnosticLike) -> str:
        return d.heading

    assert heading_of(Diagnostic("H")) == "H"


def test_diagnostic_error_carries_diagnostic(suite_location: CodeLocation) -> None:
    d = Diagnostic("Missing Functions", "none was passed in", "", suite_location)
    with pytest.raises(DiagnosticError) as excinfo:
        raise DiagnosticError(d)
    assert excinfo.value.diagnostic is d
    assert str(excinfo.value) == d.render(color=False)
    assert excinfo.value.args == ("Missing Functions",)


def test_phases() -> None:
    assert [p.value for p in DiagnosticPhase] == [
        "tree-construction",
        "decoration",
        "report-entry",
        "parallel-synchronization",
        "configuration",
        "runtime",
    ]
