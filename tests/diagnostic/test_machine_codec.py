# topmark:header:start
#
#   project      : Sprig
#   file         : test_machine_codec.py
#   file_relpath : tests/diagnostic/test_machine_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Unit tests for the machine (JSON/NDJSON) form of diagnostics."""

from __future__ import annotations

import json
from typing import Any

import pytest
from hypothesis import given

from sprig.catalog import decoration, parallel
from sprig.core.location import ZERO_LOCATION, CodeLocation
from sprig.core.node_kind import NodeKind
from sprig.diagnostic.machine import (
    DiagnosticPayloadError,
    MachineDiagnosticEntry,
    dumps_diagnostic,
    dumps_ndjson,
    iter_ndjson_diagnostics,
    loads_diagnostic,
)
from sprig.diagnostic.model import Diagnostic
from tests.conftest import parametrize
from tests.strategies_sprig import s_diagnostic


def test_to_dict_shape(suite_location: CodeLocation) -> None:
    d = decoration.missing_body_function(suite_location, NodeKind.IT)
    payload = MachineDiagnosticEntry.from_diagnostic(d).to_dict()
    assert payload == {
        "heading": "Missing Functions",
        "message": d.message,
        "doc_link": "node-decoration-reference",
        "location": {"file": "suite_test.x", "line": 42},
    }


def test_zero_location_encodes_as_null() -> None:
    d = parallel.synchronized_before_suite_failed_on_process_1()
    assert json.loads(dumps_diagnostic(d))["location"] is None
    assert loads_diagnostic(dumps_diagnostic(d)).location == ZERO_LOCATION


def test_stack_trace_is_not_transmitted() -> None:
    loc = CodeLocation(file_name="a.py", line_number=3, full_stack_trace="stack...")
    decoded = loads_diagnostic(dumps_diagnostic(Diagnostic("H", location=loc)))
    assert decoded.location == CodeLocation(file_name="a.py", line_number=3)


@given(d=s_diagnostic)
def test_decoded_diagnostic_renders_identically(d: Diagnostic) -> None:
    """What a worker renders after transport matches what the sender would render."""
    decoded = loads_diagnostic(dumps_diagnostic(d))
    assert decoded == d
    assert decoded.render() == d.render()


def test_ndjson_batch(suite_location: CodeLocation) -> None:
    batch = [
        decoration.missing_body_function(suite_location, NodeKind.IT),
        parallel.aggregated_report_unavailable_due_to_process_disappearing(),
    ]
    text = dumps_ndjson(batch)
    assert text.count("\n") == 2
    assert list(iter_ndjson_diagnostics(text + "\n\n")) == batch


def test_missing_optional_fields_default_to_empty() -> None:
    assert loads_diagnostic('{"heading": "H"}') == Diagnostic(heading="H")


@parametrize(
    "payload",
    [
        [],
        "text",
        {},
        {"heading": ""},
        {"heading": 1},
        {"heading": "H", "message": None},
        {"heading": "H", "location": "a.py:3"},
        {"heading": "H", "location": {"file": "a.py"}},
        {"heading": "H", "location": {"file": "a.py", "line": "3"}},
        {"heading": "H", "location": {"file": "a.py", "line": True}},
    ],
)
def test_malformed_payloads_are_rejected(payload: Any) -> None:
    with pytest.raises(DiagnosticPayloadError):
        MachineDiagnosticEntry.from_dict(payload)


def test_invalid_json_is_a_payload_error() -> None:
    with pytest.raises(DiagnosticPayloadError, match="Invalid JSON"):
        loads_diagnostic("{not json")


def test_ndjson_error_names_line() -> None:
    text = '{"heading": "ok"}\n\n{"heading": ""}\n'
    with pytest.raises(DiagnosticPayloadError, match="line 3"):
        list(iter_ndjson_diagnostics(text))


def test_payload_error_is_value_error() -> None:
    assert issubclass(DiagnosticPayloadError, ValueError)
