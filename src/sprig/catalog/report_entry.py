# topmark:header:start
#
#   project      : Sprig
#   file         : report_entry.py
#   file_relpath : src/sprig/catalog/report_entry.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Report-entry diagnostics (``add_report_entry`` misuse)."""

from __future__ import annotations

from typing import Final

from sprig.core.location import CodeLocation
from sprig.diagnostic.model import Diagnostic
from sprig.formatter.markup import escape_markup

REPORT_ENTRY_DOC: Final[str] = "attaching-data-to-reports"


def too_many_report_entry_values(location: CodeLocation, arg: object) -> Diagnostic:
    """A report entry received more than one value; ``arg`` is the first extra one."""
    return Diagnostic(
        heading="Too Many ReportEntry Values",
        message=(
            "{{bold}}add_report_entry{{/}} can only be given one value. "
            f"Got unexpected value: {escape_markup(repr(arg))}"
        ),
        doc_link=REPORT_ENTRY_DOC,
        location=location,
    )


def add_report_entry_not_during_run_phase(location: CodeLocation) -> Diagnostic:
    """A report entry was added outside a running spec."""
    return Diagnostic(
        heading="Sprig detected an issue with your test structure",
        message=(
            "It looks like you are calling {{bold}}add_report_entry{{/}} outside of a running "
            "spec.  Make sure you call {{bold}}add_report_entry{{/}} inside a runnable node "
            "such as It or BeforeEach and not inside the body of a container such as "
            "Describe or Context."
        ),
        doc_link=REPORT_ENTRY_DOC,
        location=location,
    )
