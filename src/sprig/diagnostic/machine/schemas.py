# topmark:header:start
#
#   project      : Sprig
#   file         : schemas.py
#   file_relpath : src/sprig/diagnostic/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Typed payload schema for machine-readable diagnostics.

`MachineDiagnosticEntry` is the JSON-friendly form of a `Diagnostic`:

    {
        "heading": "Missing Functions",
        "message": "[It] node must be passed ...",
        "doc_link": "node-decoration-reference",
        "location": {"file": "suite_test.py", "line": 42}
    }

The zero location is encoded as ``null``. The captured stack trace, if any, is
not transmitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sprig.core.location import ZERO_LOCATION, CodeLocation
from sprig.diagnostic.model import Diagnostic

_TEXT_FIELDS: tuple[str, ...] = ("heading", "message", "doc_link")


class DiagnosticPayloadError(ValueError):
    """Raised when a payload does not have the shape of a machine diagnostic."""


def _location_to_dict(location: CodeLocation) -> dict[str, object] | None:
    if location.is_zero:
        return None
    return {"file": location.file_name, "line": location.line_number}


def _location_from_dict(raw: object) -> CodeLocation:
    if raw is None:
        return ZERO_LOCATION
    if not isinstance(raw, dict):
        raise DiagnosticPayloadError(f"'location' must be an object or null, got {raw!r}")
    file_name: Any = raw.get("file")
    line: Any = raw.get("line")
    if not isinstance(file_name, str):
        raise DiagnosticPayloadError(f"'location.file' must be a string, got {file_name!r}")
    # bool is an int subclass; reject it explicitly
    if not isinstance(line, int) or isinstance(line, bool):
        raise DiagnosticPayloadError(f"'location.line' must be an integer, got {line!r}")
    return CodeLocation(file_name=file_name, line_number=line)


@dataclass(frozen=True, slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        heading: Diagnostic heading.
        message: Diagnostic message, markup included.
        doc_link: Documentation anchor (may be empty).
        location: ``{"file": ..., "line": ...}`` or None for the zero location.
    """

    heading: str
    message: str
    doc_link: str
    location: dict[str, object] | None

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from a diagnostic."""
        return cls(
            heading=d.heading,
            message=d.message,
            doc_link=d.doc_link,
            location=_location_to_dict(d.location),
        )

    @classmethod
    def from_dict(cls, payload: object) -> MachineDiagnosticEntry:
        """Validate and load a decoded JSON object.

        Args:
            payload: A decoded JSON value.

        Returns:
            The validated entry.

        Raises:
            DiagnosticPayloadError: If ``payload`` is not an object, a text field is
                missing or not a string, the heading is empty, or the location is malformed.
        """
        if not isinstance(payload, dict):
            raise DiagnosticPayloadError(f"Diagnostic payload must be an object, got {payload!r}")
        values: dict[str, str] = {}
        for key in _TEXT_FIELDS:
            value: object = payload.get(key, "")
            if not isinstance(value, str):
                raise DiagnosticPayloadError(f"'{key}' must be a string, got {value!r}")
            values[key] = value
        if not values["heading"]:
            raise DiagnosticPayloadError("'heading' must be a non-empty string")
        location: CodeLocation = _location_from_dict(payload.get("location"))
        return cls(
            heading=values["heading"],
            message=values["message"],
            doc_link=values["doc_link"],
            location=_location_to_dict(location),
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict of this diagnostic entry."""
        return {
            "heading": self.heading,
            "message": self.message,
            "doc_link": self.doc_link,
            "location": self.location,
        }

    def to_diagnostic(self) -> Diagnostic:
        """Rebuild the `Diagnostic` this entry describes."""
        return Diagnostic(
            heading=self.heading,
            message=self.message,
            doc_link=self.doc_link,
            location=_location_from_dict(self.location),
        )
