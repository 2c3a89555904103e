# topmark:header:start
#
#   project      : Sprig
#   file         : types.py
#   file_relpath : src/sprig/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Shared typing helpers for Sprig diagnostics.

`DiagnosticLike` expresses the "describable failure" contract structurally, so
reporters and transports can accept any object exposing the four fields and a
render operation without depending on the concrete `Diagnostic` class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sprig.core.location import CodeLocation


class DiagnosticLike(Protocol):
    """Structural interface for renderable failure descriptions."""

    @property
    def heading(self) -> str:
        """Short title."""
        ...

    @property
    def message(self) -> str:
        """Explanatory text (may be empty)."""
        ...

    @property
    def doc_link(self) -> str:
        """Documentation anchor (may be empty)."""
        ...

    @property
    def location(self) -> CodeLocation:
        """Call site (`ZERO_LOCATION` when absent)."""
        ...

    def render(self, *, color: bool = False) -> str:
        """Return the formatted text for this failure."""
        ...
