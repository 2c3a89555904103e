# topmark:header:start
#
#   project      : Sprig
#   file         : model.py
#   file_relpath : src/sprig/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Core diagnostic types for Sprig.

Sections:
    * DiagnosticPhase: the lifecycle phase a diagnostic describes.
    * Diagnostic: immutable description of one detected framework-usage failure.
    * DiagnosticError: exception carrier for callers that abort on a diagnostic.

Diagnostics are descriptive values. Deciding whether a failure is fatal, and
writing it anywhere, belongs to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sprig.core.location import ZERO_LOCATION, CodeLocation
from sprig.diagnostic.render import render


class DiagnosticPhase(str, Enum):
    """Lifecycle phase in which a described failure is detected."""

    TREE_CONSTRUCTION = "tree-construction"
    DECORATION = "decoration"
    REPORT_ENTRY = "report-entry"
    PARALLEL_SYNCHRONIZATION = "parallel-synchronization"
    CONFIGURATION = "configuration"
    RUNTIME = "runtime"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Immutable, renderable description of a framework-usage failure.

    Attributes:
        heading: Short title, always rendered.
        message: Optional explanatory text; may contain style markup.
        doc_link: Optional documentation anchor appended to the docs base URL.
        location: Call site of the offending node; `ZERO_LOCATION` when unknown.
    """

    heading: str
    message: str = ""
    doc_link: str = ""
    location: CodeLocation = ZERO_LOCATION

    @property
    def has_location(self) -> bool:
        """Return True if the diagnostic carries a non-zero location."""
        return not self.location.is_zero

    def render(self, *, color: bool = False) -> str:
        """Render this diagnostic; see [`render`][sprig.diagnostic.render.render]."""
        return render(self, color=color)


class DiagnosticError(Exception):
    """Exception carrying a `Diagnostic`.

    Sprig never raises this itself. Reporters that decide to abort can raise it
    and let an outer layer render ``error.diagnostic`` with styling.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.heading)
        self.diagnostic: Diagnostic = diagnostic

    def __str__(self) -> str:
        return self.diagnostic.render(color=False)
