# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig package.

Sprig describes misuse of a tree-building test framework as structured,
renderable diagnostics. It provides the diagnostic model, a catalog of
diagnostic constructors (one per failure scenario), a markup-aware text
formatter, and the render engine that turns a diagnostic into terminal text.
"""

from __future__ import annotations

from sprig.core.location import ZERO_LOCATION, CodeLocation, capture_location
from sprig.core.node_kind import NodeKind
from sprig.diagnostic.model import Diagnostic, DiagnosticError, DiagnosticPhase
from sprig.diagnostic.render import render

__all__ = [
    "ZERO_LOCATION",
    "CodeLocation",
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticPhase",
    "NodeKind",
    "capture_location",
    "render",
]
