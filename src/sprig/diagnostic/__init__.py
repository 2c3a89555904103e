# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Diagnostic primitives and rendering.

Design:
    - Diagnostics are immutable `Diagnostic` instances built by the functions
      in [`sprig.catalog`][sprig.catalog].
    - [`sprig.diagnostic.render`][sprig.diagnostic.render] turns one into text.

Machine output:
    JSON/NDJSON representations used to move diagnostics between parallel
    processes live under [`sprig.diagnostic.machine`][sprig.diagnostic.machine].
"""

from __future__ import annotations

from sprig.diagnostic.model import Diagnostic, DiagnosticError, DiagnosticPhase
from sprig.diagnostic.render import doc_url, render
from sprig.diagnostic.types import DiagnosticLike

__all__ = [
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticLike",
    "DiagnosticPhase",
    "doc_url",
    "render",
]
