# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/diagnostic/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Machine-readable diagnostics.

Parallel worker processes hand diagnostics to each other (and to the process
that prints them) as JSON. This package holds that wire form.

Layers:

- **schemas**: the typed payload (`MachineDiagnosticEntry`) and its strict
  dict conversion.
- **codec**: JSON / NDJSON string helpers built on the schemas.
"""

from __future__ import annotations

from sprig.diagnostic.machine.codec import (
    dumps_diagnostic,
    dumps_ndjson,
    iter_ndjson_diagnostics,
    loads_diagnostic,
)
from sprig.diagnostic.machine.schemas import DiagnosticPayloadError, MachineDiagnosticEntry

__all__ = [
    "DiagnosticPayloadError",
    "MachineDiagnosticEntry",
    "dumps_diagnostic",
    "dumps_ndjson",
    "iter_ndjson_diagnostics",
    "loads_diagnostic",
]
