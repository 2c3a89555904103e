# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Click-based preview CLI for Sprig diagnostics.

The CLI is a thin consumer of the core: it lists the catalog and renders
diagnostics received as JSON/NDJSON. It is the only part of Sprig that writes
to a terminal.
"""

from __future__ import annotations
