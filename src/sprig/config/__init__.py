# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Runtime configuration for Sprig (logging setup and environment overrides)."""

from __future__ import annotations
