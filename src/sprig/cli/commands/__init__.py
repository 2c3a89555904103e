# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Sprig CLI subcommands."""

from __future__ import annotations
