# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Core primitives consumed by diagnostics.

Public modules:
    - sprig.core.enum_mixins: keyed string enums with label/alias parsing.
    - sprig.core.location: `CodeLocation` values and call-site capture.
    - sprig.core.node_kind: the `NodeKind` enumeration and its groups.

These modules stay free of rendering concerns (no yachalk imports).
"""

from __future__ import annotations

from sprig.core.location import ZERO_LOCATION, CodeLocation, capture_location
from sprig.core.node_kind import (
    CONTAINER_KINDS,
    LEAF_KINDS,
    SUITE_KINDS,
    SUITE_SETUP_KINDS,
    SUITE_TEARDOWN_KINDS,
    NodeKind,
)

__all__ = [
    "CONTAINER_KINDS",
    "LEAF_KINDS",
    "SUITE_KINDS",
    "SUITE_SETUP_KINDS",
    "SUITE_TEARDOWN_KINDS",
    "ZERO_LOCATION",
    "CodeLocation",
    "NodeKind",
    "capture_location",
]
