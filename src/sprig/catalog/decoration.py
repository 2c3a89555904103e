# topmark:header:start
#
#   project      : Sprig
#   file         : decoration.py
#   file_relpath : src/sprig/catalog/decoration.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Decoration diagnostics.

Reported while a node's arguments (decorations and body function) are being
validated, before the node joins the tree.
"""

from __future__ import annotations

from typing import Final

from sprig.core.location import CodeLocation
from sprig.core.node_kind import NodeKind
from sprig.diagnostic.model import Diagnostic
from sprig.formatter.markup import escape_markup

DECORATION_DOC: Final[str] = "node-decoration-reference"

BODY_SHAPE: Final[str] = "{{bold}}a function taking no arguments{{/}}"


def invalid_decoration_for_node_kind(
    location: CodeLocation, node_kind: NodeKind, decoration: str
) -> Diagnostic:
    """A known decoration was applied to a kind that does not accept it."""
    return Diagnostic(
        heading="Invalid Decoration",
        message=(
            f"[{node_kind.label}] node cannot be passed a "
            f"'{escape_markup(decoration)}' decoration"
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )


def invalid_declaration_of_focused_and_pending(
    location: CodeLocation, node_kind: NodeKind
) -> Diagnostic:
    """Both Focus and Pending were applied to the same node."""
    return Diagnostic(
        heading="Invalid Combination of Decorations: Focused and Pending",
        message=(
            f"[{node_kind.label}] node was decorated with both Focus and Pending.  "
            "At most one is allowed."
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )


def unknown_decoration(
    location: CodeLocation, node_kind: NodeKind, decoration: object
) -> Diagnostic:
    """A value that is not a recognized decoration was passed to a node."""
    return Diagnostic(
        heading="Unknown Decoration",
        message=(
            f"[{node_kind.label}] node was passed an unknown decoration: "
            f"'{escape_markup(repr(decoration))}'"
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )


def invalid_body_type(type_name: str, location: CodeLocation, node_kind: NodeKind) -> Diagnostic:
    """The node body does not have the required shape.

    Args:
        type_name: Display name of the type actually supplied (e.g. ``"function(x)"``
            or ``"int"``), computed by the caller.
        location: Where the node was declared.
        node_kind: Kind of the offending node.
    """
    return Diagnostic(
        heading="Invalid Function",
        message=(
            f"[{node_kind.label}] node must be passed {BODY_SHAPE} and returning nothing.\n"
            f"You passed {{{{bold}}}}{escape_markup(type_name)}{{{{/}}}} instead."
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )


def multiple_body_functions(location: CodeLocation, node_kind: NodeKind) -> Diagnostic:
    """More than one body function was passed to a node."""
    return Diagnostic(
        heading="Multiple Functions",
        message=(
            f"[{node_kind.label}] node must be passed a single {BODY_SHAPE} "
            "- but more than one was passed in."
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )


def missing_body_function(location: CodeLocation, node_kind: NodeKind) -> Diagnostic:
    """No body function was passed to a node."""
    return Diagnostic(
        heading="Missing Functions",
        message=(
            f"[{node_kind.label}] node must be passed a single {BODY_SHAPE} "
            "- but none was passed in."
        ),
        doc_link=DECORATION_DOC,
        location=location,
    )
