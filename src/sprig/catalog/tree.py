# topmark:header:start
#
#   project      : Sprig
#   file         : tree.py
#   file_relpath : src/sprig/catalog/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Tree construction diagnostics.

The tree builder reports these when a node is registered at the wrong time or
place, or when construction itself fails.
"""

from __future__ import annotations

from typing import Final

from sprig.core.location import CodeLocation
from sprig.core.node_kind import NodeKind
from sprig.diagnostic.model import Diagnostic
from sprig.formatter.markup import escape_markup

STRUCTURE_HEADING: Final[str] = "Sprig detected an issue with your test structure"

LIFECYCLE_DOC: Final[str] = "understanding-sprigs-lifecycle"
SUITE_SETUP_DOC: Final[str] = "global-setup-and-teardown-beforesuite-and-aftersuite"
SUITE_REPORT_DOC: Final[str] = "generating-custom-reports-when-a-test-suite-completes"


def _suite_node_doc_link(node_kind: NodeKind) -> str:
    if node_kind.is_any(NodeKind.REPORT_AFTER_SUITE):
        return SUITE_REPORT_DOC
    return SUITE_SETUP_DOC


def pushing_node_in_run_phase(node_kind: NodeKind, location: CodeLocation) -> Diagnostic:
    """A node was registered from inside a running leaf node."""
    kind: str = node_kind.label
    return Diagnostic(
        heading=STRUCTURE_HEADING,
        message=(
            f"It looks like you are trying to add a {{{{bold}}}}[{kind}]{{{{/}}}} node\n"
            "to the Sprig test tree in a leaf node {{bold}}after{{/}} the specs started running.\n"
            "\n"
            "To enable randomization and parallelization Sprig requires the test tree\n"
            "to be fully constructed up front.  In practice, this means that you can\n"
            f"only create nodes like {{{{bold}}}}[{kind}]{{{{/}}}} at the top-level or within the\n"
            "body of a {{bold}}Describe{{/}}, {{bold}}Context{{/}}, or {{bold}}When{{/}}."
        ),
        doc_link=LIFECYCLE_DOC,
        location=location,
    )


def caught_panic_during_build_phase(caught_panic: object, location: CodeLocation) -> Diagnostic:
    """An assertion failure or exception escaped a container body during construction.

    The captured payload (its ``str()``) is escaped so it renders verbatim.
    """
    return Diagnostic(
        heading="Assertion or Panic detected during tree construction",
        message=(
            "Sprig detected a panic while constructing the test tree.\n"
            "You may be trying to make an assertion in the body of a container node\n"
            "(i.e. {{bold}}Describe{{/}}, {{bold}}Context{{/}}, or {{bold}}When{{/}}).\n"
            "\n"
            "Please ensure all assertions are inside leaf nodes such as {{bold}}BeforeEach{{/}},\n"
            "{{bold}}It{{/}}, etc.\n"
            "\n"
            "{{bold}}Here's the content of the panic that was caught:{{/}}\n"
            f"{escape_markup(str(caught_panic))}"
        ),
        doc_link="do-not-make-assertions-in-container-node-functions",
        location=location,
    )


def suite_node_in_nested_context(node_kind: NodeKind, location: CodeLocation) -> Diagnostic:
    """A suite-level node was declared inside a container."""
    kind: str = node_kind.label
    return Diagnostic(
        heading=STRUCTURE_HEADING,
        message=(
            f"It looks like you are trying to add a {{{{bold}}}}[{kind}]{{{{/}}}} node "
            "within a container node.\n"
            "\n"
            f"{{{{bold}}}}{kind}{{{{/}}}} can only be called at the top level."
        ),
        doc_link=_suite_node_doc_link(node_kind),
        location=location,
    )


def suite_node_during_run_phase(node_kind: NodeKind, location: CodeLocation) -> Diagnostic:
    """A suite-level node was declared from inside a running leaf node."""
    kind: str = node_kind.label
    return Diagnostic(
        heading=STRUCTURE_HEADING,
        message=(
            f"It looks like you are trying to add a {{{{bold}}}}[{kind}]{{{{/}}}} node "
            "within a leaf node after the specs started running.\n"
            "\n"
            f"{{{{bold}}}}{kind}{{{{/}}}} can only be called at the top level."
        ),
        doc_link=_suite_node_doc_link(node_kind),
        location=location,
    )


def _multiple_suite_nodes(
    setup_or_teardown: str,
    node_kind: NodeKind,
    location: CodeLocation,
    earlier_node_kind: NodeKind,
    earlier_location: CodeLocation,
) -> Diagnostic:
    # The current node comes first, then the earlier one with its location.
    return Diagnostic(
        heading=STRUCTURE_HEADING,
        message=(
            f"It looks like you are trying to add a {{{{bold}}}}[{node_kind.label}]{{{{/}}}} "
            "node but\n"
            f"you already have a {{{{bold}}}}[{earlier_node_kind.label}]{{{{/}}}} node defined at: "
            f"{{{{gray}}}}{escape_markup(str(earlier_location))}{{{{/}}}}.\n"
            "\n"
            f"Sprig only allows you to define one suite {setup_or_teardown} node."
        ),
        doc_link=SUITE_SETUP_DOC,
        location=location,
    )


def multiple_before_suite_nodes(
    node_kind: NodeKind,
    location: CodeLocation,
    earlier_node_kind: NodeKind,
    earlier_location: CodeLocation,
) -> Diagnostic:
    """A second suite setup node was declared."""
    return _multiple_suite_nodes("setup", node_kind, location, earlier_node_kind, earlier_location)


def multiple_after_suite_nodes(
    node_kind: NodeKind,
    location: CodeLocation,
    earlier_node_kind: NodeKind,
    earlier_location: CodeLocation,
) -> Diagnostic:
    """A second suite teardown node was declared."""
    return _multiple_suite_nodes(
        "teardown", node_kind, location, earlier_node_kind, earlier_location
    )
