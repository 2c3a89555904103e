# topmark:header:start
#
#   project      : Sprig
#   file         : node_kind.py
#   file_relpath : src/sprig/core/node_kind.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Node kinds of the Sprig test tree.

Every node registered with the tree builder has a `NodeKind`: a container
(``Describe``/``Context``/``When``), a leaf (``It`` and the per-spec setup and
teardown nodes), or a suite-level node that may appear only once, at the top level.

Groups of related kinds are exported as tuples so they can be unpacked into the
membership predicate:

    ```python
    kind.is_any(*SUITE_KINDS)
    kind.is_any(NodeKind.REPORT_AFTER_SUITE)
    ```
"""

from __future__ import annotations

from sprig.core.enum_mixins import KeyedStrEnum


class NodeKind(KeyedStrEnum):
    """Category of a test-tree node.

    The ``.value`` is a stable snake_case key suitable for serialization; the
    ``.label`` (also returned by ``str()``) is the name users write in their suites.
    """

    # Containers
    DESCRIBE = ("describe", "Describe")
    CONTEXT = ("context", "Context")
    WHEN = ("when", "When")

    # Leaves
    IT = ("it", "It", ("specify",))
    BEFORE_EACH = ("before_each", "BeforeEach")
    JUST_BEFORE_EACH = ("just_before_each", "JustBeforeEach")
    AFTER_EACH = ("after_each", "AfterEach")
    JUST_AFTER_EACH = ("just_after_each", "JustAfterEach")
    BEFORE_ALL = ("before_all", "BeforeAll")
    AFTER_ALL = ("after_all", "AfterAll")
    REPORT_BEFORE_EACH = ("report_before_each", "ReportBeforeEach")
    REPORT_AFTER_EACH = ("report_after_each", "ReportAfterEach")

    # Suite-level
    BEFORE_SUITE = ("before_suite", "BeforeSuite")
    AFTER_SUITE = ("after_suite", "AfterSuite")
    SYNCHRONIZED_BEFORE_SUITE = ("synchronized_before_suite", "SynchronizedBeforeSuite")
    SYNCHRONIZED_AFTER_SUITE = ("synchronized_after_suite", "SynchronizedAfterSuite")
    REPORT_AFTER_SUITE = ("report_after_suite", "ReportAfterSuite")

    def is_any(self, *kinds: NodeKind) -> bool:
        """Return True if this kind is one of ``kinds``."""
        return self in kinds

    @property
    def is_container(self) -> bool:
        """Return True for container kinds (``Describe``, ``Context``, ``When``)."""
        return self.is_any(*CONTAINER_KINDS)

    @property
    def is_suite_level(self) -> bool:
        """Return True for kinds that may only be declared once, at the top level."""
        return self.is_any(*SUITE_KINDS)


CONTAINER_KINDS: tuple[NodeKind, ...] = (
    NodeKind.DESCRIBE,
    NodeKind.CONTEXT,
    NodeKind.WHEN,
)

LEAF_KINDS: tuple[NodeKind, ...] = (
    NodeKind.IT,
    NodeKind.BEFORE_EACH,
    NodeKind.JUST_BEFORE_EACH,
    NodeKind.AFTER_EACH,
    NodeKind.JUST_AFTER_EACH,
    NodeKind.BEFORE_ALL,
    NodeKind.AFTER_ALL,
    NodeKind.REPORT_BEFORE_EACH,
    NodeKind.REPORT_AFTER_EACH,
)

SUITE_SETUP_KINDS: tuple[NodeKind, ...] = (
    NodeKind.BEFORE_SUITE,
    NodeKind.SYNCHRONIZED_BEFORE_SUITE,
)

SUITE_TEARDOWN_KINDS: tuple[NodeKind, ...] = (
    NodeKind.AFTER_SUITE,
    NodeKind.SYNCHRONIZED_AFTER_SUITE,
)

SUITE_KINDS: tuple[NodeKind, ...] = (
    *SUITE_SETUP_KINDS,
    *SUITE_TEARDOWN_KINDS,
    NodeKind.REPORT_AFTER_SUITE,
)
