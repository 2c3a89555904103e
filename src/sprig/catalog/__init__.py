# topmark:header:start
#
#   project      : Sprig
#   file         : __init__.py
#   file_relpath : src/sprig/catalog/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Catalog of diagnostic constructors.

Each failure scenario has exactly one pure function returning a `Diagnostic`.
Functions are grouped by lifecycle phase, one module per phase:

- [`sprig.catalog.tree`][sprig.catalog.tree]: tree construction.
- [`sprig.catalog.decoration`][sprig.catalog.decoration]: node decoration and body checks.
- [`sprig.catalog.report_entry`][sprig.catalog.report_entry]: report-entry misuse.
- [`sprig.catalog.parallel`][sprig.catalog.parallel]: parallel synchronization.
- [`sprig.catalog.configuration`][sprig.catalog.configuration]: run configuration.
- [`sprig.catalog.runtime`][sprig.catalog.runtime]: failures noticed while specs run.

`CATALOG` indexes every constructor by name. It is built once at import time and
exposed read-only.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType, ModuleType

from sprig.catalog import configuration, decoration, parallel, report_entry, runtime, tree
from sprig.diagnostic.model import Diagnostic, DiagnosticPhase


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One catalog scenario.

    Attributes:
        name: Constructor name (e.g. ``"missing_body_function"``).
        phase: Lifecycle phase of the scenario.
        factory: The constructor itself.
    """

    name: str
    phase: DiagnosticPhase
    factory: Callable[..., Diagnostic]

    @property
    def summary(self) -> str:
        """First docstring line of the constructor, or an empty string."""
        doc: str = self.factory.__doc__ or ""
        return doc.strip().splitlines()[0] if doc.strip() else ""


_PHASE_MODULES: tuple[tuple[DiagnosticPhase, ModuleType, tuple[str, ...]], ...] = (
    (
        DiagnosticPhase.TREE_CONSTRUCTION,
        tree,
        (
            "pushing_node_in_run_phase",
            "caught_panic_during_build_phase",
            "suite_node_in_nested_context",
            "suite_node_during_run_phase",
            "multiple_before_suite_nodes",
            "multiple_after_suite_nodes",
        ),
    ),
    (
        DiagnosticPhase.DECORATION,
        decoration,
        (
            "invalid_decoration_for_node_kind",
            "invalid_declaration_of_focused_and_pending",
            "unknown_decoration",
            "invalid_body_type",
            "multiple_body_functions",
            "missing_body_function",
        ),
    ),
    (
        DiagnosticPhase.REPORT_ENTRY,
        report_entry,
        (
            "too_many_report_entry_values",
            "add_report_entry_not_during_run_phase",
        ),
    ),
    (
        DiagnosticPhase.PARALLEL_SYNCHRONIZATION,
        parallel,
        (
            "aggregated_report_unavailable_due_to_process_disappearing",
            "synchronized_before_suite_failed_on_process_1",
            "synchronized_before_suite_disappeared_on_process_1",
        ),
    ),
    (
        DiagnosticPhase.CONFIGURATION,
        configuration,
        (
            "invalid_parallel_total_configuration",
            "invalid_parallel_process_configuration",
            "missing_parallel_host_configuration",
            "unreachable_parallel_host",
            "dry_run_in_parallel_configuration",
            "conflicting_verbose_succinct_configuration",
            "invalid_host_flag_count",
            "invalid_host_flag_parallel",
            "both_repeat_and_until_it_fails",
        ),
    ),
    (
        DiagnosticPhase.RUNTIME,
        runtime,
        (
            "uncaught_failure_outside_node",
            "rerunning_suite",
        ),
    ),
)


def _build_catalog() -> Mapping[str, CatalogEntry]:
    entries: dict[str, CatalogEntry] = {}
    for phase, module, names in _PHASE_MODULES:
        for name in names:
            entries[name] = CatalogEntry(name=name, phase=phase, factory=getattr(module, name))
    return MappingProxyType(entries)


CATALOG: Mapping[str, CatalogEntry] = _build_catalog()


def entries_for_phase(phase: DiagnosticPhase) -> list[CatalogEntry]:
    """Return the catalog entries of one phase, in declaration order."""
    return [entry for entry in CATALOG.values() if entry.phase == phase]


__all__ = [
    "CATALOG",
    "CatalogEntry",
    "configuration",
    "decoration",
    "entries_for_phase",
    "parallel",
    "report_entry",
    "runtime",
    "tree",
]
