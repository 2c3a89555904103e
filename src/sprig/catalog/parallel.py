# topmark:header:start
#
#   project      : Sprig
#   file         : parallel.py
#   file_relpath : src/sprig/catalog/parallel.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Parallel synchronization diagnostics.

These describe coordination failures between cooperating Sprig processes. They
carry no location: the failure belongs to the run, not to a line of the suite.
"""

from __future__ import annotations

from sprig.diagnostic.model import Diagnostic


def aggregated_report_unavailable_due_to_process_disappearing() -> Diagnostic:
    """A parallel process vanished before the aggregated report for ReportAfterSuite was ready."""
    return Diagnostic(
        heading="Test Report unavailable because a Sprig parallel process disappeared",
        message=(
            "The aggregated report could not be fetched for a ReportAfterSuite node.  "
            "A Sprig parallel process disappeared before it could finish reporting."
        ),
    )


def synchronized_before_suite_failed_on_process_1() -> Diagnostic:
    """The primary SynchronizedBeforeSuite function failed on process #1."""
    return Diagnostic(
        heading="SynchronizedBeforeSuite failed on Sprig parallel process #1",
        message=(
            "The first SynchronizedBeforeSuite function running on Sprig parallel "
            "process #1 failed.  This test suite will now abort."
        ),
    )


def synchronized_before_suite_disappeared_on_process_1() -> Diagnostic:
    """Process #1 exited before its SynchronizedBeforeSuite function reported back."""
    return Diagnostic(
        heading="Process #1 disappeared before SynchronizedBeforeSuite could report back",
        message=(
            "Sprig parallel process #1 disappeared before the first SynchronizedBeforeSuite "
            "function completed.  This test suite will now abort."
        ),
    )
