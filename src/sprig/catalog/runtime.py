# topmark:header:start
#
#   project      : Sprig
#   file         : runtime.py
#   file_relpath : src/sprig/catalog/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Run-time misuse diagnostics.

These cover failures Sprig can only notice while specs execute: a failure
signal that escaped the node that raised it, and a second call of the suite
entry point.
"""

from __future__ import annotations

from sprig.core.location import CodeLocation
from sprig.diagnostic.model import Diagnostic


def uncaught_failure_outside_node(location: CodeLocation) -> Diagnostic:
    """A failure signal escaped where Sprig could not intercept it."""
    return Diagnostic(
        heading="Your Spec Failed Outside a Node",
        message=(
            "When you, or your assertion library, calls Sprig's fail(),\n"
            "Sprig raises a failure signal to prevent subsequent assertions from running.\n"
            "\n"
            "Normally Sprig intercepts this signal so you shouldn't see it.\n"
            "\n"
            "However, if you make an assertion in a background thread, Sprig can't "
            "intercept it.\n"
            "To circumvent this, wrap the body of the thread with\n"
            "\n"
            "\t{{bold}}with sprig.recover():{{/}}\n"
            "\n"
            "so the failure is handed back to the running spec.\n"
            "\n"
            "Alternatively, you may have made an assertion outside of a Sprig\n"
            "leaf node (e.g. in a container node or some out-of-band function) - please "
            "move your assertion to\n"
            "an appropriate Sprig node (e.g. a BeforeSuite, BeforeEach, It, etc...)."
        ),
        doc_link="marking-specs-as-failed",
        location=location,
    )


def rerunning_suite() -> Diagnostic:
    """The suite entry point was called more than once in a process."""
    return Diagnostic(
        heading="Rerunning Suite",
        message=(
            "It looks like you are calling run_specs more than once. Sprig does not support "
            "rerunning suites.  If you want to rerun a suite try "
            "{{bold}}sprig --repeat=N{{/}} or {{bold}}sprig --until-it-fails{{/}}"
        ),
        doc_link="repeating-test-runs-and-managing-flakey-tests",
    )
