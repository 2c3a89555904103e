# topmark:header:start
#
#   project      : Sprig
#   file         : configuration.py
#   file_relpath : src/sprig/catalog/configuration.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Configuration diagnostics.

Reported when the run configuration (CLI flags forwarded to each process) is
inconsistent. None of these depend on state: each call returns an equal value.
"""

from __future__ import annotations

from typing import Final

from sprig.diagnostic.model import Diagnostic
from sprig.formatter.markup import escape_markup

PARALLEL_DOC: Final[str] = "parallel-specs"

SHARED_PARALLEL_MESSAGE: Final[str] = (
    "It looks like you are trying to run specs in parallel without the sprig CLI.\n"
    "This is unsupported and you should use the sprig CLI instead."
)


def invalid_parallel_total_configuration() -> Diagnostic:
    """The configured number of parallel processes is below one."""
    return Diagnostic(
        heading="--sprig.parallel.total must be >= 1",
        message=SHARED_PARALLEL_MESSAGE,
        doc_link=PARALLEL_DOC,
    )


def invalid_parallel_process_configuration() -> Diagnostic:
    """The process index is outside ``1..total``."""
    return Diagnostic(
        heading="--sprig.parallel.process is one-indexed and must be <= sprig.parallel.total",
        message=SHARED_PARALLEL_MESSAGE,
        doc_link=PARALLEL_DOC,
    )


def missing_parallel_host_configuration() -> Diagnostic:
    """A parallel run was configured without a coordinating host."""
    return Diagnostic(
        heading="--sprig.parallel.host is missing",
        message=SHARED_PARALLEL_MESSAGE,
        doc_link=PARALLEL_DOC,
    )


def unreachable_parallel_host(host: str) -> Diagnostic:
    """The coordinating ``host`` could not be reached."""
    return Diagnostic(
        heading="Could not reach sprig.parallel.host:" + escape_markup(host),
        message=SHARED_PARALLEL_MESSAGE,
        doc_link=PARALLEL_DOC,
    )


def dry_run_in_parallel_configuration() -> Diagnostic:
    """A dry run was requested together with parallel processes."""
    return Diagnostic(
        heading="Sprig only performs --dry-run in serial mode.",
        message=(
            "Please try running sprig --dry-run again, but without -p or --procs to "
            "ensure the suite is running in series."
        ),
    )


def conflicting_verbose_succinct_configuration() -> Diagnostic:
    """Verbose and succinct reporting were both requested."""
    return Diagnostic(
        heading="Conflicting reporter verbosity settings -v and --succinct.",
        message="You can't set both -v and --succinct.  Please pick one!",
    )


def invalid_host_flag_count() -> Diagnostic:
    """The host test runner was asked to repeat the suite with ``--count``."""
    return Diagnostic(
        heading="Use of --count",
        message=(
            "Sprig does not support using the host test runner's --count to rerun test "
            "suites.  Only --count=1 is allowed.  To repeat test runs, please use the "
            "sprig CLI and `sprig --until-it-fails` or `sprig --repeat=N`."
        ),
    )


def invalid_host_flag_parallel() -> Diagnostic:
    """The host test runner's own parallelization flag was used."""
    return Diagnostic(
        heading="Use of --numprocesses",
        message=(
            "The host test runner's implementation of parallelization does not actually "
            "parallelize Sprig specs.  Please use the sprig CLI and `sprig -p` or "
            "`sprig --procs=N` instead."
        ),
    )


def both_repeat_and_until_it_fails() -> Diagnostic:
    """Both a fixed repeat count and repeat-until-failure were requested."""
    return Diagnostic(
        heading="--repeat and --until-it-fails are both set",
        message=(
            "--until-it-fails directs Sprig to rerun specs indefinitely until they fail.  "
            "--repeat directs Sprig to rerun specs a set number of times.  You can't set "
            "both... which would you like?"
        ),
    )
