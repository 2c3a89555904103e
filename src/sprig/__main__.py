# topmark:header:start
#
#   project      : Sprig
#   file         : __main__.py
#   file_relpath : src/sprig/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Module entry point for running Sprig via ``python -m sprig``.

It delegates directly to :func:`sprig.cli.main.cli`, so the module interface and
the ``sprig`` console script share one entry point.

Examples:
    List the diagnostic catalog::

        python -m sprig list
"""

from __future__ import annotations

from sprig.cli.main import cli

if __name__ == "__main__":
    cli()
