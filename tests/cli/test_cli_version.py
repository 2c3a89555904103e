# topmark:header:start
#
#   project      : Sprig
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from sprig.constants import SPRIG_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == SPRIG_VERSION


@mark_cli
def test_version_verbose_has_label() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["Sprig version:", f"    {SPRIG_VERSION}"]
