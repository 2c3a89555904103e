# topmark:header:start
#
#   project      : Sprig
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Sprig contributors
#
# topmark:header:end

"""Pytest configuration for the Sprig test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, so TRACE-level output from the render engine and codec is captured.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from sprig.config import logging
from sprig.core.location import CodeLocation

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_sprig_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Sprig's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("SPRIG_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set logging to TRACE for all tests so detailed output is captured."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def suite_location() -> CodeLocation:
    """A fixed, non-zero location inside a suite file."""
    return CodeLocation(file_name="suite_test.x", line_number=42)


@pytest.fixture
def earlier_location() -> CodeLocation:
    """A second location, earlier in the same suite file."""
    return CodeLocation(file_name="suite_test.x", line_number=7)
