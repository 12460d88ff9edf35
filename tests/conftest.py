# topmark:header:start
#
#   project      : Lintframe
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Lintframe test suite.

This file sets up global fixtures, customizes the logging configuration for test
runs, and provides small factories for building messages and sources.

Notes:
    Messages are immutable. Build variants with the factories below (or
    `dataclasses.replace`) rather than mutating an instance.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from lintframe.codeframe.sources import clear_source_cache
from lintframe.config import logging
from lintframe.diagnostic.model import (
    LineCol,
    LineColLocation,
    Location,
    Message,
    Severity,
    Source,
    StructuralLocation,
)

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
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
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_lintframe_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Lintframe's runtime log level is not forced via env during tests.

    Also clears the variables that influence color and message limits, so a
    developer shell exporting them does not change test outcomes.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in ("LINTFRAME_LOG_LEVEL", "LINTFRAME_MAX_MESSAGES", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_source_cache() -> Iterator[None]:
    """Forget cached document texts between tests (files are rewritten in tmp dirs)."""
    clear_source_cache()
    yield
    clear_source_cache()


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests, ensuring
    detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated temporary project directory.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The temporary project directory, also the current working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def at(path: str, line: int, col: int, *, end: tuple[int, int] | None = None) -> LineColLocation:
    """Return a line/column location in ``path``."""
    return LineColLocation(
        source=Source(path),
        start=LineCol(line, col),
        end=LineCol(*end) if end is not None else None,
    )


def pointer_in(path: str, pointer: str, *, report_on_key: bool = False) -> StructuralLocation:
    """Return a structural location in ``path``."""
    return StructuralLocation(source=Source(path), pointer=pointer, report_on_key=report_on_key)


def make_message(
    *,
    severity: Severity = Severity.WARN,
    message: str = "bad foo",
    rule_id: str = "no-foo",
    location: Location | None = None,
    secondary: Location | None = None,
    suggest: tuple[str, ...] = (),
    ignored: bool = False,
    from_location: Location | None = None,
) -> Message:
    """Return a message with sensible defaults for tests.

    The default location is ``/a.yaml:2:3``, a path that does not exist so no
    excerpt is rendered.
    """
    return Message(
        severity=severity,
        message=message,
        rule_id=rule_id,
        primary_location=location if location is not None else at("/a.yaml", 2, 3),
        secondary_location=secondary,
        suggest=suggest,
        ignored=ignored,
        from_location=from_location,
    )
