# topmark:header:start
#
#   project      : Lintframe
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for shared CLI option helpers and parameter types."""

from __future__ import annotations

import logging

import click
import pytest

from lintframe.cli.cli_types import EnumChoiceParam
from lintframe.cli.errors import LintframeUsageError
from lintframe.cli.options import resolve_verbosity
from lintframe.cli_shared.color import ColorMode, resolve_color_mode
from lintframe.config.logging import TRACE_LEVEL
from lintframe.rendering.formats import OutputFormat
from tests.conftest import parametrize


@parametrize(
    "verbose, quiet, level",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    """-v/-q counts map to logging-style levels."""
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_rejects_both() -> None:
    """Combining -v and -q is a usage error."""
    with pytest.raises(LintframeUsageError):
        resolve_verbosity(1, 1)


def test_enum_choice_param() -> None:
    """Values are matched case-insensitively; members pass through."""
    param = EnumChoiceParam(OutputFormat)
    assert param.convert("STYLISH", None, None) is OutputFormat.STYLISH
    assert param.convert(OutputFormat.CODEFRAME, None, None) is OutputFormat.CODEFRAME
    assert param.convert(None, None, None) is None
    with pytest.raises(click.BadParameter, match="codeframe, stylish"):
        param.convert("table", None, None)


def test_enum_choice_completion() -> None:
    """Shell completion offers the matching enum values."""
    param = EnumChoiceParam(ColorMode)
    ctx = click.Context(click.Command("x"))
    items = param.shell_complete(ctx, click.Option(["--color"]), "a")
    assert [item.value for item in items] == ["auto", "always"]


def test_resolve_color_mode_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """Override, then FORCE_COLOR / NO_COLOR, then TTY detection."""
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stream_isatty=False)
    assert not resolve_color_mode(color_mode_override=ColorMode.NEVER, stream_isatty=True)
    assert resolve_color_mode(color_mode_override=None, stream_isatty=True)
    assert not resolve_color_mode(color_mode_override=ColorMode.AUTO, stream_isatty=False)

    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(color_mode_override=None, stream_isatty=True)
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(color_mode_override=None, stream_isatty=True)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=None, stream_isatty=False)
