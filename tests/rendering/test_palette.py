# topmark:header:start
#
#   project      : Lintframe
#   file         : test_palette.py
#   file_relpath : tests/rendering/test_palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the color palette and render options."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from lintframe.diagnostic.model import Severity
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.options import RenderOptions
from lintframe.rendering.palette import Palette


def test_disabled_palette_returns_text_unchanged() -> None:
    """Every role is a no-op when colors are disabled."""
    palette = Palette(enabled=False)
    for role in (palette.muted, palette.accent, palette.marker, palette.success):
        assert role("x") == "x"
    assert palette.severity_bg(Severity.ERROR, "x") == "x"
    assert palette.severity_fg(Severity.WARN, "x") == "x"


def test_enabled_palette_roles() -> None:
    """Semantic roles map to fixed click styles."""
    palette = Palette(enabled=True)
    assert palette.severity_bg(Severity.WARN, "x") == click.style("x", bg="yellow")
    assert palette.severity_bg(Severity.ERROR, "x") == click.style("x", bg="red")
    assert palette.severity_fg(Severity.WARN, "x") == click.style("x", fg="yellow")
    assert palette.severity_fg(Severity.ERROR, "x") == click.style("x", fg="red")
    assert palette.muted("x") == click.style("x", fg="bright_black")
    assert palette.accent("x") == click.style("x", fg="blue")
    assert palette.marker("^") == click.style("^", fg="red")


def test_render_options_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Defaults: 100 messages, codeframe, the current directory, ambient colors."""
    monkeypatch.setenv("NO_COLOR", "1")
    options = RenderOptions()
    assert options.max_messages == 100
    assert options.output_format is OutputFormat.CODEFRAME
    assert options.color is None
    assert options.palette() == Palette(enabled=False)


def test_render_options_normalize_values() -> None:
    """String formats and path-like working directories are normalized."""
    options = RenderOptions(cwd=Path("/tmp"), output_format="stylish")  # type: ignore[arg-type]
    assert options.output_format is OutputFormat.STYLISH
    assert options.cwd == "/tmp"


def test_ambient_color_can_be_forced(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR turns on colors when the caller leaves ``color`` unset."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert RenderOptions().palette().enabled is True
    assert RenderOptions(color=False).palette().enabled is False
