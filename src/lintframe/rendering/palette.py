# topmark:header:start
#
#   project      : Lintframe
#   file         : palette.py
#   file_relpath : src/lintframe/rendering/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Explicit color context for human-facing rendering.

A `Palette` maps the semantic color roles used by the renderers (severity
background, severity foreground, muted, accent, marker) to ANSI styles. It is
passed to every render function instead of toggling a process-wide color flag,
so forcing colors on for one render never affects later output.

Styles are produced with `click.style`, which always emits ANSI sequences; a
disabled palette returns text unchanged.

Example:
    ```python
    palette = Palette(enabled=True)
    palette.accent("no-unused-components")  # blue text
    Palette(enabled=False).accent("x")      # "x"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

import click

from lintframe.diagnostic.model import Severity

_SEVERITY_BG: Final[dict[Severity, str]] = {
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
}

_SEVERITY_FG: Final[dict[Severity, str]] = {
    Severity.WARN: "yellow",
    Severity.ERROR: "red",
}


@dataclass(frozen=True)
class Palette:
    """Semantic color roles, enabled or disabled as a whole.

    Attributes:
        enabled (bool): Whether to emit ANSI styles.
    """

    enabled: bool = False

    def style(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with ``click.style`` (unchanged when disabled)."""
        if not self.enabled:
            return text
        return click.style(text, **style_kwargs)

    def severity_bg(self, severity: Severity, text: str) -> str:
        """Highlight ``text`` with the background color of ``severity``."""
        return self.style(text, bg=_SEVERITY_BG[severity])

    def severity_fg(self, severity: Severity, text: str) -> str:
        """Color ``text`` with the foreground color of ``severity``."""
        return self.style(text, fg=_SEVERITY_FG[severity])

    def muted(self, text: str) -> str:
        """Gray text for hints and secondary information."""
        return self.style(text, fg="bright_black")

    def accent(self, text: str) -> str:
        """Blue text for file paths and rule identifiers."""
        return self.style(text, fg="blue")

    def marker(self, text: str) -> str:
        """Red text for codeframe column markers."""
        return self.style(text, fg="red")

    def success(self, text: str) -> str:
        """Green text for positive summaries."""
        return self.style(text, fg="green")
