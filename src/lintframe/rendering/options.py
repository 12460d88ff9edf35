# topmark:header:start
#
#   project      : Lintframe
#   file         : options.py
#   file_relpath : src/lintframe/rendering/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options controlling a single render call."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from lintframe.cli_shared.color import resolve_color_mode
from lintframe.constants import DEFAULT_MAX_MESSAGES
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.palette import Palette


@dataclass(frozen=True)
class RenderOptions:
    """Immutable render options.

    Attributes:
        max_messages (int): Maximum number of messages to show (must be >= 1).
        cwd (str): Directory file paths are shown relative to.
        output_format (OutputFormat): Layout to render (string values are accepted).
        color (bool | None): Force colors on or off; None uses the ambient capability.

    Raises:
        ValueError: If ``max_messages`` is not a positive integer or the output
            format is unknown.
    """

    max_messages: int = DEFAULT_MAX_MESSAGES
    cwd: str = field(default_factory=os.getcwd)
    output_format: OutputFormat = OutputFormat.CODEFRAME
    color: bool | None = None

    def __post_init__(self) -> None:
        if (
            isinstance(self.max_messages, bool)
            or not isinstance(self.max_messages, int)
            or self.max_messages < 1
        ):
            raise ValueError(f"max_messages must be a positive integer, got {self.max_messages!r}")
        if not isinstance(self.output_format, OutputFormat):
            # Frozen dataclass: normalize through object.__setattr__.
            object.__setattr__(self, "output_format", OutputFormat(self.output_format))
        object.__setattr__(self, "cwd", os.fspath(self.cwd))

    def palette(self) -> Palette:
        """Return the color context for this render call."""
        enabled = self.color
        if enabled is None:
            enabled = resolve_color_mode(color_mode_override=None)
        return Palette(enabled=enabled)
