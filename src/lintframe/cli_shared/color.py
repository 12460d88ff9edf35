# topmark:header:start
#
#   project      : Lintframe
#   file         : color.py
#   file_relpath : src/lintframe/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for Lintframe.

This module provides:

- the `ColorMode` enum parsed from ``--color=auto|always|never`` and from the
  ``color`` key of the configuration file;
- `resolve_color_mode`, which turns the user's intent, the environment and the
  terminal capability into a final on/off decision.

The helpers are kept free of Click so that the Python API
([`lintframe.format_messages`][lintframe.format_messages]) can resolve the
ambient color capability without a CLI context.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TextIO

from lintframe.config.logging import get_logger

logger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when the output stream is a TTY.
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stream_isatty: bool | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to ``"0"``) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: whether the output stream is a TTY.

    Args:
        color_mode_override: Parsed `ColorMode`; `None` means "not provided".
        stream_isatty: Optional override for TTY detection.
        stream: Stream probed when ``stream_isatty`` is None. Defaults to
            ``sys.stderr``, where diagnostics are written.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, stream_isatty=False)
        True
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stream_isatty is None:
        probe = stream or sys.stderr
        try:
            stream_isatty = probe.isatty()
        except (AttributeError, ValueError, OSError):
            stream_isatty = False
    logger.trace("Color auto-detection: isatty=%s", stream_isatty)
    return bool(stream_isatty)
