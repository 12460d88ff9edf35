# topmark:header:start
#
#   project      : Lintframe
#   file         : console_api.py
#   file_relpath : src/lintframe/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by the renderers and CLI commands
to emit user-facing output, separate from internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console.

    Implementations may use Click or plain stdlib streams. Rendered diagnostics
    go to the diagnostic (stderr) stream through `diag`.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def diag(self, text: str = "", *, nl: bool = True) -> None:
        """Write rendered diagnostics to stderr, unstyled."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
