# topmark:header:start
#
#   project      : Lintframe
#   file         : errors.py
#   file_relpath : src/lintframe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Lintframe CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from lintframe.cli_shared.exit_codes import ExitCode


class LintframeError(click.ClickException):
    """Base class for all Lintframe CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class LintframeUsageError(LintframeError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LintframeDataError(LintframeError):
    """Error for reports that are not valid JSON or miss required fields."""

    exit_code = ExitCode.DATA_ERROR


class LintframeFileNotFoundError(LintframeError):
    """Error when the report path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LintframeIOError(LintframeError):
    """Error for I/O errors reading the report."""

    exit_code = ExitCode.IO_ERROR


class LintframeConfigError(LintframeError):
    """Error for configuration errors (invalid values in files or environment)."""

    exit_code = ExitCode.CONFIG_ERROR
