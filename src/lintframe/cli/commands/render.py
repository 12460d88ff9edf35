# topmark:header:start
#
#   project      : Lintframe
#   file         : render.py
#   file_relpath : src/lintframe/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe `render` command.

Reads a JSON lint report (or STDIN with ``-``), renders its messages to STDERR in
the codeframe or stylish layout, and prints a totals summary.

Exit codes:
    SUCCESS: no non-ignored error-severity message.
    FAILURE: at least one non-ignored error-severity message.
    DATA_ERROR / FILE_NOT_FOUND / IO_ERROR: the report could not be loaded.
    CONFIG_ERROR: the configuration file or environment holds an invalid value.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import click

from lintframe.cli.cli_types import EnumChoiceParam
from lintframe.cli.console import ClickConsole
from lintframe.cli.errors import (
    LintframeConfigError,
    LintframeDataError,
    LintframeFileNotFoundError,
    LintframeIOError,
)
from lintframe.cli_shared.color import ColorMode, resolve_color_mode
from lintframe.cli_shared.exit_codes import ExitCode
from lintframe.config.logging import get_logger
from lintframe.config.model import ConfigValueError, load_config
from lintframe.diagnostic.io import ReportFormatError, load_report, parse_report_text
from lintframe.diagnostic.model import compute_diagnostic_stats
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.formatter import render_messages, write_chunks
from lintframe.rendering.palette import Palette
from lintframe.rendering.summary import render_totals

if TYPE_CHECKING:
    from lintframe.cli_shared.console_api import ConsoleLike
    from lintframe.diagnostic.model import Message

logger = get_logger(__name__)


def read_messages(report: str) -> list[Message]:
    """Load the messages of ``report`` (a path, or ``-`` for STDIN).

    Raises:
        LintframeFileNotFoundError: If the report file does not exist.
        LintframeIOError: If the report cannot be read.
        LintframeDataError: If the report is not a valid JSON report.
    """
    try:
        if report == "-":
            text = click.get_text_stream("stdin").read()
            return parse_report_text(text, base_dir=Path.cwd())
        path = Path(report)
        if not path.is_file():
            raise LintframeFileNotFoundError(f"Report not found: {report}")
        return load_report(path)
    except ReportFormatError as exc:
        raise LintframeDataError(f"{report}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise LintframeDataError(f"{report}: not valid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise LintframeIOError(f"Cannot read {report}: {exc}") from exc


@click.command(
    name="render",
    help="Render the messages of a JSON lint REPORT (use '-' for STDIN).",
)
@click.argument("report", type=str)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output layout ({', '.join(v.value for v in OutputFormat)}). Default: codeframe.",
)
@click.option(
    "--max-messages",
    "max_messages",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of messages to show. Default: 100.",
)
@click.option(
    "--cwd",
    "cwd",
    type=click.Path(file_okay=False),
    default=None,
    help="Show file paths relative to this directory (default: current directory).",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(
        exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path
    ),
    default=None,
    help="Read settings from this TOML file instead of discovering one.",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    help="Ignore lintframe.toml and [tool.lintframe] in pyproject.toml.",
)
@click.option(
    "--summary/--no-summary",
    "summary",
    default=True,
    help="Print the totals summary after the messages.",
)
def render_command(
    *,
    report: str,
    output_format: OutputFormat | None,
    max_messages: int | None,
    cwd: str | None,
    config_file: Path | None,
    no_config: bool,
    summary: bool,
) -> None:
    """Render the messages of a JSON lint report."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    verbosity: int = ctx.obj.get("verbosity_level", logging.WARNING)

    base_dir = os.path.abspath(cwd) if cwd else os.getcwd()
    try:
        config = load_config(
            cwd=Path(base_dir), config_file=config_file, no_config=no_config
        ).merged_with(
            max_messages=max_messages,
            output_format=output_format,
            color_mode=ctx.obj.get("color_mode"),
        )
    except ConfigValueError as exc:
        raise LintframeConfigError(str(exc)) from exc

    enable_color = resolve_color_mode(
        color_mode_override=None if config.color_mode == ColorMode.AUTO else config.color_mode
    )
    console: ConsoleLike = ctx.obj.get("console") or ClickConsole(enable_color=enable_color)
    if getattr(console, "enable_color", None) != enable_color:
        console = ClickConsole(enable_color=enable_color)
        ctx.obj["console"] = console

    if verbosity <= logging.INFO and config.config_file is not None:
        console.print(f"Using configuration from {config.config_file}")

    messages = read_messages(report)
    options = config.to_render_options(cwd=base_dir, color=enable_color)
    write_chunks(render_messages(messages, options, Palette(enabled=enable_color)), console)

    stats = compute_diagnostic_stats(messages)
    if summary and verbosity <= logging.WARNING:
        for line in render_totals(stats, Palette(enabled=enable_color)):
            console.diag(line)

    logger.debug(
        "Rendered report %s: %d error(s), %d warning(s), %d ignored",
        report,
        stats.n_error,
        stats.n_warning,
        stats.n_ignored,
    )
    if stats.n_error > 0:
        ctx.exit(ExitCode.FAILURE)
