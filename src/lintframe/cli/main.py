# topmark:header:start
#
#   project      : Lintframe
#   file         : main.py
#   file_relpath : src/lintframe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe command-line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console used for program output; subcommands
read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from lintframe.cli.commands.render import render_command
from lintframe.cli.commands.version import version_command
from lintframe.cli.console import ClickConsole
from lintframe.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from lintframe.cli_shared.color import ColorMode, resolve_color_mode
from lintframe.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from lintframe.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    # None means "not given on the command line": the config file may still decide.
    cli_color_mode = ColorMode.NEVER if no_color else color_mode
    ctx.obj["color_mode"] = cli_color_mode

    enable_color = resolve_color_mode(color_mode_override=cli_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render lint diagnostics as codeframes or compact per-file listings.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Lintframe CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'lintframe render REPORT.json' to render a lint report.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
