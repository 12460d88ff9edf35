# topmark:header:start
#
#   project      : Lintframe
#   file         : version.py
#   file_relpath : src/lintframe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe `version` command.

Prints the current Lintframe version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from lintframe.constants import LINTFRAME_VERSION

if TYPE_CHECKING:
    from lintframe.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Lintframe.",
)
def version_command() -> None:
    """Show the current version of Lintframe."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(console.styled("Lintframe version:", bold=True, underline=True))
        console.print(f"    {console.styled(LINTFRAME_VERSION, bold=True)}")
    else:
        console.print(console.styled(LINTFRAME_VERSION, bold=True))
