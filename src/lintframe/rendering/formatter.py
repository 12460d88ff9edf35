# topmark:header:start
#
#   project      : Lintframe
#   file         : formatter.py
#   file_relpath : src/lintframe/rendering/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level message formatting.

`render_messages` is pure: it selects the visible messages, renders them in the
requested layout, appends the truncation notice when needed, and returns the
chunks of text. `format_messages` writes those chunks, one per call, to the
diagnostic stream of a console.

When no messages were reported at all, nothing is rendered. When messages were
reported but all of them are ignored, the chosen layout runs on an empty
selection and produces nothing either.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from lintframe.cli_shared.console_std import StdConsole
from lintframe.config.logging import get_logger
from lintframe.constants import DEFAULT_MAX_MESSAGES, MAX_MESSAGES_HINT
from lintframe.rendering.codeframe_view import render_codeframe
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.grouping import group_by_files
from lintframe.rendering.options import RenderOptions
from lintframe.rendering.selection import Selection, select_messages
from lintframe.rendering.stylish_view import render_stylish_group

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike

    from lintframe.cli_shared.console_api import ConsoleLike
    from lintframe.diagnostic.model import Message
    from lintframe.rendering.palette import Palette

logger = get_logger(__name__)


def render_truncation_notice(
    selection: Selection, max_messages: int, palette: Palette
) -> str | None:
    """Return the "more messages hidden" line, or None when nothing was cut off."""
    if not selection.is_truncated(max_messages):
        return None
    hidden = selection.hidden_count(max_messages)
    return f"< ... {hidden} more messages hidden > {palette.muted(MAX_MESSAGES_HINT)}"


def render_messages(
    messages: Sequence[Message],
    options: RenderOptions,
    palette: Palette | None = None,
) -> list[str]:
    """Render ``messages`` according to ``options``.

    Args:
        messages (Sequence[Message]): All reported messages, ignored ones included.
        options (RenderOptions): Layout, cap, working directory and color.
        palette (Palette | None): Color context; derived from ``options`` when None.

    Returns:
        list[str]: Output chunks; each one is written followed by a newline.
    """
    selection = select_messages(messages, options.max_messages)
    if not selection.total_messages:
        return []

    palette = palette or options.palette()
    chunks: list[str] = []

    if options.output_format is OutputFormat.CODEFRAME:
        chunks.extend(render_codeframe(selection.visible, cwd=options.cwd, palette=palette))
    else:
        for group in group_by_files(selection.visible).values():
            chunks.extend(render_stylish_group(group, cwd=options.cwd, palette=palette))

    notice = render_truncation_notice(selection, options.max_messages, palette)
    if notice is not None:
        chunks.append(notice)
    return chunks


def format_messages(
    messages: Sequence[Message],
    *,
    max_messages: int = DEFAULT_MAX_MESSAGES,
    cwd: str | PathLike[str] | None = None,
    output_format: OutputFormat | str = OutputFormat.CODEFRAME,
    color: bool | None = None,
    console: ConsoleLike | None = None,
) -> None:
    """Render ``messages`` and write them to the diagnostic stream.

    Args:
        messages (Sequence[Message]): All reported messages, ignored ones included.
        max_messages (int): Maximum number of messages to show.
        cwd (str | PathLike[str] | None): Directory paths are shown relative to;
            defaults to the current working directory.
        output_format (OutputFormat | str): ``"codeframe"`` or ``"stylish"``.
        color (bool | None): Force colors on or off; None uses the ambient capability.
        console (ConsoleLike | None): Output sink; defaults to a plain stderr console.

    Raises:
        ValueError: If ``max_messages`` or ``output_format`` is invalid.
    """
    options = RenderOptions(
        max_messages=max_messages,
        cwd=os.fspath(cwd) if cwd is not None else os.getcwd(),
        output_format=OutputFormat(output_format),
        color=color,
    )
    write_chunks(render_messages(messages, options), console)


def write_chunks(chunks: Sequence[str], console: ConsoleLike | None = None) -> None:
    """Write each chunk to the diagnostic stream of ``console``."""
    if console is None:
        console = StdConsole()
    for chunk in chunks:
        console.diag(chunk)
    logger.trace("Wrote %d chunk(s) to the diagnostic stream", len(chunks))
