# topmark:header:start
#
#   project      : Lintframe
#   file         : codeframe_view.py
#   file_relpath : src/lintframe/rendering/codeframe_view.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Verbose "codeframe" layout: one standalone block per message.

A block looks like this (colors omitted):

```text
[1] openapi.yaml:5:5 at #/paths/~1pets/get

Operation must have an operationId.

Did you mean: listPets ?

 3 | paths:
 4 |   /pets:
 5 |     get:
   |     ^^^

referenced from root.yaml:2:3

Warning was generated by the operation-operationId rule.

```

Messages in this layout are not grouped by file; they keep the severity order
established by selection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintframe.codeframe.excerpt import get_codeframe
from lintframe.codeframe.locations import resolve_location
from lintframe.constants import MAX_SUGGEST
from lintframe.utils.file import compute_relpath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintframe.diagnostic.model import LineColLocation, Location, Message
    from lintframe.rendering.palette import Palette


def format_did_you_mean(suggest: Sequence[str]) -> str:
    """Render the "did you mean" block for ``suggest``.

    No suggestion renders nothing, a single one renders inline, and two or more
    render as a bulleted list of at most ``MAX_SUGGEST`` entries.
    """
    if not suggest:
        return ""
    if len(suggest) == 1:
        return f"Did you mean: {suggest[0]} ?\n\n"
    bullets = "\n  - ".join(suggest[:MAX_SUGGEST])
    return f"Did you mean:\n  - {bullets}\n\n"


def file_with_position(location: LineColLocation, cwd: str) -> str:
    """Return ``relative/path:line:col`` for ``location``."""
    relative_path = compute_relpath(location.source.absolute_ref, cwd)
    return f"{relative_path}:{location.start.line}:{location.start.col}"


def format_from(from_location: Location | None, cwd: str, palette: Palette) -> str:
    """Render the "referenced from" note, or nothing without a provenance location."""
    if from_location is None:
        return ""
    loc = resolve_location(from_location)
    return f"referenced from {palette.accent(file_with_position(loc, cwd))}\n\n"


def render_codeframe_message(
    message: Message,
    index: int,
    *,
    cwd: str,
    palette: Palette,
) -> str:
    """Render one message in the codeframe layout.

    Args:
        message (Message): The message to render.
        index (int): Zero-based position of the message in the visible list.
        cwd (str): Directory paths are shown relative to.
        palette (Palette): Color context.

    Returns:
        str: The rendered block (without the newline added by the output sink).
    """
    loc = resolve_location(message.primary_location)
    pointer = loc.pointer
    at_pointer = palette.muted(f"at {pointer}") if pointer else ""
    header = palette.severity_bg(message.severity, file_with_position(loc, cwd))

    return (
        f"[{index + 1}] {header} {at_pointer}\n\n"
        f"{message.message}\n\n"
        + format_did_you_mean(message.suggest)
        + get_codeframe(loc, palette.enabled)
        + "\n\n"
        + format_from(message.from_location, cwd, palette)
        + f"{message.severity.label} was generated by the "
        f"{palette.accent(message.rule_id)} rule.\n\n"
    )


def render_codeframe(
    messages: Sequence[Message],
    *,
    cwd: str,
    palette: Palette,
) -> list[str]:
    """Render every message as a standalone codeframe block, in order."""
    return [
        render_codeframe_message(message, idx, cwd=cwd, palette=palette)
        for idx, message in enumerate(messages)
    ]

