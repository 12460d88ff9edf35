# topmark:header:start
#
#   project      : Lintframe
#   file         : stylish_view.py
#   file_relpath : src/lintframe/rendering/stylish_view.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compact "stylish" layout: one aligned line per message, grouped by file.

```text
openapi.yaml:
  5:5     operation-operationId Operation must have an operationId.
  12:11   no-unused-components  Component is never used.

```

Only the primary location of each message is shown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lintframe.utils.file import compute_relpath

if TYPE_CHECKING:
    from lintframe.diagnostic.model import ResolvedMessage
    from lintframe.rendering.grouping import FileGroup
    from lintframe.rendering.palette import Palette


def render_stylish_line(
    resolved: ResolvedMessage,
    *,
    location_pad: int,
    rule_id_pad: int,
    palette: Palette,
) -> str:
    """Render one message line, padding the position and rule id columns."""
    message = resolved.message
    position = resolved.primary.position.ljust(location_pad + 2)
    rule_id = palette.severity_fg(message.severity, message.rule_id.ljust(rule_id_pad))
    return f"  {position} {rule_id} {message.message}"


def render_stylish_group(group: FileGroup, *, cwd: str, palette: Palette) -> list[str]:
    """Render a file group: the path header, one line per message, a blank line."""
    lines = [f"{palette.accent(compute_relpath(group.path, cwd))}:"]
    lines.extend(
        render_stylish_line(
            resolved,
            location_pad=group.location_pad,
            rule_id_pad=group.rule_id_pad,
            palette=palette,
        )
        for resolved in group.messages
    )
    lines.append("")
    return lines
