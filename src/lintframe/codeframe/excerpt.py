# topmark:header:start
#
#   project      : Lintframe
#   file         : excerpt.py
#   file_relpath : src/lintframe/codeframe/excerpt.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source excerpts ("codeframes") for resolved locations.

A codeframe shows a few lines of context before the reported line, the reported
lines themselves, and a marker row pointing at the reported columns:

```text
 3 | paths:
 4 |   /pets:
 5 |     get:
   |     ^^^
```

Line numbers are drawn in a muted color and the marker in the error color when
coloring is enabled. Extraction never raises: unreadable sources and positions
outside the document produce an empty string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from lintframe.codeframe.sources import source_lines
from lintframe.config.logging import get_logger
from lintframe.rendering.palette import Palette

if TYPE_CHECKING:
    from lintframe.diagnostic.model import LineColLocation

logger = get_logger(__name__)

#: Lines of context shown before the first reported line.
CONTEXT_LINES_BEFORE: Final[int] = 2

#: Maximum number of reported lines shown for a multi-line range.
MAX_HIGHLIGHTED_LINES: Final[int] = 5


def get_codeframe(location: LineColLocation, color: bool) -> str:
    """Return a printable excerpt of the source around ``location``.

    Args:
        location (LineColLocation): The resolved location to show.
        color (bool): Whether to apply ANSI styles.

    Returns:
        str: The excerpt (lines joined by ``\\n``, no trailing newline), or ``""``
            when the source is unavailable or the position is out of range.
    """
    try:
        lines = source_lines(location.source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No codeframe for %s: %s", location.source.absolute_ref, exc)
        return ""

    start = location.start
    if not lines or start.line < 1 or start.line > len(lines):
        return ""

    end = location.end if location.end is not None else start
    last_line = min(max(end.line, start.line), len(lines), start.line + MAX_HIGHLIGHTED_LINES - 1)
    first_line = max(1, start.line - CONTEXT_LINES_BEFORE)

    palette = Palette(enabled=color)
    gutter_width = len(str(last_line))

    out: list[str] = []
    for lineno in range(first_line, last_line + 1):
        gutter = palette.muted(f" {str(lineno).rjust(gutter_width)} |")
        text = lines[lineno - 1]
        out.append(f"{gutter} {text}" if text else gutter)
        if lineno == start.line:
            blank_gutter = palette.muted(f" {' ' * gutter_width} |")
            out.append(f"{blank_gutter} {palette.marker(_marker(text, start.col, location))}")
    return "\n".join(out)


def _marker(text: str, start_col: int, location: LineColLocation) -> str:
    """Return the ``^`` marker row for the start line of ``location``."""
    col = min(max(start_col, 1), len(text) + 1)
    end = location.end
    if end is None:
        width = 1
    elif end.line == location.start.line:
        width = max(end.col - col, 1)
    else:
        width = max(len(text) - col + 1, 1)
    return " " * (col - 1) + "^" * width
