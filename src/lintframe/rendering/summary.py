# topmark:header:start
#
#   project      : Lintframe
#   file         : summary.py
#   file_relpath : src/lintframe/rendering/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One-line totals printed after the messages of a run."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lintframe.diagnostic.model import DiagnosticStats
    from lintframe.rendering.palette import Palette


def pluralize(count: int, noun: str) -> str:
    """Return ``"1 error"`` / ``"2 errors"`` style counts."""
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def render_totals(stats: DiagnosticStats, palette: Palette) -> list[str]:
    """Render the totals summary for ``stats``.

    Returns:
        list[str]: The verdict line, followed by an ignored-count line when any
            message was ignored.
    """
    if stats.n_error > 0:
        text = f"❌ Validation failed with {pluralize(stats.n_error, 'error')}"
        if stats.n_warning > 0:
            text += f" and {pluralize(stats.n_warning, 'warning')}"
        lines = [palette.style(f"{text}.", fg="red")]
    elif stats.n_warning > 0:
        lines = [
            palette.style(
                f"⚠️ Your document is valid with {pluralize(stats.n_warning, 'warning')}.",
                fg="yellow",
            )
        ]
    else:
        lines = [palette.success("✅ No problems found.")]

    if stats.n_ignored > 0:
        verb = "was" if stats.n_ignored == 1 else "were"
        lines.append(
            palette.muted(f"{pluralize(stats.n_ignored, 'problem')} {verb} explicitly ignored.")
        )
    return lines
