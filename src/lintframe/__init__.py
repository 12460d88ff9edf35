# topmark:header:start
#
#   project      : Lintframe
#   file         : __init__.py
#   file_relpath : src/lintframe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe package.

Lintframe renders the messages of a lint report for a terminal: it drops ignored
messages, puts errors before warnings, caps the output, and prints each message
either as a codeframe (header, message, highlighted source excerpt) or grouped
per file in a compact stylish table.

Example:
    ```python
    from lintframe import format_messages, load_report

    format_messages(load_report("report.json"), output_format="stylish")
    ```
"""

from __future__ import annotations

from lintframe.codeframe.excerpt import get_codeframe
from lintframe.codeframe.locations import get_line_col_location
from lintframe.diagnostic.io import load_report
from lintframe.diagnostic.model import (
    LineCol,
    LineColLocation,
    Location,
    Message,
    Severity,
    Source,
    StructuralLocation,
)
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.formatter import format_messages, render_messages
from lintframe.rendering.grouping import group_by_files
from lintframe.rendering.options import RenderOptions
from lintframe.rendering.palette import Palette
from lintframe.rendering.selection import select_messages

__all__ = [
    "LineCol",
    "LineColLocation",
    "Location",
    "Message",
    "OutputFormat",
    "Palette",
    "RenderOptions",
    "Severity",
    "Source",
    "StructuralLocation",
    "format_messages",
    "get_codeframe",
    "get_line_col_location",
    "group_by_files",
    "load_report",
    "render_messages",
    "select_messages",
]
