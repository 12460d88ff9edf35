# topmark:header:start
#
#   project      : Lintframe
#   file         : __init__.py
#   file_relpath : src/lintframe/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of lint messages.

This package turns parsed messages into terminal text: selection and ordering,
per-file grouping, the codeframe and stylish layouts, the truncation notice and
the totals summary.

Public modules:
    - lintframe.rendering.formatter
    - lintframe.rendering.formats
    - lintframe.rendering.palette

"""

from __future__ import annotations
