# topmark:header:start
#
#   project      : Lintframe
#   file         : __init__.py
#   file_relpath : src/lintframe/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic message model and report loading.

Design:
    - Messages are immutable `Message` instances produced upstream.
    - Locations are either structural (`StructuralLocation`) or resolved
      (`LineColLocation`); only the normalizer in
      [`lintframe.codeframe.locations`][lintframe.codeframe.locations]
      converts between them.
    - Reports are read from JSON via [`lintframe.diagnostic.io`][lintframe.diagnostic.io].
"""

from __future__ import annotations

from lintframe.diagnostic.io import (
    ReportFormatError,
    load_report,
    parse_report,
    parse_report_text,
)
from lintframe.diagnostic.model import (
    DiagnosticStats,
    LineCol,
    LineColLocation,
    Location,
    Message,
    ResolvedMessage,
    Severity,
    Source,
    StructuralLocation,
    compare_severity,
    compute_diagnostic_stats,
    severity_sort_key,
)

__all__ = [
    "DiagnosticStats",
    "LineCol",
    "LineColLocation",
    "Location",
    "Message",
    "ReportFormatError",
    "ResolvedMessage",
    "Severity",
    "Source",
    "StructuralLocation",
    "compare_severity",
    "compute_diagnostic_stats",
    "load_report",
    "parse_report",
    "parse_report_text",
    "severity_sort_key",
]
