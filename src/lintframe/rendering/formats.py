# topmark:header:start
#
#   project      : Lintframe
#   file         : formats.py
#   file_relpath : src/lintframe/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines the available message output layouts."""

from enum import Enum


class OutputFormat(str, Enum):
    """Message output layouts.

    Attributes:
        CODEFRAME: One verbose block per message with a source excerpt.
        STYLISH: Compact, one aligned line per message, grouped by file.
    """

    CODEFRAME = "codeframe"
    STYLISH = "stylish"
