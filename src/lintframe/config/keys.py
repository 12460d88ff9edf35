# topmark:header:start
#
#   project      : Lintframe
#   file         : keys.py
#   file_relpath : src/lintframe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Lintframe configuration.

These names form the external configuration schema as it appears in
``lintframe.toml`` and in ``[tool.lintframe]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Lintframe configuration."""

    # pyproject.toml nesting: [tool.lintframe]
    SECTION_TOOL: Final[str] = "tool"
    TOOL_NAME: Final[str] = "lintframe"

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_MAX_MESSAGES: Final[str] = "max_messages"
    KEY_FORMAT: Final[str] = "format"
    KEY_COLOR: Final[str] = "color"
