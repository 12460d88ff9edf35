# topmark:header:start
#
#   project      : Lintframe
#   file         : __init__.py
#   file_relpath : src/lintframe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Lintframe.

Settings come from ``lintframe.toml`` or the ``[tool.lintframe]`` table of
``pyproject.toml``, are overridden by the environment and finally by CLI options.
Logging setup for the whole package also lives here.
"""

from __future__ import annotations
