# topmark:header:start
#
#   project      : Lintframe
#   file         : constants.py
#   file_relpath : src/lintframe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    LINTFRAME_VERSION: str = get_version("lintframe")
except PackageNotFoundError:  # running from a source checkout
    LINTFRAME_VERSION = "0.0.0"

#: Default cap on the number of rendered messages.
DEFAULT_MAX_MESSAGES: Final[int] = 100

#: Maximum number of "did you mean" suggestions shown for one message.
MAX_SUGGEST: Final[int] = 5

#: Name of the standalone configuration file.
CONFIG_FILE_NAME: Final[str] = "lintframe.toml"

#: Name of the project file that may carry a ``[tool.lintframe]`` table.
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

#: Environment variable overriding the configured ``max_messages``.
MAX_MESSAGES_ENV_VAR: Final[str] = "LINTFRAME_MAX_MESSAGES"

#: Hint appended to the truncation notice.
MAX_MESSAGES_HINT: Final[str] = "increase with `--max-messages N`"
