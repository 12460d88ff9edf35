# topmark:header:start
#
#   project      : Lintframe
#   file         : loaders.py
#   file_relpath : src/lintframe/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module reads Lintframe configuration from on-disk TOML files
(``lintframe.toml`` / ``pyproject.toml``) and locates the file that applies to a
working directory. Parsing is done with `tomlkit` and returned as plain `dict`
structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from lintframe.config.keys import Toml
from lintframe.config.logging import get_logger
from lintframe.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

logger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (``lintframe.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_lintframe_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the Lintframe table of a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.lintframe]`` (None when absent); for
    any other file it is the document root.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table = cast("dict[str, Any]", tool).get(Toml.TOOL_NAME)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the configuration file that applies to ``start``.

    Walks from ``start`` up to the filesystem root. In each directory,
    ``lintframe.toml`` wins over a ``pyproject.toml`` that contains a
    ``[tool.lintframe]`` table.

    Returns:
        The first matching file, or None.
    """
    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            logger.debug("Using config file %s", candidate)
            return candidate
        pyproject = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_lintframe_table(load_toml_dict(pyproject), pyproject):
            logger.debug("Using [tool.lintframe] from %s", pyproject)
            return pyproject
    logger.trace("No config file found from %s upwards", start)
    return None
