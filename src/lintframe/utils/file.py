# topmark:header:start
#
#   project      : Lintframe
#   file         : file.py
#   file_relpath : src/lintframe/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Path utilities for Lintframe."""

import os

from lintframe.config.logging import get_logger

logger = get_logger(__name__)


def compute_relpath(file_ref: str, root: str) -> str:
    """Compute the path of ``file_ref`` relative to ``root``.

    Paths are compared lexically (symlinks are not resolved) so the result matches
    what the user passed in. Paths outside ``root`` are expressed with ``..``
    segments.

    Args:
        file_ref (str): Absolute path of the file.
        root (str): Directory to make the path relative to.

    Returns:
        str: The relative path, or ``file_ref`` unchanged when no relative path
            exists (e.g. different drives on Windows).
    """
    try:
        return os.path.relpath(file_ref, start=root)
    except ValueError:
        logger.debug("No relative path from %s to %s", root, file_ref)
        return file_ref
