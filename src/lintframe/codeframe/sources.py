# topmark:header:start
#
#   project      : Lintframe
#   file         : sources.py
#   file_relpath : src/lintframe/codeframe/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Access to the text of linted documents.

Sources may carry their text in memory (`Source.body`); otherwise the text is
read from disk once per path and cached for the lifetime of the process. The
renderers only read documents, so the cache never needs invalidation within a
run; tests call `clear_source_cache()` between cases.
"""

from __future__ import annotations

import functools
from pathlib import Path
from typing import TYPE_CHECKING

from lintframe.config.logging import get_logger

if TYPE_CHECKING:
    from lintframe.diagnostic.model import Source

logger = get_logger(__name__)


@functools.lru_cache(maxsize=256)
def _read_text(absolute_ref: str) -> str:
    logger.trace("Reading source text from %s", absolute_ref)
    return Path(absolute_ref).read_text(encoding="utf-8")


def source_text(source: Source) -> str:
    """Return the full text of ``source``.

    Raises:
        OSError: If the document must be read from disk and cannot be.
        UnicodeDecodeError: If the document is not valid UTF-8.
    """
    if source.body is not None:
        return source.body
    return _read_text(source.absolute_ref)


def source_lines(source: Source) -> list[str]:
    """Return the lines of ``source`` without line terminators.

    Raises:
        OSError: If the document must be read from disk and cannot be.
        UnicodeDecodeError: If the document is not valid UTF-8.
    """
    return source_text(source).splitlines()


def clear_source_cache() -> None:
    """Forget every document text read from disk."""
    _read_text.cache_clear()
