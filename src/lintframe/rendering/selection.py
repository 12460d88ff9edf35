# topmark:header:start
#
#   project      : Lintframe
#   file         : selection.py
#   file_relpath : src/lintframe/rendering/selection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Select the messages that will be shown.

Selection happens in a fixed order so that the reported counts stay consistent:

1. count every message (``total_messages``);
2. drop ignored messages (``ignored_messages`` is the number dropped);
3. stable-sort the remainder by severity, errors first;
4. keep the first ``max_messages``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from lintframe.config.logging import get_logger
from lintframe.diagnostic.model import severity_sort_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from lintframe.diagnostic.model import Message

logger = get_logger(__name__)


@dataclass(frozen=True)
class Selection:
    """The visible messages and the counts needed for the truncation notice."""

    visible: tuple[Message, ...]
    total_messages: int
    ignored_messages: int

    @property
    def shown_before_truncation(self) -> int:
        """Number of non-ignored messages, before the ``max_messages`` cap."""
        return self.total_messages - self.ignored_messages

    def is_truncated(self, max_messages: int) -> bool:
        """Return True when more non-ignored messages exist than ``max_messages``."""
        return self.shown_before_truncation > max_messages

    def hidden_count(self, max_messages: int) -> int:
        """Return the hidden-message count reported by the truncation notice.

        The count is taken from the unfiltered total, so ignored messages are
        included in it.
        """
        return self.total_messages - max_messages


def select_messages(messages: Sequence[Message], max_messages: int) -> Selection:
    """Filter, sort and truncate ``messages``.

    Args:
        messages (Sequence[Message]): All messages reported upstream.
        max_messages (int): Maximum number of visible messages.

    Returns:
        Selection: The visible subset with total and ignored counts.
    """
    total_messages = len(messages)
    remaining = [m for m in messages if not m.ignored]
    ignored_messages = total_messages - len(remaining)

    # sorted() is stable: equal severities keep their input order.
    remaining.sort(key=lambda m: severity_sort_key(m.severity))
    visible = tuple(remaining[:max_messages])

    logger.debug(
        "Selected %d of %d message(s) (%d ignored)",
        len(visible),
        total_messages,
        ignored_messages,
    )
    return Selection(
        visible=visible,
        total_messages=total_messages,
        ignored_messages=ignored_messages,
    )
