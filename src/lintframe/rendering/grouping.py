# topmark:header:start
#
#   project      : Lintframe
#   file         : grouping.py
#   file_relpath : src/lintframe/rendering/grouping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group messages by the file of their primary location.

Each group also records the column widths needed to align the stylish layout:
``rule_id_pad`` is the longest rule identifier in the group and
``location_pad`` the longest ``line:col`` string across *all* resolved
locations of the group's messages (secondary ones included).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lintframe.codeframe.locations import resolve_location
from lintframe.diagnostic.model import LineColLocation, Location, ResolvedMessage

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lintframe.diagnostic.model import Message

Resolver = Callable[[Location], LineColLocation]


@dataclass
class FileGroup:
    """Messages of one file, in input order, with alignment widths."""

    path: str
    messages: list[ResolvedMessage] = field(default_factory=lambda: [])
    rule_id_pad: int = 0
    location_pad: int = 0

    def add(self, resolved: ResolvedMessage) -> None:
        """Append ``resolved`` and widen the alignment columns as needed."""
        self.messages.append(resolved)
        self.rule_id_pad = max(self.rule_id_pad, len(resolved.message.rule_id))
        self.location_pad = max(
            self.location_pad, *(len(loc.position) for loc in resolved.locations)
        )


def resolve_message(message: Message, resolve: Resolver = resolve_location) -> ResolvedMessage:
    """Return ``message`` with its locations normalized to line/col form."""
    secondary = message.secondary_location
    return ResolvedMessage(
        message=message,
        primary=resolve(message.primary_location),
        secondary=resolve(secondary) if secondary is not None else None,
    )


def group_by_files(
    messages: Iterable[Message],
    resolve: Resolver = resolve_location,
) -> dict[str, FileGroup]:
    """Partition ``messages`` by the absolute path of their primary location.

    Args:
        messages (Iterable[Message]): Messages, already in display order.
        resolve (Resolver): Location normalizer.

    Returns:
        dict[str, FileGroup]: Groups keyed by path, in first-seen order.
    """
    groups: dict[str, FileGroup] = {}
    for message in messages:
        path = message.file
        group = groups.get(path)
        if group is None:
            group = groups[path] = FileGroup(path=path)
        group.add(resolve_message(message, resolve))
    return groups
