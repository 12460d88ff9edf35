# topmark:header:start
#
#   project      : Lintframe
#   file         : model.py
#   file_relpath : src/lintframe/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types for Lintframe.

This module defines the immutable data model consumed by the renderers. Messages
are produced upstream (by a validator or linter) and are only ever read here;
derived, resolved copies are built by the grouping and rendering layers.

Sections:
    * Severity: ordered two-level severity with rank and display label.
    * LineCol / Source: positions and the documents they point into.
    * StructuralLocation / LineColLocation: the two location variants.
    * Message: one reported problem with explicit primary/secondary locations.
    * ResolvedMessage: a message whose locations were normalized to line/col form.
    * DiagnosticStats: per-run counts by severity, plus ignored messages.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from lintframe.config.logging import get_logger

logger = get_logger(__name__)


class Severity(str, Enum):
    """Severity of a diagnostic message.

    Members are ordered by importance: ``ERROR`` ranks before ``WARN``.
    Use [`severity_sort_key`][lintframe.diagnostic.model.severity_sort_key] as a
    sort key or [`compare_severity`][lintframe.diagnostic.model.compare_severity]
    for a three-way comparison.
    """

    ERROR = "error"
    WARN = "warn"

    @property
    def rank(self) -> int:
        """Return the sort rank of this severity (lower sorts first)."""
        return 1 if self is Severity.ERROR else 2

    @property
    def label(self) -> str:
        """Return the human-readable name used in attribution lines."""
        return "Error" if self is Severity.ERROR else "Warning"

    @classmethod
    def parse(cls, raw: str) -> Severity:
        """Parse a severity token.

        Accepts ``"error"``, ``"warn"`` and ``"warning"`` (case-insensitive).

        Args:
            raw (str): The token to parse.

        Returns:
            Severity: The matching member.

        Raises:
            ValueError: If the token is not a known severity.
        """
        token = raw.strip().lower()
        if token == "warning":
            token = cls.WARN.value
        return cls(token)


def severity_sort_key(severity: Severity) -> int:
    """Return the ascending sort key for ``severity`` (errors first)."""
    return severity.rank


def compare_severity(a: Severity, b: Severity) -> int:
    """Three-way comparison of two severities.

    Returns:
        int: Negative if ``a`` sorts before ``b``, zero if equal, positive otherwise.
    """
    return a.rank - b.rank


@dataclass(frozen=True)
class LineCol:
    """A 1-based line/column position."""

    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass(frozen=True)
class Source:
    """A document that locations point into.

    Attributes:
        absolute_ref (str): Absolute path of the document; also the grouping key.
        body (str | None): In-memory text of the document. When None, the text is
            read from ``absolute_ref`` on demand by the codeframe collaborators.
    """

    absolute_ref: str
    body: str | None = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class StructuralLocation:
    """A location expressed as a structural pointer into a document.

    Attributes:
        source (Source): The document the pointer applies to.
        pointer (str): JSON-pointer-like path, e.g. ``#/paths/~1pets/get``.
        report_on_key (bool): Point at the mapping key instead of its value.
    """

    source: Source
    pointer: str
    report_on_key: bool = False


@dataclass(frozen=True)
class LineColLocation:
    """A location already resolved to line/column positions.

    Attributes:
        source (Source): The document the positions refer to.
        start (LineCol): Start position (inclusive).
        end (LineCol | None): End position, if known.
        pointer (str | None): Optional structural path shown next to the header.
    """

    source: Source
    start: LineCol
    end: LineCol | None = None
    pointer: str | None = None

    @property
    def position(self) -> str:
        """Return the rendered ``line:col`` of the start position."""
        return str(self.start)


Location = Union[StructuralLocation, LineColLocation]


@dataclass(frozen=True)
class Message:
    """One reported problem.

    The first reported location is the primary one (used for grouping, headers
    and excerpts); an optional second location is kept as secondary context.
    Locations beyond the second are not represented.
    """

    severity: Severity
    message: str
    rule_id: str
    primary_location: Location
    secondary_location: Location | None = None
    suggest: tuple[str, ...] = ()
    ignored: bool = False
    from_location: Location | None = None

    @classmethod
    def from_locations(
        cls,
        *,
        severity: Severity,
        message: str,
        rule_id: str,
        locations: Sequence[Location],
        suggest: Iterable[str] = (),
        ignored: bool = False,
        from_location: Location | None = None,
    ) -> Message:
        """Build a message from a positional list of locations.

        Args:
            severity (Severity): Message severity.
            message (str): Message text.
            rule_id (str): Identifier of the rule that reported the problem.
            locations (Sequence[Location]): Non-empty list; first entry is primary.
            suggest (Iterable[str]): Suggested replacements, in order.
            ignored (bool): Whether the message was explicitly ignored upstream.
            from_location (Location | None): Optional provenance location.

        Returns:
            Message: The new message.

        Raises:
            ValueError: If ``locations`` is empty.
        """
        if not locations:
            raise ValueError(f"Message from rule {rule_id!r} has no location")
        if len(locations) > 2:
            logger.trace(
                "Dropping %d extra location(s) of %r message", len(locations) - 2, rule_id
            )
        return cls(
            severity=severity,
            message=message,
            rule_id=rule_id,
            primary_location=locations[0],
            secondary_location=locations[1] if len(locations) > 1 else None,
            suggest=tuple(suggest),
            ignored=ignored,
            from_location=from_location,
        )

    @property
    def locations(self) -> tuple[Location, ...]:
        """Return the primary and, if present, the secondary location."""
        if self.secondary_location is None:
            return (self.primary_location,)
        return (self.primary_location, self.secondary_location)

    @property
    def file(self) -> str:
        """Return the absolute path of the primary location's document."""
        return self.primary_location.source.absolute_ref


@dataclass(frozen=True)
class ResolvedMessage:
    """A message together with its locations normalized to line/col form."""

    message: Message
    primary: LineColLocation
    secondary: LineColLocation | None = None

    @property
    def locations(self) -> tuple[LineColLocation, ...]:
        """Return the resolved locations in order."""
        if self.secondary is None:
            return (self.primary,)
        return (self.primary, self.secondary)


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for a single run."""

    n_error: int
    n_warning: int
    n_ignored: int

    @property
    def total(self) -> int:
        """Return the total count of messages, ignored ones included."""
        return self.n_error + self.n_warning + self.n_ignored


def compute_diagnostic_stats(messages: Iterable[Message]) -> DiagnosticStats:
    """Return per-severity counts for ``messages``.

    Ignored messages are counted separately and never contribute to the
    error or warning counts.
    """
    n_error = n_warning = n_ignored = 0
    for m in messages:
        if m.ignored:
            n_ignored += 1
        elif m.severity is Severity.ERROR:
            n_error += 1
        else:
            n_warning += 1
    return DiagnosticStats(n_error=n_error, n_warning=n_warning, n_ignored=n_ignored)
