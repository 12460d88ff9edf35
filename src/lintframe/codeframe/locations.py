# topmark:header:start
#
#   project      : Lintframe
#   file         : locations.py
#   file_relpath : src/lintframe/codeframe/locations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Normalize locations to line/column form.

Structural locations point into a YAML or JSON document with a JSON-pointer-like
path (``#/paths/~1pets/get/responses/200``). They are resolved by composing the
document with PyYAML and walking the node graph: each node carries start/end
marks from which 1-based line/column positions are derived.

Resolution rules:
    * Segments are percent-decoded, then ``~1`` becomes ``/`` and ``~0`` becomes ``~``.
    * Mapping segments match scalar keys; sequence segments are decimal indexes.
    * When a segment cannot be matched, the deepest node reached is used.
    * With ``report_on_key``, the key node of the last matched segment is used.

Line/column locations normalize to themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import unquote

import yaml

from lintframe.codeframe.sources import source_text
from lintframe.config.logging import get_logger
from lintframe.diagnostic.model import LineCol, LineColLocation, StructuralLocation

if TYPE_CHECKING:
    from lintframe.diagnostic.model import Location

logger = get_logger(__name__)


class LocationResolutionError(Exception):
    """Raised when a structural location cannot be resolved to line/column form."""


def parse_pointer(pointer: str) -> list[str]:
    """Split a structural pointer into unescaped segments.

    Examples:
        >>> parse_pointer("#/paths/~1pets/get")
        ['paths', '/pets', 'get']
        >>> parse_pointer("#/")
        []
    """
    path = pointer[1:] if pointer.startswith("#") else pointer
    return [
        unquote(seg).replace("~1", "/").replace("~0", "~") for seg in path.split("/") if seg
    ]


def _child(node: yaml.Node, segment: str) -> tuple[yaml.Node, yaml.Node | None] | None:
    """Return ``(value_node, key_node)`` for ``segment`` under ``node``, if any."""
    if isinstance(node, yaml.MappingNode):
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode) and key_node.value == segment:
                return value_node, key_node
        return None
    if isinstance(node, yaml.SequenceNode) and segment.isdigit():
        index = int(segment)
        if index < len(node.value):
            return node.value[index], None
    return None


def _line_col_at(text: str, index: int) -> LineCol:
    line = text.count("\n", 0, index) + 1
    col = index - (text.rfind("\n", 0, index) + 1) + 1
    return LineCol(line=line, col=col)


def _node_span(text: str, node: yaml.Node) -> tuple[LineCol, LineCol]:
    start = LineCol(line=node.start_mark.line + 1, col=node.start_mark.column + 1)
    # Block nodes end at the start of the following line; trim to the last character.
    end_index = len(text[: node.end_mark.index].rstrip())
    end_index = max(end_index, node.start_mark.index)
    return start, _line_col_at(text, end_index)


def resolve_structural(location: StructuralLocation) -> LineColLocation:
    """Resolve a structural location against its document.

    Raises:
        LocationResolutionError: If the document cannot be read or composed.
    """
    try:
        text = source_text(location.source)
        root = yaml.compose(text, Loader=yaml.SafeLoader)
    except (OSError, UnicodeDecodeError) as exc:
        raise LocationResolutionError(
            f"Cannot read {location.source.absolute_ref}: {exc}"
        ) from exc
    except yaml.YAMLError as exc:
        raise LocationResolutionError(
            f"Cannot parse {location.source.absolute_ref}: {exc}"
        ) from exc
    except RecursionError as exc:
        raise LocationResolutionError(
            f"Cannot parse {location.source.absolute_ref}: document is nested too deeply"
        ) from exc

    if root is None:
        return LineColLocation(
            source=location.source, start=LineCol(1, 1), pointer=location.pointer
        )

    node: yaml.Node = root
    key_node: yaml.Node | None = None
    for segment in parse_pointer(location.pointer):
        found = _child(node, segment)
        if found is None:
            logger.debug(
                "Pointer %s: segment %r not found in %s",
                location.pointer,
                segment,
                location.source.absolute_ref,
            )
            key_node = None
            break
        node, key_node = found

    target = key_node if location.report_on_key and key_node is not None else node
    start, end = _node_span(text, target)
    return LineColLocation(source=location.source, start=start, end=end, pointer=location.pointer)


def get_line_col_location(location: Location) -> LineColLocation:
    """Return ``location`` in resolved line/column form.

    Raises:
        LocationResolutionError: If a structural location cannot be resolved.
    """
    if isinstance(location, LineColLocation):
        return location
    return resolve_structural(location)


def resolve_location(location: Location) -> LineColLocation:
    """Resolve ``location``, falling back to ``1:1`` when resolution fails.

    A failure is logged as a warning so that one broken location never prevents
    the remaining messages from rendering.
    """
    try:
        return get_line_col_location(location)
    except LocationResolutionError as exc:
        logger.warning("%s", exc)
        return LineColLocation(
            source=location.source,
            start=LineCol(1, 1),
            pointer=getattr(location, "pointer", None),
        )
