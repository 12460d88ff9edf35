# topmark:header:start
#
#   project      : Lintframe
#   file         : io.py
#   file_relpath : src/lintframe/diagnostic/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load diagnostic messages from a JSON lint report.

The report is either a bare list of message objects or an object carrying them
under ``messages`` (``problems`` is accepted as well). Keys follow the wire
format of the upstream validator:

```json
{
  "messages": [
    {
      "severity": "warn",
      "message": "Operation must have an operationId.",
      "ruleId": "operation-operationId",
      "suggest": [],
      "location": [
        {"source": {"absoluteRef": "/api/openapi.yaml"}, "pointer": "#/paths/~1pets/get"}
      ]
    }
  ]
}
```

A location carrying ``start`` is a line/column location; any other location is
structural and must carry a ``pointer``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from lintframe.config.logging import get_logger
from lintframe.diagnostic.model import (
    LineCol,
    LineColLocation,
    Location,
    Message,
    Severity,
    Source,
    StructuralLocation,
)

logger = get_logger(__name__)


class ReportFormatError(ValueError):
    """Raised when a report does not follow the expected structure."""


def load_report(path: Path) -> list[Message]:
    """Read and parse a JSON report from ``path``.

    Relative ``absoluteRef`` values are resolved against the report's directory.

    Raises:
        OSError: If the file cannot be read.
        ReportFormatError: If the content is not a valid report.
    """
    text = path.read_text(encoding="utf-8")
    return parse_report_text(text, base_dir=path.resolve().parent)


def parse_report_text(text: str, *, base_dir: Path | None = None) -> list[Message]:
    """Parse a JSON report given as text.

    Args:
        text (str): The JSON document.
        base_dir (Path | None): Directory used to absolutize relative source paths.
            Defaults to the current working directory.

    Returns:
        list[Message]: The messages in report order.

    Raises:
        ReportFormatError: If the text is not JSON or not a valid report.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReportFormatError(f"Report is not valid JSON: {exc}") from exc
    return parse_report(data, base_dir=base_dir)


def parse_report(data: Any, *, base_dir: Path | None = None) -> list[Message]:
    """Convert decoded JSON data into messages.

    Raises:
        ReportFormatError: If the data is not a valid report.
    """
    if isinstance(data, dict):
        items = data.get("messages", data.get("problems"))
    else:
        items = data
    if not isinstance(items, list):
        raise ReportFormatError("Report must be a list of messages or an object with 'messages'")

    base = base_dir or Path.cwd()
    messages: list[Message] = []
    for idx, raw in enumerate(items):
        try:
            messages.append(_parse_message(raw, base))
        except (KeyError, TypeError, ValueError) as exc:
            raise ReportFormatError(f"Invalid message at index {idx}: {exc}") from exc
    logger.debug("Parsed %d message(s) from report", len(messages))
    return messages


def _parse_message(raw: Any, base: Path) -> Message:
    if not isinstance(raw, dict):
        raise TypeError("message must be an object")
    locations_raw = raw.get("location")
    if not isinstance(locations_raw, list) or not locations_raw:
        raise ValueError("'location' must be a non-empty list")
    suggest_raw = raw.get("suggest") or []
    if not isinstance(suggest_raw, list):
        raise TypeError("'suggest' must be a list")
    from_raw = raw.get("from")

    return Message.from_locations(
        severity=Severity.parse(str(raw["severity"])),
        message=str(raw["message"]),
        rule_id=str(raw["ruleId"]),
        locations=[_parse_location(loc, base) for loc in locations_raw],
        suggest=[str(s) for s in suggest_raw],
        ignored=_parse_ignored(raw.get("ignored", False)),
        from_location=_parse_location(from_raw, base) if from_raw else None,
    )


def _parse_ignored(raw: Any) -> bool:
    if not isinstance(raw, bool):
        raise TypeError(f"'ignored' must be a boolean, got {raw!r}")
    return raw


def _parse_source(raw: Any, base: Path) -> Source:
    if not isinstance(raw, dict):
        raise TypeError("'source' must be an object")
    ref = str(raw["absoluteRef"])
    if not os.path.isabs(ref):
        ref = str((base / ref).resolve())
    body = raw.get("body")
    return Source(absolute_ref=ref, body=body if isinstance(body, str) else None)


def _parse_line_col(raw: Any) -> LineCol:
    if not isinstance(raw, dict):
        raise TypeError("position must be an object with 'line' and 'col'")
    return LineCol(line=int(raw["line"]), col=int(raw["col"]))


def _parse_location(raw: Any, base: Path) -> Location:
    if not isinstance(raw, dict):
        raise TypeError("location must be an object")
    source = _parse_source(raw["source"], base)
    pointer = raw.get("pointer")
    if "start" in raw:
        return LineColLocation(
            source=source,
            start=_parse_line_col(raw["start"]),
            end=_parse_line_col(raw["end"]) if raw.get("end") else None,
            pointer=str(pointer) if pointer else None,
        )
    if not pointer:
        raise ValueError("structural location requires a 'pointer'")
    return StructuralLocation(
        source=source,
        pointer=str(pointer),
        report_on_key=bool(raw.get("reportOnKey", False)),
    )
