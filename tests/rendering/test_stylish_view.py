# topmark:header:start
#
#   project      : Lintframe
#   file         : test_stylish_view.py
#   file_relpath : tests/rendering/test_stylish_view.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the stylish layout."""

from __future__ import annotations

import click

from lintframe.diagnostic.model import Severity
from lintframe.rendering.grouping import group_by_files
from lintframe.rendering.palette import Palette
from lintframe.rendering.stylish_view import render_stylish_group
from tests.conftest import at, make_message

PLAIN = Palette(enabled=False)


def test_group_lines_are_aligned() -> None:
    """Position and rule id columns share one width within a file."""
    group = group_by_files(
        [
            make_message(
                location=at("/proj/openapi.yaml", 5, 5),
                rule_id="operation-operationId",
                message="Operation must have an operationId.",
            ),
            make_message(
                location=at("/proj/openapi.yaml", 12, 11),
                rule_id="no-unused-components",
                message="Component is never used.",
            ),
        ]
    )["/proj/openapi.yaml"]
    assert render_stylish_group(group, cwd="/proj", palette=PLAIN) == [
        "openapi.yaml:",
        "  5:5     operation-operationId Operation must have an operationId.",
        "  12:11   no-unused-components  Component is never used.",
        "",
    ]


def test_secondary_positions_widen_the_location_column() -> None:
    """The location pad accounts for secondary locations, which are not printed."""
    group = group_by_files(
        [make_message(location=at("/p/a.yaml", 1, 1), secondary=at("/p/a.yaml", 100, 10))]
    )["/p/a.yaml"]
    (line,) = render_stylish_group(group, cwd="/p", palette=PLAIN)[1:-1]
    assert line == "  1:1" + " " * 6 + "no-foo bad foo"
    assert "100:10" not in line


def test_rule_id_uses_severity_color() -> None:
    """Rule ids are colored by severity; the file path uses the accent color."""
    group = group_by_files([make_message(severity=Severity.ERROR)])["/a.yaml"]
    lines = render_stylish_group(group, cwd="/", palette=Palette(enabled=True))
    assert lines[0] == click.style("a.yaml", fg="blue") + ":"
    assert click.style("no-foo", fg="red") in lines[1]
