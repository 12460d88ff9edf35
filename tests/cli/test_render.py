# topmark:header:start
#
#   project      : Lintframe
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `render` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_FAILURE,
    assert_SUCCESS,
    raw_message,
    run_cli,
    run_cli_in,
    write_report,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_render_stylish_warning(tmp_path: Path) -> None:
    """A warnings-only report renders and exits successfully."""
    write_report(tmp_path, [raw_message()])
    result = run_cli_in(tmp_path, ["--no-color", "render", "--format", "stylish", "report.json"])

    assert_SUCCESS(result)
    assert "api.yaml:\n  2:3   no-foo bad foo\n" in result.output
    assert "⚠️ Your document is valid with 1 warning." in result.output


@mark_cli
def test_render_codeframe_with_excerpt(tmp_path: Path) -> None:
    """The default layout shows the excerpt read from the linted file."""
    (tmp_path / "api.yaml").write_text("openapi: 3.1.0\ninfo:\n  title: Pets\n", encoding="utf-8")
    write_report(tmp_path, [raw_message(line=3, col=3)])
    result = run_cli_in(tmp_path, ["--no-color", "render", "report.json"])

    assert_SUCCESS(result)
    assert "[1] api.yaml:3:3 \n\nbad foo\n\n" in result.output
    assert " 3 |   title: Pets\n   |   ^\n" in result.output
    assert "Warning was generated by the no-foo rule." in result.output


@mark_cli
def test_render_errors_exit_with_failure(tmp_path: Path) -> None:
    """A non-ignored error makes the command fail."""
    write_report(tmp_path, [raw_message(), raw_message(severity="error", message="broken")])
    result = run_cli_in(tmp_path, ["--no-color", "render", "report.json"])

    assert_FAILURE(result)
    assert result.output.index("broken") < result.output.index("bad foo")
    assert "❌ Validation failed with 1 error and 1 warning." in result.output


@mark_cli
def test_ignored_errors_do_not_fail(tmp_path: Path) -> None:
    """Ignored messages are neither shown nor counted as errors."""
    write_report(tmp_path, [raw_message(severity="error", ignored=True)])
    result = run_cli_in(tmp_path, ["--no-color", "render", "report.json"])

    assert_SUCCESS(result)
    assert "bad foo" not in result.output
    assert "✅ No problems found." in result.output
    assert "1 problem was explicitly ignored." in result.output


@mark_cli
def test_render_from_stdin(tmp_path: Path) -> None:
    """``-`` reads the report from STDIN."""
    report = json.dumps([raw_message(ref=str(tmp_path / "api.yaml"))])
    result = run_cli(
        ["--no-color", "render", "--format", "stylish", "--cwd", str(tmp_path), "-"],
        input_text=report,
    )

    assert_SUCCESS(result)
    assert "api.yaml:\n" in result.output


@mark_cli
def test_max_messages_option_and_environment(tmp_path: Path) -> None:
    """--max-messages overrides LINTFRAME_MAX_MESSAGES, which overrides the default."""
    write_report(tmp_path, [raw_message(line=i) for i in range(1, 4)])

    from_env = run_cli_in(
        tmp_path,
        ["--no-color", "render", "--format", "stylish", "report.json"],
        env={"LINTFRAME_MAX_MESSAGES": "1"},
    )
    assert_SUCCESS(from_env)
    assert "< ... 2 more messages hidden > increase with `--max-messages N`" in from_env.output

    from_cli = run_cli_in(
        tmp_path,
        ["--no-color", "render", "--format", "stylish", "--max-messages", "2", "report.json"],
        env={"LINTFRAME_MAX_MESSAGES": "1"},
    )
    assert "< ... 1 more messages hidden >" in from_cli.output


@mark_cli
def test_config_file_sets_defaults(tmp_path: Path) -> None:
    """lintframe.toml in the working directory selects the layout."""
    (tmp_path / "lintframe.toml").write_text('[format]\nformat = "stylish"\n', encoding="utf-8")
    write_report(tmp_path, [raw_message()])

    result = run_cli_in(tmp_path, ["--no-color", "-v", "render", "report.json"])
    assert_SUCCESS(result)
    assert "Using configuration from" in result.output
    assert "  2:3   no-foo bad foo" in result.output

    ignored = run_cli_in(tmp_path, ["--no-color", "render", "--no-config", "report.json"])
    assert "[1] api.yaml:2:3" in ignored.output


@mark_cli
def test_explicit_config_file(tmp_path: Path) -> None:
    """--config points at a file outside the discovery path."""
    config = tmp_path / "custom.toml"
    config.write_text("[format]\nmax_messages = 1\n", encoding="utf-8")
    write_report(tmp_path, [raw_message(line=1), raw_message(line=2)])

    result = run_cli_in(tmp_path, ["--no-color", "render", "--config", str(config), "report.json"])
    assert "< ... 1 more messages hidden >" in result.output


@mark_cli
def test_missing_config_file_is_a_usage_error(tmp_path: Path) -> None:
    """A --config path that does not exist is rejected before rendering."""
    write_report(tmp_path, [raw_message()])

    result = run_cli_in(
        tmp_path, ["--no-color", "render", "--config", str(tmp_path / "nope.toml"), "report.json"]
    )
    # click rejects the path during parameter conversion (click usage exit 2)
    assert result.exit_code == 2, result.output
    assert "nope.toml" in result.output
    assert "bad foo" not in result.output


@mark_cli
def test_summary_can_be_disabled(tmp_path: Path) -> None:
    """--no-summary and -q both suppress the totals line."""
    write_report(tmp_path, [raw_message()])
    for argv in (
        ["--no-color", "render", "--no-summary", "report.json"],
        ["--no-color", "-q", "render", "report.json"],
    ):
        result = run_cli_in(tmp_path, argv)
        assert_SUCCESS(result)
        assert "bad foo" in result.output
        assert "Your document is valid" not in result.output


@mark_cli
def test_empty_report(tmp_path: Path) -> None:
    """An empty report prints only the summary."""
    write_report(tmp_path, [])
    result = run_cli_in(tmp_path, ["--no-color", "render", "report.json"])

    assert_SUCCESS(result)
    assert result.output.strip() == "✅ No problems found."
