# topmark:header:start
#
#   project      : Lintframe
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Lintframe in a controlled working directory.

This module provides small utilities used across CLI tests. In particular,
`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative report paths, config discovery
and the relative file paths shown in the output are all anchored in the
temporary test directory.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from lintframe.cli.main import cli
from lintframe.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD for the
            command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. `["render", "report.json"]`.
        input_text (str | bytes | IO[Any] | None): Optional standard input, used by
            ``render -``.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["render", "report.json"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text, env=env)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
    env: Mapping[str, str | None] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on files created in
    ``tmp_path`` (e.g., ``--help`` / ``version``) or when all provided paths are
    absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.
        env (Mapping[str, str | None] | None): Environment overrides for the run.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(
        cli,
        argv,
        input=input_text,
        env=env,
        obj={},  # fresh Click context object per invocation
    )


def write_report(tmp_path: Path, messages: list[dict[str, Any]], name: str = "report.json") -> Path:
    """Write ``messages`` as a JSON report under ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(json.dumps({"messages": messages}), encoding="utf-8")
    return path


def raw_message(
    *,
    severity: str = "warn",
    message: str = "bad foo",
    rule_id: str = "no-foo",
    ref: str = "api.yaml",
    line: int = 2,
    col: int = 3,
    ignored: bool = False,
) -> dict[str, Any]:
    """Return one report message in the upstream wire format."""
    return {
        "severity": severity,
        "message": message,
        "ruleId": rule_id,
        "suggest": [],
        "ignored": ignored,
        "location": [{"source": {"absoluteRef": ref}, "start": {"line": line, "col": col}}],
    }


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1): the report has errors.

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    # FAILURE is a *normal* outcome; do not assert on exception.
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
