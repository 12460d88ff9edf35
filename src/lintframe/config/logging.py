# topmark:header:start
#
#   project      : Lintframe
#   file         : logging.py
#   file_relpath : src/lintframe/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lintframe logging with an extra TRACE level.

Internal diagnostics (resolution fallbacks, config discovery, dropped locations)
are reported through the standard `logging` module. This module adds a TRACE
level below DEBUG, a logger class exposing `.trace()`, and a formatter that
colors records with `yachalk` according to their level.

User-facing output never goes through logging; it is written to a console
(see [`lintframe.cli_shared.console_api`][lintframe.cli_shared.console_api]).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Environment variable consulted by `resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: Final[str] = "LINTFRAME_LOG_LEVEL"


class LintframeLogger(logging.Logger):
    """Logger class with support for a TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg`` using %-formatting.
            extra (Mapping[str, object] | None): Optional extra attributes for the record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(LintframeLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and apply the color matching its level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized log line.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def resolve_env_log_level() -> int | None:
    """Return a logging level from ``LINTFRAME_LOG_LEVEL`` or None if unset.

    Accepts level names ("TRACE", "DEBUG", "WARN", ...) or a numeric value ("10").
    Unknown names resolve to None.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    name_to_level = {
        "TRACE": TRACE_LEVEL,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a single colored stdout handler.

    If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][lintframe.config.logging.resolve_env_log_level];
    the fallback is CRITICAL so that normal runs stay silent.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> LintframeLogger:
    """Return the LintframeLogger registered under ``name``.

    Args:
        name (str): The name of the logger (usually ``__name__``).

    Returns:
        LintframeLogger: The logger instance.
    """
    return cast("LintframeLogger", logging.getLogger(name))
