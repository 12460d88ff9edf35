# topmark:header:start
#
#   project      : Lintframe
#   file         : model.py
#   file_relpath : src/lintframe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatter configuration and its layering.

Values are layered with increasing precedence:

1. built-in defaults,
2. the ``[format]`` table of the configuration file,
3. the environment (``LINTFRAME_MAX_MESSAGES``),
4. explicit CLI options.

`FormatterConfig` is immutable; each layer produces a new instance.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from lintframe.cli_shared.color import ColorMode
from lintframe.config.keys import Toml
from lintframe.config.loaders import (
    TomlTable,
    discover_config_file,
    extract_lintframe_table,
    load_toml_dict,
)
from lintframe.config.logging import get_logger
from lintframe.constants import DEFAULT_MAX_MESSAGES, MAX_MESSAGES_ENV_VAR
from lintframe.rendering.formats import OutputFormat
from lintframe.rendering.options import RenderOptions

logger = get_logger(__name__)


class ConfigValueError(ValueError):
    """Raised when a configuration value has the wrong type or is out of range."""


def _parse_max_messages(value: Any, origin: str) -> int:
    if isinstance(value, bool):
        raise ConfigValueError(f"{origin}: max_messages must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ConfigValueError(f"{origin}: max_messages must be an integer, got {value!r}")
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValueError(
            f"{origin}: max_messages must be an integer, got {value!r}"
        ) from exc
    if count < 1:
        raise ConfigValueError(f"{origin}: max_messages must be at least 1, got {count}")
    return count


def _parse_format(value: Any, origin: str) -> OutputFormat:
    try:
        return OutputFormat(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(f.value for f in OutputFormat)
        raise ConfigValueError(
            f"{origin}: format must be one of {choices}, got {value!r}"
        ) from exc


def _parse_color(value: Any, origin: str) -> ColorMode:
    if isinstance(value, bool):
        return ColorMode.ALWAYS if value else ColorMode.NEVER
    try:
        return ColorMode(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in ColorMode)
        raise ConfigValueError(f"{origin}: color must be one of {choices}, got {value!r}") from exc


@dataclass(frozen=True)
class FormatterConfig:
    """Resolved formatter settings.

    Attributes:
        max_messages (int): Maximum number of messages to show.
        output_format (OutputFormat): Output layout.
        color_mode (ColorMode): User intent for colors.
        config_file (Path | None): The file the values were read from, if any.
    """

    max_messages: int = DEFAULT_MAX_MESSAGES
    output_format: OutputFormat = OutputFormat.CODEFRAME
    color_mode: ColorMode = ColorMode.AUTO
    config_file: Path | None = None

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, config_file: Path | None = None) -> FormatterConfig:
        """Build a config from a Lintframe TOML table, on top of the defaults.

        Args:
            table (TomlTable): The Lintframe table (document root of ``lintframe.toml``
                or ``[tool.lintframe]``).
            config_file (Path | None): The file the table came from, for messages.

        Returns:
            FormatterConfig: The resulting configuration.

        Raises:
            ConfigValueError: If a value is invalid.
        """
        origin = str(config_file) if config_file else "<config>"
        section = table.get(Toml.SECTION_FORMAT, {})
        if not isinstance(section, dict):
            raise ConfigValueError(f"{origin}: [{Toml.SECTION_FORMAT}] must be a table")

        config = cls(config_file=config_file)
        if Toml.KEY_MAX_MESSAGES in section:
            config = replace(
                config,
                max_messages=_parse_max_messages(section[Toml.KEY_MAX_MESSAGES], origin),
            )
        if Toml.KEY_FORMAT in section:
            config = replace(config, output_format=_parse_format(section[Toml.KEY_FORMAT], origin))
        if Toml.KEY_COLOR in section:
            config = replace(config, color_mode=_parse_color(section[Toml.KEY_COLOR], origin))

        unknown = set(section) - {Toml.KEY_MAX_MESSAGES, Toml.KEY_FORMAT, Toml.KEY_COLOR}
        for key in sorted(unknown):
            logger.warning("%s: ignoring unknown key %r in [%s]", origin, key, Toml.SECTION_FORMAT)
        return config

    def with_env(self, environ: Mapping[str, str] | None = None) -> FormatterConfig:
        """Apply environment overrides.

        Raises:
            ConfigValueError: If ``LINTFRAME_MAX_MESSAGES`` is invalid.
        """
        env = os.environ if environ is None else environ
        raw = env.get(MAX_MESSAGES_ENV_VAR)
        if not raw:
            return self
        return replace(self, max_messages=_parse_max_messages(raw.strip(), MAX_MESSAGES_ENV_VAR))

    def merged_with(
        self,
        *,
        max_messages: int | None = None,
        output_format: OutputFormat | None = None,
        color_mode: ColorMode | None = None,
    ) -> FormatterConfig:
        """Return a copy with the explicitly provided (non-None) overrides applied.

        Raises:
            ConfigValueError: If ``max_messages`` is invalid.
        """
        config = self
        if max_messages is not None:
            config = replace(config, max_messages=_parse_max_messages(max_messages, "--max-messages"))
        if output_format is not None:
            config = replace(config, output_format=output_format)
        if color_mode is not None:
            config = replace(config, color_mode=color_mode)
        return config

    def to_render_options(self, *, cwd: str, color: bool) -> RenderOptions:
        """Return the options for one render call."""
        return RenderOptions(
            max_messages=self.max_messages,
            cwd=cwd,
            output_format=self.output_format,
            color=color,
        )


def load_config(
    *,
    cwd: Path,
    config_file: Path | None = None,
    no_config: bool = False,
    environ: Mapping[str, str] | None = None,
) -> FormatterConfig:
    """Load the effective configuration (defaults, file, environment).

    Args:
        cwd (Path): Directory from which the config file is discovered.
        config_file (Path | None): Explicit config file; skips discovery.
        no_config (bool): Ignore configuration files entirely.
        environ (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

    Returns:
        FormatterConfig: The configuration before CLI overrides.

    Raises:
        ConfigValueError: If the file or the environment holds an invalid value.
    """
    config = FormatterConfig()
    if not no_config:
        path = config_file or discover_config_file(cwd)
        if path is not None:
            table = extract_lintframe_table(load_toml_dict(path), path) or {}
            config = FormatterConfig.from_toml_dict(table, config_file=path)
    return config.with_env(environ)
