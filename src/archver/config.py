# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime settings and their loading from pyproject and the environment."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ArchverError

DEFAULT_CATALOG_URL: Final[str] = (
    "https://gist.githubusercontent.com/shedaniel/4a37f350a6e49545347cb798dbfa72b3/raw/architectury.json"
)
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "archver"
ENV_PREFIX: Final[str] = "ARCHVER_"
_ENV_FIELDS: Final[tuple[str, ...]] = ("catalog_url", "timeout_seconds", "strict_selection")


class ConfigError(ArchverError):
    """Raised when configuration input is invalid."""


class ArchverSettings(BaseModel):
    """Options controlling where the catalog comes from and how results are shown."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    catalog_url: str = DEFAULT_CATALOG_URL
    timeout_seconds: float = Field(default=10.0, gt=0)
    strict_selection: bool = True
    validate_schema: bool = True
    use_color: bool = True
    use_emoji: bool = True


def _normalise_keys(section: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``section`` with kebab-case keys converted to snake_case."""

    return {str(key).replace("-", "_"): value for key, value in section.items()}


def pyproject_settings(root: Path) -> dict[str, Any]:
    """Return the ``[tool.archver]`` table of ``root/pyproject.toml``.

    Args:
        root: Project directory that may contain ``pyproject.toml``.

    Returns:
        dict[str, Any]: Normalised table contents, empty when absent.

    Raises:
        ConfigError: If the file is not valid TOML or the section is not a table.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION_KEY}] must be a table")
    return _normalise_keys(section)


def environment_settings(env: Mapping[str, str]) -> dict[str, Any]:
    """Return settings supplied through ``ARCHVER_*`` environment variables."""

    values: dict[str, Any] = {}
    for name in _ENV_FIELDS:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            values[name] = raw.strip()
    return values


def load_settings(
    root: Path,
    *,
    env: Mapping[str, str] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> ArchverSettings:
    """Build settings from defaults, pyproject, environment and overrides.

    Later sources win: defaults, then ``[tool.archver]``, then ``ARCHVER_*``
    variables, then ``overrides`` (entries set to ``None`` are ignored).

    Args:
        root: Project directory searched for ``pyproject.toml``.
        env: Environment mapping; defaults to :data:`os.environ`.
        overrides: Explicit values, typically from CLI options.

    Returns:
        ArchverSettings: Validated settings.

    Raises:
        ConfigError: If any source supplies an unknown key or invalid value.
    """

    merged: dict[str, Any] = {}
    merged.update(pyproject_settings(root))
    merged.update(environment_settings(os.environ if env is None else env))
    if overrides:
        merged.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ArchverSettings.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"invalid archver configuration: {exc}") from exc


__all__ = [
    "DEFAULT_CATALOG_URL",
    "ArchverSettings",
    "ConfigError",
    "environment_settings",
    "load_settings",
    "pyproject_settings",
]
