# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load difflint configuration from ``[tool.difflint]`` in ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .config import Config, ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "difflint"
PROFILES_KEY: Final[str] = "profiles"


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def read_pyproject_section(path: Path) -> Mapping[str, Any]:
    """Return the raw ``[tool.difflint]`` table from ``path``.

    Args:
        path: Location of a ``pyproject.toml`` document.

    Returns:
        Mapping[str, Any]: Section contents, or an empty mapping when the file
        or the table is absent.

    Raises:
        ConfigError: If the document cannot be read or parsed, or the section
            is not a table.
    """

    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def merge_config(base: Config, overrides: Mapping[str, Any]) -> Config:
    """Return ``base`` with ``overrides`` applied.

    Profiles named in ``overrides`` are merged field by field onto the
    existing profile of the same name; unknown names define new profiles.

    Args:
        base: Configuration providing default values.
        overrides: Raw mapping, typically a ``[tool.difflint]`` table.

    Returns:
        Config: Validated merged configuration.

    Raises:
        ConfigError: If the merged payload fails validation.
    """

    payload = base.model_dump(mode="json")
    raw_profiles = overrides.get(PROFILES_KEY, {})
    if not isinstance(raw_profiles, Mapping):
        raise ConfigError(f"'{PROFILES_KEY}' must be a table of profile tables")
    merged = _deep_merge(payload, {key: value for key, value in overrides.items() if key != PROFILES_KEY})
    profiles: dict[str, Any] = dict(payload[PROFILES_KEY])
    for name, raw_profile in raw_profiles.items():
        if not isinstance(raw_profile, Mapping):
            raise ConfigError(f"Profile '{name}' must be a table")
        profiles[name] = _deep_merge(profiles.get(name, {}), {**raw_profile, "name": name})
    merged[PROFILES_KEY] = profiles
    try:
        return Config.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid difflint configuration: {exc}") from exc


def load_config(root: Path) -> Config:
    """Return the configuration for the repository rooted at ``root``.

    Args:
        root: Directory searched for ``pyproject.toml``.

    Returns:
        Config: Defaults overlaid with any ``[tool.difflint]`` settings.
    """

    section = read_pyproject_section(root / PYPROJECT_FILENAME)
    if not section:
        return Config()
    return merge_config(Config(), section)


__all__ = ["load_config", "merge_config", "read_pyproject_section"]
