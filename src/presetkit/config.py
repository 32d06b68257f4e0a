# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Repository configuration for preset discovery and generation."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "presetkit"


class PresetkitSettings(BaseModel):
    """Describe where presets live and how catalog files are named."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    presets_dir: str = Field(default="presets", min_length=1)
    bundles_dir: str = Field(default="bundles", min_length=1)
    index_file: str = Field(default="index.json", min_length=1)
    meta_suffix: str = Field(default=".meta.json", min_length=1)
    bundle_suffix: str = Field(default=".bundle.json", min_length=1)
    fragment_suffix: str = Field(default=".rewardblock.yml", min_length=1)

    @field_validator("presets_dir", "bundles_dir", "index_file")
    @classmethod
    def _relative_only(cls, value: str) -> str:
        if Path(value).is_absolute():
            raise ValueError("must be relative to the repository root")
        return value

    def presets_root(self, root: Path) -> Path:
        """Return the presets directory anchored at ``root``."""

        return root / self.presets_dir

    def bundles_root(self, root: Path) -> Path:
        """Return the bundles directory anchored at ``root``."""

        return root / self.bundles_dir

    def index_path(self, root: Path) -> Path:
        """Return the canonical index location anchored at ``root``."""

        return root / self.index_file


def load_settings(root: Path) -> PresetkitSettings:
    """Load settings from ``[tool.presetkit]`` in ``root/pyproject.toml``.

    Args:
        root: Repository root that may contain a ``pyproject.toml``.

    Returns:
        PresetkitSettings: Parsed settings, or defaults when no table exists.

    Raises:
        ConfigError: If the TOML cannot be parsed or the table is invalid.
    """

    pyproject = root / PYPROJECT_FILENAME
    if not pyproject.is_file():
        return PresetkitSettings()
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{pyproject}: failed to parse TOML") from exc

    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return PresetkitSettings()
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return PresetkitSettings()
    if not isinstance(section, Mapping):
        raise ConfigError(f"{pyproject}: [tool.presetkit] must be a table")
    try:
        return PresetkitSettings.model_validate(_normalise_keys(section))
    except ValidationError as exc:
        raise ConfigError(f"{pyproject}: invalid [tool.presetkit] configuration\n{exc}") from exc


def _normalise_keys(section: Mapping[str, Any]) -> dict[str, Any]:
    return {str(key).replace("-", "_"): value for key, value in section.items()}


__all__ = ["PresetkitSettings", "load_settings"]
