# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases, enumerations, and constants for the preset catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

INDEX_SCHEMA_VERSION: Final[int] = 1
PRESET_SCHEMA_VERSION: Final[int] = 1


class Category(str, Enum):
    """Enumerate index categories assigned to discovered documents."""

    BUNDLES = "bundles"
    MILESTONES = "milestones"
    OTHER = "other"
    REWARDS = "rewards"
    VOTESITES = "votesites"

    @classmethod
    def from_preset_folder(cls, folder: str) -> Category:
        """Return the category for a top-level folder beneath the presets root.

        Args:
            folder: First directory segment relative to the presets root.

        Returns:
            Category: Matching preset category, or ``OTHER`` when unrecognised.
        """

        if folder in _PRESET_FOLDERS:
            return cls(folder)
        return cls.OTHER


_PRESET_FOLDERS: Final[frozenset[str]] = frozenset({"votesites", "rewards", "milestones"})


class PresetKind(str, Enum):
    """Enumerate the preset shapes the generator can synthesise."""

    VOTESITE = "votesite"
    REWARD = "reward"

    @property
    def id_prefix(self) -> str:
        """Return the namespace prefix every id of this kind must carry."""

        return f"{self.value}:"


class RewardType(str, Enum):
    """Enumerate reward payload flavours supported by reward presets."""

    COMMANDS = "commands"
    MESSAGES = "messages"

    @property
    def header(self) -> str:
        """Return the YAML key heading the reward fragment."""

        return self.value.capitalize()

    @property
    def block_key(self) -> str:
        """Return the placeholder marker substituted into the reward fragment."""

        return f"{self.value}Block"


__all__ = [
    "INDEX_SCHEMA_VERSION",
    "PRESET_SCHEMA_VERSION",
    "Category",
    "JSONPrimitive",
    "JSONValue",
    "PresetKind",
    "RewardType",
]
