# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures describing generated preset files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..catalog.builder import IndexBuildResult
from ..catalog.io import dump_json
from ..types import JSONValue, PresetKind


@dataclass(slots=True, frozen=True)
class PlannedFile:
    """A file the generator intends to create, relative to the repository root."""

    relative_path: str
    content: str

    def target(self, repo_root: Path) -> Path:
        """Return the absolute destination beneath ``repo_root``."""

        return repo_root.joinpath(*self.relative_path.split("/"))


@dataclass(slots=True, frozen=True)
class PresetPlan:
    """A validated preset ready to be written: its metadata plus any fragments."""

    kind: PresetKind
    preset_id: str
    meta_path: str
    document: dict[str, JSONValue]
    fragments: tuple[PlannedFile, ...] = ()

    @property
    def files(self) -> tuple[PlannedFile, ...]:
        """Return every planned file, metadata first."""

        return (PlannedFile(self.meta_path, dump_json(self.document)), *self.fragments)


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """Outcome of a generation run, including the follow-up index rebuild."""

    plan: PresetPlan
    written: tuple[Path, ...]
    index: IndexBuildResult


__all__ = ["GenerationResult", "PlannedFile", "PresetPlan"]
