# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for the preset catalog."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..config import PresetkitSettings
from ..errors import MissingRootError
from ..types import Category


class DocumentKind(str, Enum):
    """Distinguish the two metadata document shapes found in the catalog."""

    PRESET = "preset"
    BUNDLE = "bundle"


@dataclass(slots=True, frozen=True)
class DiscoveredDocument:
    """Describe a metadata document located during a catalog scan."""

    path: Path
    meta_path: str
    kind: DocumentKind
    category: Category


@dataclass(slots=True)
class PresetScanner:
    """Scan the presets and bundles trees for metadata documents."""

    repo_root: Path
    settings: PresetkitSettings

    @property
    def presets_root(self) -> Path:
        """Return the directory holding preset metadata documents."""

        return self.settings.presets_root(self.repo_root)

    @property
    def bundles_root(self) -> Path:
        """Return the directory holding bundle metadata documents."""

        return self.settings.bundles_root(self.repo_root)

    def ensure_roots(self) -> None:
        """Fail unless at least one catalog root exists.

        Raises:
            MissingRootError: If neither the presets nor bundles root exists.
        """

        if not self.presets_root.exists() and not self.bundles_root.exists():
            raise MissingRootError(
                f"No {self.settings.presets_dir}/ or {self.settings.bundles_dir}/ folder found. Run from repo root.",
            )

    def preset_documents(self) -> tuple[DiscoveredDocument, ...]:
        """Return preset metadata documents sorted by path.

        Returns:
            tuple[DiscoveredDocument, ...]: Documents with their category already assigned.
        """
        root = self.presets_root
        documents: list[DiscoveredDocument] = []
        for path in _find_files(root, self.settings.meta_suffix):
            relative = path.relative_to(root)
            folder = relative.parts[0] if len(relative.parts) > 1 else ""
            documents.append(
                DiscoveredDocument(
                    path=path,
                    meta_path=self._meta_path(path),
                    kind=DocumentKind.PRESET,
                    category=Category.from_preset_folder(folder),
                ),
            )
        return tuple(documents)

    def bundle_documents(self) -> tuple[DiscoveredDocument, ...]:
        """Return bundle metadata documents sorted by path.

        Returns:
            tuple[DiscoveredDocument, ...]: Bundle documents, all in the ``bundles`` category.
        """
        return tuple(
            DiscoveredDocument(
                path=path,
                meta_path=self._meta_path(path),
                kind=DocumentKind.BUNDLE,
                category=Category.BUNDLES,
            )
            for path in _find_files(self.bundles_root, self.settings.bundle_suffix)
        )

    def documents(self) -> tuple[DiscoveredDocument, ...]:
        """Return every catalog document, presets first and bundles second.

        Raises:
            MissingRootError: If neither catalog root exists.
        """
        self.ensure_roots()
        return self.preset_documents() + self.bundle_documents()

    def _meta_path(self, path: Path) -> str:
        return path.relative_to(self.repo_root).as_posix()


def _find_files(root: Path, suffix: str) -> tuple[Path, ...]:
    """Return files beneath ``root`` whose names end with ``suffix``."""

    if not root.is_dir():
        return ()
    return tuple(sorted(path for path in root.rglob(f"*{suffix}") if path.is_file()))


__all__ = ["DiscoveredDocument", "DocumentKind", "PresetScanner"]
