# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Derive the aggregate preset index from the metadata documents on disk."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..config import PresetkitSettings, load_settings
from ..errors import CatalogIntegrityError, DuplicatePresetIdError
from ..types import JSONValue
from .io import dump_json, load_document, write_text_atomic
from .models import IndexEntry, PresetIndex
from .scanner import DiscoveredDocument, DocumentKind, PresetScanner
from .schema import SchemaRepository, default_schemas

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _EntryAccumulator:
    """Collect index entries for one build while enforcing id uniqueness."""

    entries: list[IndexEntry] = field(default_factory=list)
    owners: dict[str, str] = field(default_factory=dict)

    def add(self, entry: IndexEntry) -> None:
        """Record ``entry``, failing on the first id already claimed.

        Raises:
            DuplicatePresetIdError: If another document already uses ``entry.id``.
        """

        first_path = self.owners.get(entry.id)
        if first_path is not None:
            raise DuplicatePresetIdError(entry.id, first_path=first_path, second_path=entry.meta_path)
        self.owners[entry.id] = entry.meta_path
        self.entries.append(entry)


@dataclass(slots=True, frozen=True)
class IndexBuildResult:
    """Outcome of a successful index build."""

    index: PresetIndex
    output_path: Path

    @property
    def entry_count(self) -> int:
        """Return the number of entries in the built index."""

        return len(self.index.entries)


@dataclass(slots=True, frozen=True)
class IndexCheckResult:
    """Comparison between the on-disk index and a fresh in-memory build."""

    index_path: Path
    expected: PresetIndex
    missing: bool = False
    added_ids: tuple[str, ...] = ()
    removed_ids: tuple[str, ...] = ()
    changed_ids: tuple[str, ...] = ()
    order_changed: bool = False
    schema_version_changed: bool = False

    @property
    def up_to_date(self) -> bool:
        """Return ``True`` when the on-disk index matches the catalog."""

        return not (
            self.missing
            or self.added_ids
            or self.removed_ids
            or self.changed_ids
            or self.order_changed
            or self.schema_version_changed
        )


@dataclass(slots=True)
class PresetIndexBuilder:
    """Scan the catalog, project every document, and write the index."""

    repo_root: Path
    settings: PresetkitSettings = field(default_factory=PresetkitSettings)
    schemas: SchemaRepository = field(default_factory=default_schemas)

    @classmethod
    def for_repository(cls, repo_root: Path) -> PresetIndexBuilder:
        """Return a builder configured from ``repo_root``'s ``pyproject.toml``."""

        return cls(repo_root=repo_root, settings=load_settings(repo_root))

    @property
    def index_path(self) -> Path:
        """Return the canonical index location."""

        return self.settings.index_path(self.repo_root)

    def collect(self, *, generated_at: datetime | None = None) -> PresetIndex:
        """Build the index document in memory without touching the filesystem.

        Args:
            generated_at: Optional timestamp recorded as ``generatedAt``.

        Returns:
            PresetIndex: Sorted index covering every discovered document.

        Raises:
            MissingRootError: If neither catalog root exists.
            CatalogIntegrityError: If a document is not a JSON object.
            CatalogValidationError: If a document lacks required fields.
            DuplicatePresetIdError: If two documents share an id.
        """

        scanner = PresetScanner(self.repo_root, self.settings)
        accumulator = _EntryAccumulator()
        for source in scanner.documents():
            accumulator.add(self._project(source))
        index = PresetIndex.from_entries(accumulator.entries, generated_at=generated_at)
        self.schemas.validate_index(index.to_dict(), path=self.settings.index_file)
        return index

    def build(self, *, generated_at: datetime | None = None) -> IndexBuildResult:
        """Rebuild the index and atomically replace the canonical index file.

        Nothing is written when any document fails validation.
        """

        index = self.collect(generated_at=generated_at)
        write_text_atomic(self.index_path, dump_json(index.to_dict()))
        LOGGER.debug("wrote %s with %d entries", self.index_path, len(index.entries))
        return IndexBuildResult(index=index, output_path=self.index_path)

    def check(self) -> IndexCheckResult:
        """Compare the on-disk index with a fresh build, ignoring ``generatedAt``.

        Returns:
            IndexCheckResult: Differences between the stored and expected entries.

        Raises:
            CatalogIntegrityError: If the stored index is not a JSON object.
        """

        expected = self.collect()
        if not self.index_path.is_file():
            return IndexCheckResult(index_path=self.index_path, expected=expected, missing=True)
        stored = load_document(self.index_path, display_path=self.settings.index_file)
        stored_entries = _stored_entries(stored.get("entries"), context=self.settings.index_file)
        expected_entries = {str(item["id"]): item for item in expected.entry_dicts()}

        stored_ids = list(stored_entries)
        added = tuple(sorted(set(expected_entries) - set(stored_entries)))
        removed = tuple(sorted(set(stored_entries) - set(expected_entries)))
        changed = tuple(
            sorted(
                entry_id
                for entry_id, item in expected_entries.items()
                if entry_id in stored_entries and stored_entries[entry_id] != item
            ),
        )
        order_changed = not (added or removed) and stored_ids != list(expected_entries)
        return IndexCheckResult(
            index_path=self.index_path,
            expected=expected,
            added_ids=added,
            removed_ids=removed,
            changed_ids=changed,
            order_changed=order_changed,
            schema_version_changed=stored.get("schemaVersion") != expected.schema_version,
        )

    def _project(self, source: DiscoveredDocument) -> IndexEntry:
        document = load_document(source.path, display_path=source.meta_path)
        if source.kind is DocumentKind.BUNDLE:
            entry = IndexEntry.from_bundle(document, source=source)
        else:
            entry = IndexEntry.from_preset(document, source=source)
        LOGGER.debug("indexed %s as %s/%s", source.meta_path, entry.category.value, entry.id)
        return entry


def build_index(repo_root: Path, *, settings: PresetkitSettings | None = None) -> IndexBuildResult:
    """Rebuild ``index.json`` for ``repo_root`` from scratch."""

    if settings is None:
        return PresetIndexBuilder.for_repository(repo_root).build()
    return PresetIndexBuilder(repo_root=repo_root, settings=settings).build()


def check_index(repo_root: Path, *, settings: PresetkitSettings | None = None) -> IndexCheckResult:
    """Report whether ``index.json`` under ``repo_root`` reflects the catalog."""

    if settings is None:
        return PresetIndexBuilder.for_repository(repo_root).check()
    return PresetIndexBuilder(repo_root=repo_root, settings=settings).check()


def _stored_entries(value: JSONValue | None, *, context: str) -> dict[str, JSONValue]:
    if not isinstance(value, list):
        raise CatalogIntegrityError(f"{context}: expected 'entries' to be an array")
    return dict(_keyed_by_id(value))


def _keyed_by_id(items: Iterable[JSONValue]) -> Iterable[tuple[str, JSONValue]]:
    for item in items:
        if isinstance(item, dict):
            yield str(item.get("id")), item


__all__ = [
    "IndexBuildResult",
    "IndexCheckResult",
    "PresetIndexBuilder",
    "build_index",
    "check_index",
]
