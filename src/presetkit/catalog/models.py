# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Index entry and index document models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ..errors import CatalogValidationError
from ..types import INDEX_SCHEMA_VERSION, Category, JSONValue
from .scanner import DiscoveredDocument
from .utils import (
    is_true,
    lookup,
    non_blank_string,
    normalize_domains,
    normalize_keywords,
    string_or,
)


@dataclass(slots=True, frozen=True)
class IndexEntry:
    """Normalised, comparison-ready projection of one metadata document."""

    id: str
    category: Category
    name: str
    description: str = ""
    keywords: tuple[str, ...] = ()
    domains: tuple[str, ...] = ()
    meta_path: str = ""
    updated_at: str | None = None
    verified: bool = False

    @property
    def sort_key(self) -> tuple[str, str]:
        """Return the ``(category, id)`` ordering key."""

        return self.category.value, self.id

    @classmethod
    def from_preset(cls, document: Mapping[str, JSONValue], *, source: DiscoveredDocument) -> IndexEntry:
        """Project a preset metadata document into an index entry.

        Args:
            document: Parsed ``*.meta.json`` payload.
            source: Discovery record carrying the path and category.

        Returns:
            IndexEntry: Normalised entry.

        Raises:
            CatalogValidationError: If ``id`` or ``display.name`` is missing or blank.
        """

        preset_id = non_blank_string(document.get("id"))
        if preset_id is None:
            raise CatalogValidationError(f"Missing/invalid meta.id in {source.meta_path}", path=source.meta_path)
        name = non_blank_string(lookup(document, "display", "name"))
        if name is None:
            raise CatalogValidationError(
                f"Missing/invalid display.name in {source.meta_path}",
                path=source.meta_path,
            )
        return cls(
            id=preset_id,
            category=source.category,
            name=name,
            description=string_or(lookup(document, "display", "description"), ""),
            keywords=normalize_keywords(lookup(document, "match", "keywords")),
            domains=normalize_domains(lookup(document, "match", "domains")),
            meta_path=source.meta_path,
            updated_at=non_blank_string(document.get("updatedAt")),
            verified=is_true(document.get("verified")),
        )

    @classmethod
    def from_bundle(cls, document: Mapping[str, JSONValue], *, source: DiscoveredDocument) -> IndexEntry:
        """Project a bundle metadata document into an index entry.

        Bundles carry ``keywords`` at the top level and never contribute domains.

        Raises:
            CatalogValidationError: If ``id`` is not a non-blank string or ``display.name`` is not a string.
        """

        bundle_id = document.get("id")
        name = lookup(document, "display", "name")
        if not isinstance(bundle_id, str) or not bundle_id.strip() or not isinstance(name, str):
            raise CatalogValidationError(f"Bundle missing id/display.name: {source.meta_path}", path=source.meta_path)
        updated_at = document.get("updatedAt")
        return cls(
            id=bundle_id,
            category=Category.BUNDLES,
            name=name,
            description=string_or(lookup(document, "display", "description"), ""),
            keywords=normalize_keywords(document.get("keywords")),
            domains=(),
            meta_path=source.meta_path,
            updated_at=updated_at if isinstance(updated_at, str) else None,
            verified=is_true(document.get("verified")),
        )

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the entry as a JSON object in canonical key order."""

        return {
            "id": self.id,
            "category": self.category.value,
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords),
            "domains": list(self.domains),
            "metaPath": self.meta_path,
            "updatedAt": self.updated_at,
            "verified": self.verified,
        }


@dataclass(slots=True, frozen=True)
class PresetIndex:
    """Aggregate index document regenerated from the catalog on every run."""

    entries: tuple[IndexEntry, ...]
    generated_at: str = field(default_factory=lambda: format_timestamp(datetime.now(UTC)))
    schema_version: int = INDEX_SCHEMA_VERSION

    @classmethod
    def from_entries(cls, entries: Sequence[IndexEntry], *, generated_at: datetime | None = None) -> PresetIndex:
        """Return an index with ``entries`` sorted by category then id.

        The sort is stable, so entries with identical keys keep discovery order.
        """

        ordered = tuple(sorted(entries, key=lambda entry: entry.sort_key))
        if generated_at is None:
            return cls(entries=ordered)
        return cls(entries=ordered, generated_at=format_timestamp(generated_at))

    def entry_dicts(self) -> list[dict[str, JSONValue]]:
        """Return every entry as a JSON object."""

        return [entry.to_dict() for entry in self.entries]

    def to_dict(self) -> dict[str, JSONValue]:
        """Return the index document in canonical key order."""

        return {
            "schemaVersion": self.schema_version,
            "generatedAt": self.generated_at,
            "entries": self.entry_dicts(),
        }


def format_timestamp(moment: datetime) -> str:
    """Return ``moment`` as a UTC ISO-8601 string with millisecond precision.

    Naive datetimes are assumed to already be in UTC.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["IndexEntry", "PresetIndex", "format_timestamp"]
