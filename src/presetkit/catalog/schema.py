# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating generated catalog documents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError

from ..errors import CatalogValidationError
from ..types import JSONValue
from .io import load_schema

SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent.parent / "schema"
PRESET_META_SCHEMA: Final[str] = "preset_meta.schema.json"
PRESET_INDEX_SCHEMA: Final[str] = "preset_index.schema.json"


@dataclass(slots=True, frozen=True)
class SchemaRepository:
    """Hold JSON schema validators for preset metadata and the index document."""

    schema_root: Path
    preset_validator: Draft202012Validator
    index_validator: Draft202012Validator

    @classmethod
    def load(cls, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            schema_root: Optional override for the schema directory.

        Returns:
            SchemaRepository: Repository configured with preset and index validators.
        """
        resolved_root = schema_root or SCHEMA_ROOT
        preset_schema = load_schema(resolved_root / PRESET_META_SCHEMA)
        index_schema = load_schema(resolved_root / PRESET_INDEX_SCHEMA)
        Draft202012Validator.check_schema(preset_schema)
        Draft202012Validator.check_schema(index_schema)
        return cls(
            schema_root=resolved_root,
            preset_validator=Draft202012Validator(preset_schema),
            index_validator=Draft202012Validator(index_schema),
        )

    def validate_preset(self, document: Mapping[str, JSONValue], *, path: str) -> None:
        """Validate a preset metadata document destined for ``path``.

        Raises:
            CatalogValidationError: When the document violates the preset schema.
        """

        _validate(self.preset_validator, document, schema=PRESET_META_SCHEMA, path=path)

    def validate_index(self, document: Mapping[str, JSONValue], *, path: str) -> None:
        """Validate an index document destined for ``path``.

        Raises:
            CatalogValidationError: When the document violates the index schema.
        """

        _validate(self.index_validator, document, schema=PRESET_INDEX_SCHEMA, path=path)


@lru_cache(maxsize=1)
def default_schemas() -> SchemaRepository:
    """Return the schema repository bundled with the package."""

    return SchemaRepository.load()


def _validate(
    validator: Draft202012Validator,
    document: Mapping[str, JSONValue],
    *,
    schema: str,
    path: str,
) -> None:
    try:
        validator.validate(document)
    except JsonSchemaValidationError as exc:
        location = "/".join(str(part) for part in exc.absolute_path) or "<root>"
        raise CatalogValidationError(f"{path}: {schema} violation at {location}: {exc.message}", path=path) from exc


__all__ = ["PRESET_INDEX_SCHEMA", "PRESET_META_SCHEMA", "SCHEMA_ROOT", "SchemaRepository", "default_schemas"]
