# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by preset catalog operations."""

from __future__ import annotations

from pathlib import Path


class PresetkitError(Exception):
    """Base class for every failure surfaced by presetkit."""


class ConfigError(PresetkitError):
    """Raised when configuration input is invalid."""


class MissingRootError(PresetkitError):
    """Raised when neither catalog root exists beneath the repository root."""


class CatalogIntegrityError(PresetkitError):
    """Raised when a catalog document cannot be read as a JSON object."""


class PresetValidationError(PresetkitError):
    """Raised when a document or submission violates the preset schema."""


class CatalogValidationError(PresetValidationError):
    """Raised when an on-disk metadata document is missing required fields."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        """Create the error with ``message`` and the offending document ``path``."""

        super().__init__(message)
        self.path = path


class SubmissionValidationError(PresetValidationError):
    """Raised when a generation request fails field validation."""

    def __init__(self, field: str, message: str) -> None:
        """Create the error for submission ``field`` with a descriptive ``message``."""

        super().__init__(message)
        self.field = field


class DuplicatePresetIdError(PresetkitError):
    """Raised when two catalog documents share the same ``id``."""

    def __init__(self, preset_id: str, *, first_path: str, second_path: str) -> None:
        """Create the error describing both documents that claim ``preset_id``."""

        super().__init__(f"Duplicate id: {preset_id} ({first_path}, {second_path})")
        self.preset_id = preset_id
        self.first_path = first_path
        self.second_path = second_path


class PresetExistsError(PresetkitError):
    """Raised when a generated preset would replace an existing file."""

    def __init__(self, path: Path) -> None:
        """Create the error for the already existing ``path``."""

        super().__init__(f"Refusing to overwrite existing preset file: {path}")
        self.path = path


class MissingIssueNumberError(PresetkitError):
    """Raised when a generation request arrives without an issue number."""


class IndexRebuildError(PresetkitError):
    """Raised when the index rebuild following preset generation fails."""


__all__ = (
    "CatalogIntegrityError",
    "CatalogValidationError",
    "ConfigError",
    "DuplicatePresetIdError",
    "IndexRebuildError",
    "MissingIssueNumberError",
    "MissingRootError",
    "PresetExistsError",
    "PresetValidationError",
    "PresetkitError",
    "SubmissionValidationError",
)
