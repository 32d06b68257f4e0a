# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Preset catalog discovery and index generation."""

from __future__ import annotations

from .builder import IndexBuildResult, IndexCheckResult, PresetIndexBuilder, build_index, check_index
from .models import IndexEntry, PresetIndex
from .scanner import DiscoveredDocument, DocumentKind, PresetScanner
from .schema import SchemaRepository

__all__ = (
    "DiscoveredDocument",
    "DocumentKind",
    "IndexBuildResult",
    "IndexCheckResult",
    "IndexEntry",
    "PresetIndex",
    "PresetIndexBuilder",
    "PresetScanner",
    "SchemaRepository",
    "build_index",
    "check_index",
)
