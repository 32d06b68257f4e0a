# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""presetkit: preset catalog indexing and issue-form preset generation."""

from __future__ import annotations

from .catalog import IndexEntry, PresetIndex, PresetIndexBuilder, build_index, check_index
from .config import PresetkitSettings, load_settings
from .forms import parse_issue_form
from .generator import generate_from_issue, generate_preset

__version__ = "0.1.0"

__all__ = [
    "IndexEntry",
    "PresetIndex",
    "PresetIndexBuilder",
    "PresetkitSettings",
    "__version__",
    "build_index",
    "check_index",
    "generate_from_issue",
    "generate_preset",
    "load_settings",
    "parse_issue_form",
]
