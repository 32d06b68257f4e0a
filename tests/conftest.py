# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pytest

WriteJSON = Callable[[str, Mapping[str, Any]], Path]


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Return an empty repository root with a ``presets/`` folder."""

    (tmp_path / "presets").mkdir()
    return tmp_path


@pytest.fixture
def write_json(repo_root: Path) -> WriteJSON:
    """Return a helper writing a JSON document at a repository-relative path."""

    def _write(relative: str, payload: Mapping[str, Any]) -> Path:
        path = repo_root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def votesite_fields() -> dict[str, str]:
    """Return a complete VoteSite issue form submission."""

    return {
        "Domain (no protocol)": "example.com",
        "Preset ID": "votesite:example",
        "VoteSite key (siteKey)": "Example",
        "Display name (displayName)": "Example Site",
        "ServiceSite (required)": "ExampleService",
    }


@pytest.fixture
def reward_fields() -> dict[str, str]:
    """Return a complete Reward issue form submission."""

    return {
        "Preset ID": "reward:diamonds/basic",
        "Display name": "Diamond reward",
        "Reward type": "Commands",
        "Default lines (one per line)": "give %player% diamond 1\nsay thanks %player%",
    }
