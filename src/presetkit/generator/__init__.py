# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Preset generation from issue form submissions."""

from __future__ import annotations

from .fields import normalize_domain
from .models import GenerationResult, PlannedFile, PresetPlan
from .pipeline import (
    generate_from_issue,
    generate_preset,
    plan_preset,
    require_issue_number,
    resolve_kind,
    write_plan,
)
from .reward import build_reward_preset
from .votesite import build_votesite_preset

__all__ = (
    "GenerationResult",
    "PlannedFile",
    "PresetPlan",
    "build_reward_preset",
    "build_votesite_preset",
    "generate_from_issue",
    "generate_preset",
    "normalize_domain",
    "plan_preset",
    "require_issue_number",
    "resolve_kind",
    "write_plan",
)
