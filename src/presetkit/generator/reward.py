# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build inline Reward presets and their fragment templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..config import PresetkitSettings
from ..errors import SubmissionValidationError
from ..types import PRESET_SCHEMA_VERSION, Category, JSONValue, PresetKind, RewardType
from .fields import field_value, require, require_prefix, slugify_id
from .models import PlannedFile, PresetPlan

PRESET_ID_LABEL: Final[str] = "Preset ID"
DISPLAY_NAME_LABEL: Final[str] = "Display name"
REWARD_TYPE_LABEL: Final[str] = "Reward type"
DEFAULT_LINES_LABEL: Final[str] = "Default lines (one per line)"

MERGE_TARGET: Final[str] = "VoteSites.<siteKey>.Rewards"


def parse_reward_type(raw: str) -> RewardType:
    """Return the reward type named by ``raw`` (case-insensitive).

    Raises:
        SubmissionValidationError: If ``raw`` is not ``commands`` or ``messages``.
    """

    try:
        return RewardType(raw.strip().lower())
    except ValueError as exc:
        raise SubmissionValidationError("rewardType", "Reward type must be commands or messages") from exc


def render_fragment(reward_type: RewardType) -> str:
    """Return the YAML fragment template for ``reward_type``."""

    return f"{reward_type.header}:\n<{reward_type.block_key}>\n"


def build_reward_preset(fields: Mapping[str, str], *, settings: PresetkitSettings) -> PresetPlan:
    """Validate a Reward submission and return the preset plus its fragment.

    Args:
        fields: Parsed issue form fields keyed by label.
        settings: Repository layout settings.

    Returns:
        PresetPlan: Metadata document and one ``.rewardblock.yml`` fragment.

    Raises:
        SubmissionValidationError: On the first missing or malformed required field.
    """

    preset_id = require_prefix(field_value(fields, PRESET_ID_LABEL), PresetKind.REWARD.id_prefix, field="presetId")
    display_name = require(
        field_value(fields, DISPLAY_NAME_LABEL),
        field="displayName",
        message="display name is required",
    )
    reward_type = parse_reward_type(field_value(fields, REWARD_TYPE_LABEL))
    lines = require(field_value(fields, DEFAULT_LINES_LABEL), field="defaultLines", message="Default lines required")

    folder = f"{settings.presets_dir}/{Category.REWARDS.value}"
    slug = slugify_id(preset_id)
    fragment = PlannedFile(f"{folder}/{slug}{settings.fragment_suffix}", render_fragment(reward_type))

    document: dict[str, JSONValue] = {
        "schemaVersion": PRESET_SCHEMA_VERSION,
        "id": preset_id,
        "display": {
            "name": display_name,
            "description": f"Inline Reward ({reward_type.value}) merged into {MERGE_TARGET}.",
        },
        "match": {"keywords": ["reward", "inline", reward_type.value]},
        "placeholders": {
            reward_type.value: {
                "type": "string",
                "label": f"{reward_type.header} (one per line)",
                "default": lines,
            },
        },
        "fragments": [{"path": fragment.relative_path, "mergeInto": MERGE_TARGET}],
        "verified": False,
    }
    return PresetPlan(
        kind=PresetKind.REWARD,
        preset_id=preset_id,
        meta_path=f"{folder}/{slug}{settings.meta_suffix}",
        document=document,
        fragments=(fragment,),
    )


__all__ = ["build_reward_preset", "parse_reward_type", "render_fragment"]
