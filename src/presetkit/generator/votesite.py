# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build VoteSite presets from issue form submissions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from ..config import PresetkitSettings
from ..types import PRESET_SCHEMA_VERSION, Category, JSONValue, PresetKind
from .fields import (
    boolean_string,
    field_value,
    integer_string,
    merge_domains,
    normalize_domain,
    require,
    require_prefix,
    slugify_domain,
)
from .models import PresetPlan

DOMAIN_LABEL: Final[str] = "Domain (no protocol)"
EXTRA_DOMAINS_LABEL: Final[str] = "Extra domains (comma separated)"
PRESET_ID_LABEL: Final[str] = "Preset ID"
SITE_KEY_LABEL: Final[str] = "VoteSite key (siteKey)"
DISPLAY_NAME_LABEL: Final[str] = "Display name (displayName)"
SERVICE_SITE_LABEL: Final[str] = "ServiceSite (required)"
VOTE_URL_LABEL: Final[str] = "Default VoteURL placeholder"
VOTE_DELAY_LABEL: Final[str] = "VoteDelay (optional)"
WAIT_UNTIL_LABEL: Final[str] = "WaitUntilVoteDelay (optional)"
DAILY_LABEL: Final[str] = "VoteDelayDaily (optional)"
DAILY_HOUR_LABEL: Final[str] = "VoteDelayDailyHour (optional)"

DEFAULT_VOTE_URL: Final[str] = "ADD_VOTE_URL_LATER"
GENERIC_FRAGMENT: Final[str] = "generic.votesites.yml"
MERGE_TARGET: Final[str] = "VoteSites"


def build_votesite_preset(fields: Mapping[str, str], *, settings: PresetkitSettings) -> PresetPlan:
    """Validate a VoteSite submission and return the preset to write.

    Args:
        fields: Parsed issue form fields keyed by label.
        settings: Repository layout settings.

    Returns:
        PresetPlan: Metadata document destined for ``presets/votesites/<domain>.meta.json``.

    Raises:
        SubmissionValidationError: On the first missing or malformed required field.
    """

    domain = require(normalize_domain(fields.get(DOMAIN_LABEL)), field="domain", message="Domain is required")
    preset_id = require_prefix(field_value(fields, PRESET_ID_LABEL), PresetKind.VOTESITE.id_prefix, field="presetId")
    site_key = require(field_value(fields, SITE_KEY_LABEL), field="siteKey", message="siteKey is required")
    display_name = require(
        field_value(fields, DISPLAY_NAME_LABEL),
        field="displayName",
        message="displayName is required",
    )
    service_site = require(
        field_value(fields, SERVICE_SITE_LABEL),
        field="serviceSite",
        message="serviceSite is required",
    )

    extra = field_value(fields, EXTRA_DOMAINS_LABEL)
    domains = merge_domains(domain, extra.split(",") if extra else ())
    folder = f"{settings.presets_dir}/{Category.VOTESITES.value}"

    document: dict[str, JSONValue] = {
        "schemaVersion": PRESET_SCHEMA_VERSION,
        "id": preset_id,
        "display": {
            "name": f"{display_name} (generic)",
            "description": f"Generic {display_name} VoteSite preset.",
        },
        "match": {
            "domains": domains,
            "keywords": [site_key.lower(), display_name.lower()],
        },
        "placeholders": _placeholders(
            fields,
            site_key=site_key,
            display_name=display_name,
            service_site=service_site,
        ),
        "fragments": [{"path": f"{folder}/{GENERIC_FRAGMENT}", "mergeInto": MERGE_TARGET}],
        "verified": False,
    }
    return PresetPlan(
        kind=PresetKind.VOTESITE,
        preset_id=preset_id,
        meta_path=f"{folder}/{slugify_domain(domain)}{settings.meta_suffix}",
        document=document,
    )


def _placeholders(
    fields: Mapping[str, str],
    *,
    site_key: str,
    display_name: str,
    service_site: str,
) -> dict[str, JSONValue]:
    # Blank optional defaults are omitted when the preset is rendered.
    slots = (
        ("siteKey", "VoteSite key", site_key),
        ("displayName", "VoteSite display name", display_name),
        ("serviceSite", "ServiceSite", service_site),
        ("voteURL", "Vote URL", field_value(fields, VOTE_URL_LABEL) or DEFAULT_VOTE_URL),
        ("voteDelay", "VoteDelay (blank = omit)", integer_string(field_value(fields, VOTE_DELAY_LABEL))),
        (
            "waitUntilVoteDelay",
            "WaitUntilVoteDelay (true/false, blank = omit)",
            boolean_string(field_value(fields, WAIT_UNTIL_LABEL)),
        ),
        (
            "voteDelayDaily",
            "VoteDelayDaily (true/false, blank = omit)",
            boolean_string(field_value(fields, DAILY_LABEL)),
        ),
        (
            "voteDelayDailyHour",
            "VoteDelayDailyHour (0–23, blank = omit)",
            integer_string(field_value(fields, DAILY_HOUR_LABEL)),
        ),
    )
    return {name: {"type": "string", "label": label, "default": default} for name, label, default in slots}


__all__ = ["DEFAULT_VOTE_URL", "build_votesite_preset"]
