# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Turn an issue form submission into preset files and refresh the index."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from ..catalog.builder import PresetIndexBuilder
from ..catalog.io import write_text_new
from ..catalog.schema import SchemaRepository, default_schemas
from ..config import PresetkitSettings, load_settings
from ..errors import (
    IndexRebuildError,
    MissingIssueNumberError,
    PresetExistsError,
    PresetkitError,
    SubmissionValidationError,
)
from ..forms import parse_issue_form
from ..types import PresetKind
from .models import GenerationResult, PresetPlan
from .reward import build_reward_preset
from .votesite import build_votesite_preset

LOGGER = logging.getLogger(__name__)


def resolve_kind(explicit: str | None, *, title: str | None = None) -> PresetKind:
    """Return the preset kind requested by ``explicit`` or inferred from ``title``.

    An explicit kind always wins. Otherwise an issue title mentioning
    "reward" selects :attr:`PresetKind.REWARD` and anything else selects
    :attr:`PresetKind.VOTESITE`.

    Raises:
        SubmissionValidationError: If ``explicit`` names an unknown kind.
    """

    if explicit and explicit.strip():
        try:
            return PresetKind(explicit.strip().lower())
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in PresetKind)
            raise SubmissionValidationError("kind", f"Unknown preset kind '{explicit}' (expected {choices})") from exc
    if "reward" in (title or "").lower():
        return PresetKind.REWARD
    return PresetKind.VOTESITE


def require_issue_number(raw: str | int | None) -> str:
    """Return ``raw`` as a trimmed string.

    Raises:
        MissingIssueNumberError: If no issue number was supplied.
    """

    value = "" if raw is None else str(raw).strip()
    if not value:
        raise MissingIssueNumberError("Missing issue number (ISSUE_NUMBER)")
    return value


def plan_preset(
    kind: PresetKind,
    fields: Mapping[str, str],
    *,
    settings: PresetkitSettings,
    schemas: SchemaRepository | None = None,
) -> PresetPlan:
    """Validate ``fields`` for ``kind`` and return the files to create.

    Raises:
        SubmissionValidationError: If a submission field is missing or invalid.
        CatalogValidationError: If the generated document violates the preset schema.
    """

    if kind is PresetKind.REWARD:
        plan = build_reward_preset(fields, settings=settings)
    else:
        plan = build_votesite_preset(fields, settings=settings)
    (schemas or default_schemas()).validate_preset(plan.document, path=plan.meta_path)
    return plan


def write_plan(plan: PresetPlan, repo_root: Path, *, overwrite: bool = False) -> tuple[Path, ...]:
    """Create every file in ``plan`` beneath ``repo_root``.

    All targets are checked before anything is written, so an existing file
    leaves the repository untouched.

    Raises:
        PresetExistsError: If a target exists and ``overwrite`` is ``False``.
    """

    targets = [(planned.target(repo_root), planned) for planned in plan.files]
    if not overwrite:
        for path, _ in targets:
            if path.exists():
                raise PresetExistsError(path)
    written: list[Path] = []
    for path, planned in targets:
        try:
            write_text_new(path, planned.content, overwrite=overwrite)
        except FileExistsError as exc:
            raise PresetExistsError(path) from exc
        LOGGER.debug("wrote %s", planned.relative_path)
        written.append(path)
    return tuple(written)


def generate_preset(
    repo_root: Path,
    kind: PresetKind,
    fields: Mapping[str, str],
    *,
    settings: PresetkitSettings | None = None,
    overwrite: bool = False,
) -> GenerationResult:
    """Write a new preset for ``fields`` and rebuild the index in-process.

    Args:
        repo_root: Repository root containing the catalog.
        kind: Preset shape to generate.
        fields: Parsed issue form fields.
        settings: Optional layout settings; read from ``pyproject.toml`` when omitted.
        overwrite: ``True`` to replace existing preset files.

    Returns:
        GenerationResult: Written files and the refreshed index.

    Raises:
        SubmissionValidationError: If ``fields`` fail validation; nothing is written.
        PresetExistsError: If a target exists and ``overwrite`` is ``False``; nothing is written.
        IndexRebuildError: If the index rebuild fails after the preset files were written.
    """

    resolved = settings if settings is not None else load_settings(repo_root)
    plan = plan_preset(kind, fields, settings=resolved)
    written = write_plan(plan, repo_root, overwrite=overwrite)
    try:
        index = PresetIndexBuilder(repo_root=repo_root, settings=resolved).build()
    except PresetkitError as exc:
        raise IndexRebuildError(
            f"Wrote {plan.meta_path} but rebuilding {resolved.index_file} failed: {exc}",
        ) from exc
    return GenerationResult(plan=plan, written=written, index=index)


def generate_from_issue(
    repo_root: Path,
    *,
    body: str | None,
    issue_number: str | int | None,
    kind: str | None = None,
    title: str | None = None,
    settings: PresetkitSettings | None = None,
    overwrite: bool = False,
) -> GenerationResult:
    """Run the whole pipeline for one issue: parse, generate, and index.

    Raises:
        MissingIssueNumberError: If ``issue_number`` is absent.
        SubmissionValidationError: If the kind or form fields are invalid.
        PresetExistsError: If the preset already exists and ``overwrite`` is ``False``.
        IndexRebuildError: If the follow-up index build fails.
    """

    number = require_issue_number(issue_number)
    preset_kind = resolve_kind(kind, title=title)
    fields = parse_issue_form(body)
    LOGGER.debug("issue #%s: generating %s preset from %d fields", number, preset_kind.value, len(fields))
    return generate_preset(repo_root, preset_kind, fields, settings=settings, overwrite=overwrite)


__all__ = [
    "generate_from_issue",
    "generate_preset",
    "plan_preset",
    "require_issue_number",
    "resolve_kind",
    "write_plan",
]
