# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands that build and verify the preset index."""

from __future__ import annotations

from pathlib import Path

import typer

from ..catalog import IndexCheckResult, build_index, check_index
from ..logging import fail, info, ok
from .shared import EXIT_FAILURE, CLIOutput, ColorOption, EmojiOption, RootOption, build_output, exit_on_error


def build_index_command(
    root: RootOption = Path("."),
    emoji: EmojiOption = True,
    color: ColorOption = True,
) -> None:
    """Regenerate index.json from every preset and bundle document."""

    output = build_output(color=color, emoji=emoji)
    with exit_on_error(output):
        result = build_index(root)
    ok(output.console, f"Wrote {result.output_path} ({result.entry_count} entries)", use_emoji=output.emoji)


def check_index_command(
    root: RootOption = Path("."),
    emoji: EmojiOption = True,
    color: ColorOption = True,
) -> None:
    """Fail when index.json does not match the preset and bundle documents."""

    output = build_output(color=color, emoji=emoji)
    with exit_on_error(output):
        result = check_index(root)
    if result.up_to_date:
        count = len(result.expected.entries)
        ok(output.console, f"{result.index_path} is up to date ({count} entries)", use_emoji=output.emoji)
        return
    _report_stale(output, result)
    raise typer.Exit(code=EXIT_FAILURE)


def _report_stale(output: CLIOutput, result: IndexCheckResult) -> None:
    if result.missing:
        fail(output.console, f"{result.index_path} does not exist; run build-index", use_emoji=output.emoji)
        return
    fail(output.console, f"{result.index_path} is out of date; run build-index", use_emoji=output.emoji)
    details = (
        ("added", result.added_ids),
        ("removed", result.removed_ids),
        ("changed", result.changed_ids),
    )
    for label, ids in details:
        if ids:
            info(output.console, f"{label}: {', '.join(ids)}", use_emoji=output.emoji)
    if result.order_changed:
        info(output.console, "entry order differs", use_emoji=output.emoji)
    if result.schema_version_changed:
        info(output.console, "schemaVersion differs", use_emoji=output.emoji)


__all__ = ["build_index_command", "check_index_command"]
