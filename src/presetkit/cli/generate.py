# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command that turns an issue form submission into a preset."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..generator import generate_from_issue
from ..logging import info, ok
from .shared import ColorOption, EmojiOption, RootOption, build_output, exit_on_error


def generate_command(
    root: RootOption = Path("."),
    kind: Annotated[
        str | None,
        typer.Option("--kind", envvar="PRESET_KIND", help="Preset kind: votesite or reward."),
    ] = None,
    issue_number: Annotated[
        str | None,
        typer.Option("--issue-number", envvar="ISSUE_NUMBER", help="Issue number the submission came from."),
    ] = None,
    issue_title: Annotated[
        str,
        typer.Option("--issue-title", envvar="ISSUE_TITLE", help="Issue title, used to infer the kind."),
    ] = "",
    issue_body: Annotated[
        str,
        typer.Option("--issue-body", envvar="ISSUE_BODY", help="Issue form markdown body."),
    ] = "",
    body_file: Annotated[
        Path | None,
        typer.Option(
            "--body-file",
            exists=True,
            dir_okay=False,
            readable=True,
            help="Read the issue body from a file instead of --issue-body.",
        ),
    ] = None,
    overwrite: Annotated[
        bool,
        typer.Option("--overwrite", help="Replace preset files that already exist."),
    ] = False,
    emoji: EmojiOption = True,
    color: ColorOption = True,
) -> None:
    """Create preset files from an issue form body and rebuild index.json."""

    output = build_output(color=color, emoji=emoji)
    body = body_file.read_text(encoding="utf-8") if body_file is not None else issue_body
    with exit_on_error(output):
        result = generate_from_issue(
            root,
            body=body,
            issue_number=issue_number,
            kind=kind,
            title=issue_title,
            overwrite=overwrite,
        )
    for path in result.written:
        info(output.console, f"Created {path.relative_to(root).as_posix()}", use_emoji=output.emoji)
    ok(
        output.console,
        f"Generated {result.plan.kind.value} preset {result.plan.preset_id} "
        f"for issue #{issue_number}; wrote {result.index.output_path} ({result.index.entry_count} entries)",
        use_emoji=output.emoji,
    )


__all__ = ["generate_command"]
