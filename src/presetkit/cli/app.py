# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the preset commands."""

from __future__ import annotations

import typer

from .generate import generate_command
from .index import build_index_command, check_index_command

app = typer.Typer(
    name="presetkit",
    help="Maintain the preset catalog and its generated index.",
    add_completion=False,
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)
app.command("build-index")(build_index_command)
app.command("check-index")(check_index_command)
app.command("generate")(generate_command)


def main() -> None:
    """Run the presetkit CLI."""

    app()


__all__ = ["app", "main"]
