# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared helpers for presetkit CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer
from rich.console import Console

from ..errors import PresetkitError
from ..logging import fail, get_console

EXIT_FAILURE: Final[int] = 1

RootOption = Annotated[
    Path,
    typer.Option(
        "--root",
        "-r",
        help="Repository root containing presets/ and bundles/.",
        file_okay=False,
        resolve_path=True,
    ),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in output.")]
ColorOption = Annotated[bool, typer.Option("--color/--no-color", help="Toggle coloured output.")]


@dataclass(slots=True, frozen=True)
class CLIOutput:
    """Console plus presentation flags shared by a command invocation."""

    console: Console
    emoji: bool


def build_output(*, color: bool, emoji: bool) -> CLIOutput:
    """Return the console bundle for the requested presentation flags."""

    return CLIOutput(console=get_console(color=color, emoji=emoji), emoji=emoji)


@contextmanager
def exit_on_error(output: CLIOutput) -> Iterator[None]:
    """Translate :class:`PresetkitError` into a failure line and exit status 1."""

    try:
        yield
    except PresetkitError as exc:
        fail(output.console, f"Error: {exc}", use_emoji=output.emoji)
        raise typer.Exit(code=EXIT_FAILURE) from exc


__all__ = [
    "EXIT_FAILURE",
    "CLIOutput",
    "ColorOption",
    "EmojiOption",
    "RootOption",
    "build_output",
    "exit_on_error",
]
