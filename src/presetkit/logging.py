# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers with optional colour and emoji support."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Literal

from rich.console import Console


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _cached_console(color: bool, emoji: bool, tty: bool) -> Console:
    color_system: Literal["auto"] | None = "auto" if color and tty else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def get_console(*, color: bool = True, emoji: bool = True) -> Console:
    """Return a Rich console configured for ``color`` and ``emoji`` preferences.

    Consoles are cached per preference and TTY state and always write to the
    current ``sys.stdout``.
    """

    return _cached_console(color, emoji, detect_tty())


def _emoji(symbol: str, enable: bool) -> str:
    return f"{symbol} " if enable else ""


def info(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit an informational message."""

    console.print(f"{_emoji('ℹ️', use_emoji)}{msg}", markup=False)


def ok(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit a success message."""

    console.print(f"{_emoji('✅', use_emoji)}{msg}", style="green", markup=False)


def warn(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit a warning message."""

    console.print(f"{_emoji('⚠️', use_emoji)}{msg}", style="yellow", markup=False)


def fail(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit an error message."""

    console.print(f"{_emoji('❌', use_emoji)}{msg}", style="bold red", markup=False)


__all__ = ["detect_tty", "fail", "get_console", "info", "ok", "warn"]
