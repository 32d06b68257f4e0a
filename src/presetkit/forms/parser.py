# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parse GitHub issue form bodies into flat field mappings."""

from __future__ import annotations

import re
from typing import Final

HEADER_PATTERN: Final[re.Pattern[str]] = re.compile(r"^###\s+(.*?)\s*$")
LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r?\n")
NO_RESPONSE_SENTINELS: Final[frozenset[str]] = frozenset({"no response", "_no response_"})


def parse_issue_form(body: str | None) -> dict[str, str]:
    """Return the ``### Field`` sections of ``body`` keyed by field name.

    Each header line starts a field whose value is every following line up to
    the next header, joined with newlines and trimmed. Text before the first
    header is ignored, a repeated header replaces the earlier value, and the
    "No response" placeholder GitHub inserts for skipped inputs becomes an
    empty string.

    Args:
        body: Raw issue body; ``None`` is treated as empty.

    Returns:
        dict[str, str]: Field values keyed by trimmed header text. Empty when
        ``body`` has no headers.
    """

    fields: dict[str, str] = {}
    current: str | None = None
    buffer: list[str] = []

    for line in LINE_BREAK.split(body or ""):
        match = HEADER_PATTERN.match(line)
        if match:
            if current is not None:
                fields[current] = _clean_value(buffer)
            current = match.group(1).strip()
            buffer = []
        elif current is not None:
            buffer.append(line)
    if current is not None:
        fields[current] = _clean_value(buffer)
    return fields


def _clean_value(lines: list[str]) -> str:
    value = "\n".join(lines).strip()
    if value.lower() in NO_RESPONSE_SENTINELS:
        return ""
    return value


__all__ = ["NO_RESPONSE_SENTINELS", "parse_issue_form"]
