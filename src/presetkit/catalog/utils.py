# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reading loosely-typed metadata fields and normalising tag lists."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from ..types import JSONValue

WWW_PREFIX: Final[str] = "www."


def lookup(document: Mapping[str, JSONValue], *keys: str) -> JSONValue | None:
    """Return the value found by following ``keys`` through nested objects.

    Args:
        document: Root JSON object.
        *keys: Successive object keys, e.g. ``("display", "name")``.

    Returns:
        JSONValue | None: The nested value, or ``None`` when any step is absent
        or not an object.
    """

    current: JSONValue | None = document
    for key in keys:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def non_blank_string(value: JSONValue | None) -> str | None:
    """Return ``value`` when it is a string with visible content, otherwise ``None``."""

    if isinstance(value, str) and value.strip():
        return value
    return None


def string_or(value: JSONValue | None, default: str) -> str:
    """Return ``value`` when it is a string, otherwise ``default``."""

    return value if isinstance(value, str) else default


def is_true(value: JSONValue | None) -> bool:
    """Return ``True`` only for the JSON literal ``true``."""

    return value is True


def normalize_keywords(values: JSONValue | None) -> tuple[str, ...]:
    """Return trimmed, lowercased, de-duplicated and sorted keywords.

    Non-array input yields an empty tuple; non-string and blank items are dropped.
    """

    return _normalize(values, strip_www=False)


def normalize_domains(values: JSONValue | None) -> tuple[str, ...]:
    """Return normalised domains with a single leading ``www.`` removed.

    Applies the keyword rules first, then strips ``www.`` before de-duplicating.
    """

    return _normalize(values, strip_www=True)


def _normalize(values: JSONValue | None, *, strip_www: bool) -> tuple[str, ...]:
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
        return ()
    cleaned: list[str] = []
    for item in values:
        if not isinstance(item, str) or not item.strip():
            continue
        token = item.strip().lower()
        if strip_www and token.startswith(WWW_PREFIX):
            token = token[len(WWW_PREFIX) :]
        cleaned.append(token)
    return tuple(sorted(_dedupe(cleaned)))


def _dedupe(items: Iterable[str]) -> Sequence[str]:
    """Return ``items`` with duplicates removed while preserving order."""

    seen: set[str] = set()
    ordered: list[str] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        ordered.append(item)
    return ordered


__all__ = [
    "is_true",
    "lookup",
    "non_blank_string",
    "normalize_domains",
    "normalize_keywords",
    "string_or",
]
