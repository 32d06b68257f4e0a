# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Field extraction and normalisation helpers shared by preset builders."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Final

from ..errors import SubmissionValidationError

_SCHEME_PATTERN: Final[re.Pattern[str]] = re.compile(r"^https?://")
_WWW_PATTERN: Final[re.Pattern[str]] = re.compile(r"^www\.")
_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(r"/.*$", re.DOTALL)
_INTEGER_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_BOOLEAN_VALUES: Final[frozenset[str]] = frozenset({"true", "false"})


def field_value(fields: Mapping[str, str], label: str) -> str:
    """Return the trimmed value for ``label``; missing and empty are equivalent."""

    return (fields.get(label) or "").strip()


def require(value: str, *, field: str, message: str) -> str:
    """Return ``value`` unless it is empty.

    Raises:
        SubmissionValidationError: If ``value`` is empty.
    """

    if not value:
        raise SubmissionValidationError(field, message)
    return value


def require_prefix(value: str, prefix: str, *, field: str) -> str:
    """Return ``value`` when it starts with ``prefix`` and names something after it.

    Raises:
        SubmissionValidationError: If ``value`` lacks the namespace prefix or has nothing after it.
    """

    if not value.startswith(prefix):
        raise SubmissionValidationError(field, f"Preset ID must start with {prefix}")
    if not value[len(prefix) :].strip():
        raise SubmissionValidationError(field, f"Preset ID must name something after {prefix}")
    return value


def normalize_domain(raw: str | None) -> str:
    """Return ``raw`` as a bare lowercase hostname.

    Strips surrounding whitespace, an ``http(s)://`` scheme, one leading
    ``www.`` and anything from the first ``/`` onwards.
    """

    value = (raw or "").strip().lower()
    value = _SCHEME_PATTERN.sub("", value, count=1)
    value = _WWW_PATTERN.sub("", value, count=1)
    return _PATH_PATTERN.sub("", value, count=1)


def merge_domains(primary: str, extra: Iterable[str]) -> list[str]:
    """Return ``primary`` followed by each new, non-blank normalised ``extra`` domain."""

    domains = [primary]
    for candidate in extra:
        normalised = normalize_domain(candidate)
        if normalised and normalised not in domains:
            domains.append(normalised)
    return domains


def boolean_string(raw: str) -> str:
    """Return ``"true"``/``"false"`` for a recognised boolean string, else ``""``."""

    value = raw.strip().lower()
    return value if value in _BOOLEAN_VALUES else ""


def integer_string(raw: str) -> str:
    """Return ``raw`` trimmed when it is a non-negative integer string, else ``""``."""

    value = raw.strip()
    return value if _INTEGER_PATTERN.fullmatch(value) else ""


def slugify_domain(domain: str) -> str:
    """Return the file slug for ``domain``."""

    return domain.replace(".", "_")


def slugify_id(preset_id: str) -> str:
    """Return the file slug for ``preset_id``."""

    return preset_id.replace(":", "_").replace("/", "_")


__all__ = [
    "boolean_string",
    "field_value",
    "integer_string",
    "merge_domains",
    "normalize_domain",
    "require",
    "require_prefix",
    "slugify_domain",
    "slugify_id",
]
