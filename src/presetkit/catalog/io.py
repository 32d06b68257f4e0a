# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading catalog JSON documents and writing generated files."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from ..errors import CatalogIntegrityError
from ..types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse JSON schema") from exc
    return _ensure_json_object(payload, context=str(path))


def load_document(path: Path, *, display_path: str | None = None) -> Mapping[str, JSONValue]:
    """Load a catalog metadata document from disk.

    Args:
        path: Filesystem path to the JSON document.
        display_path: Optional repository-relative path used in error messages.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogIntegrityError: If the document is not UTF-8 JSON or not a JSON object.
    """
    context = display_path or str(path)
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{context}: failed to parse catalog JSON ({exc.msg})") from exc
        except UnicodeDecodeError as exc:
            raise CatalogIntegrityError(f"{context}: failed to parse catalog JSON ({exc.reason})") from exc
    return _ensure_json_object(payload, context=context)


def dump_json(payload: Mapping[str, JSONValue]) -> str:
    """Return ``payload`` serialised with two-space indent and a trailing newline."""

    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_text_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never observe a partial file.

    The payload is written to a temporary sibling and moved into place with
    :func:`os.replace`, creating parent directories as needed.

    Args:
        path: Destination file path.
        content: Text written using UTF-8 encoding.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise


def write_text_new(path: Path, content: str, *, overwrite: bool = False) -> None:
    """Write ``content`` to ``path``, refusing to replace an existing file.

    Args:
        path: Destination file path.
        content: Text written using UTF-8 encoding.
        overwrite: ``True`` to replace an existing file instead of failing.

    Raises:
        FileExistsError: If ``path`` exists and ``overwrite`` is ``False``.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    mode = "w" if overwrite else "x"
    with path.open(mode, encoding="utf-8", newline="\n") as handle:
        handle.write(content)


__all__ = ["dump_json", "load_document", "load_schema", "write_text_atomic", "write_text_new"]


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Ensure ``value`` is a JSON object, raising on type mismatch.

    Args:
        value: Parsed JSON payload to validate.
        context: Human-readable context string used in error messages.

    Returns:
        Mapping[str, JSONValue]: Validated JSON object.

    Raises:
        CatalogIntegrityError: If ``value`` is not a mapping.
    """

    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected a JSON object")
    return value
