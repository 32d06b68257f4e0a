# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for metadata field helpers and tag normalisation."""

from __future__ import annotations

import pytest

from presetkit.catalog.utils import lookup, non_blank_string, normalize_domains, normalize_keywords


def test_normalize_domains_strips_www_and_dedupes() -> None:
    domains = normalize_domains(["www.B.example", " b.example", "A.example", "www.www.c.example", "", None, 7])
    assert domains == ("a.example", "b.example", "www.c.example")
    for domain in domains:
        assert domain == domain.strip().lower()


def test_normalize_keywords_keeps_www() -> None:
    assert normalize_keywords(["www.Tag", "tag", " Tag "]) == ("tag", "www.tag")


@pytest.mark.parametrize("value", [None, "example.com", {"a": "b"}, 3])
def test_non_array_input_is_empty(value: object) -> None:
    assert normalize_domains(value) == ()
    assert normalize_keywords(value) == ()


def test_lookup_walks_nested_objects() -> None:
    document = {"display": {"name": "X"}, "match": []}
    assert lookup(document, "display", "name") == "X"
    assert lookup(document, "display", "missing") is None
    assert lookup(document, "match", "domains") is None


def test_non_blank_string() -> None:
    assert non_blank_string(" x ") == " x "
    assert non_blank_string("   ") is None
    assert non_blank_string(1) is None
