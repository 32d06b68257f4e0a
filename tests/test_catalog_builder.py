# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for preset index derivation."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest

from presetkit.catalog import PresetIndexBuilder, build_index, check_index
from presetkit.errors import (
    CatalogIntegrityError,
    CatalogValidationError,
    DuplicatePresetIdError,
    MissingRootError,
)
from presetkit.types import Category


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _preset(preset_id: str, name: str = "Name", **extra: object) -> dict:
    return {"schemaVersion": 1, "id": preset_id, "display": {"name": name}, **extra}


def test_round_trip_normalises_domains_and_keywords(repo_root: Path, write_json) -> None:
    write_json(
        "presets/votesites/example_com.meta.json",
        {
            "id": "votesite:example",
            "display": {"name": "Example"},
            "match": {"domains": ["WWW.Example.com ", "example.com"], "keywords": ["Foo", " foo"]},
        },
    )

    result = build_index(repo_root)

    (entry,) = _read(result.output_path)["entries"]
    assert entry == {
        "id": "votesite:example",
        "category": "votesites",
        "name": "Example",
        "description": "",
        "keywords": ["foo"],
        "domains": ["example.com"],
        "metaPath": "presets/votesites/example_com.meta.json",
        "updatedAt": None,
        "verified": False,
    }


def test_index_document_shape(repo_root: Path, write_json) -> None:
    write_json("presets/rewards/a.meta.json", _preset("reward:a"))
    moment = datetime(2026, 10, 18, 4, 38, 0, 123456, tzinfo=UTC)

    result = PresetIndexBuilder(repo_root).build(generated_at=moment)

    text = result.output_path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    document = json.loads(text)
    assert list(document) == ["schemaVersion", "generatedAt", "entries"]
    assert document["schemaVersion"] == 1
    assert document["generatedAt"] == "2026-10-18T04:38:00.123Z"
    assert result.output_path == repo_root / "index.json"
    assert result.entry_count == 1


def test_entries_sorted_by_category_then_id(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/b.meta.json", _preset("votesite:b"))
    write_json("presets/votesites/a.meta.json", _preset("votesite:z"))
    write_json("presets/rewards/r.meta.json", _preset("reward:r"))
    write_json("presets/milestones/m.meta.json", _preset("milestone:m"))
    write_json("presets/misc/x.meta.json", _preset("misc:x"))
    write_json("presets/top.meta.json", _preset("misc:top"))
    write_json("bundles/starter.bundle.json", {"id": "bundle:starter", "display": {"name": "Starter"}})

    entries = _read(build_index(repo_root).output_path)["entries"]

    keys = [(entry["category"], entry["id"]) for entry in entries]
    assert keys == [
        ("bundles", "bundle:starter"),
        ("milestones", "milestone:m"),
        ("other", "misc:top"),
        ("other", "misc:x"),
        ("rewards", "reward:r"),
        ("votesites", "votesite:b"),
        ("votesites", "votesite:z"),
    ]
    assert keys == sorted(keys)


def test_category_comes_from_discovery_root(repo_root: Path, write_json) -> None:
    write_json("presets/other/presets/votesites/nested.meta.json", _preset("x:nested"))
    write_json("bundles/votesites/in_bundles.bundle.json", {"id": "b:1", "display": {"name": "B"}})

    index = PresetIndexBuilder(repo_root).collect()

    categories = {entry.id: entry.category for entry in index.entries}
    assert categories == {"x:nested": Category.OTHER, "b:1": Category.BUNDLES}


def test_bundle_projection(repo_root: Path, write_json) -> None:
    write_json(
        "bundles/packs/starter.bundle.json",
        {
            "id": "bundle:starter",
            "display": {"name": "Starter", "description": "Everything to begin"},
            "keywords": ["Starter", "starter", "", 3, "Pack"],
            "match": {"domains": ["ignored.example"]},
            "updatedAt": "2026-01-01T00:00:00Z",
            "verified": True,
        },
    )

    (entry,) = _read(build_index(repo_root).output_path)["entries"]

    assert entry["category"] == "bundles"
    assert entry["description"] == "Everything to begin"
    assert entry["keywords"] == ["pack", "starter"]
    assert entry["domains"] == []
    assert entry["metaPath"] == "bundles/packs/starter.bundle.json"
    assert entry["updatedAt"] == "2026-01-01T00:00:00Z"
    assert entry["verified"] is True


def test_optional_preset_fields_fall_back(repo_root: Path, write_json) -> None:
    write_json(
        "presets/votesites/a.meta.json",
        _preset("votesite:a", updatedAt="  ", verified="true", display={"name": "A", "description": 5}),
    )

    (entry,) = _read(build_index(repo_root).output_path)["entries"]

    assert entry["updatedAt"] is None
    assert entry["verified"] is False
    assert entry["description"] == ""


def test_running_twice_only_changes_generated_at(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a", match={"keywords": ["B", "a"]}))
    write_json("bundles/b.bundle.json", {"id": "bundle:b", "display": {"name": "B"}})

    first = _read(build_index(repo_root).output_path)
    second = _read(build_index(repo_root).output_path)

    first.pop("generatedAt")
    second.pop("generatedAt")
    assert first == second


def test_duplicate_id_aborts_without_writing(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("shared:id"))
    write_json("bundles/a.bundle.json", {"id": "shared:id", "display": {"name": "Bundle"}})

    with pytest.raises(DuplicatePresetIdError) as excinfo:
        build_index(repo_root)

    assert excinfo.value.preset_id == "shared:id"
    assert excinfo.value.first_path == "presets/votesites/a.meta.json"
    assert excinfo.value.second_path == "bundles/a.bundle.json"
    assert "Duplicate id: shared:id" in str(excinfo.value)
    assert not (repo_root / "index.json").exists()


def test_failed_build_keeps_previous_index(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    index_path = build_index(repo_root).output_path
    before = index_path.read_text(encoding="utf-8")
    write_json("presets/votesites/b.meta.json", _preset("votesite:a"))

    with pytest.raises(DuplicatePresetIdError):
        build_index(repo_root)

    assert index_path.read_text(encoding="utf-8") == before
    assert [path.name for path in repo_root.iterdir() if path.name.endswith(".tmp")] == []


def test_bundle_missing_id_names_path(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    write_json("bundles/broken.bundle.json", {"display": {"name": "Broken"}})

    with pytest.raises(CatalogValidationError, match="Bundle missing id/display.name: bundles/broken.bundle.json"):
        build_index(repo_root)

    assert not (repo_root / "index.json").exists()


@pytest.mark.parametrize("bundle_id", ["", "   "])
def test_bundle_blank_id_names_path(repo_root: Path, write_json, bundle_id: str) -> None:
    write_json("bundles/empty.bundle.json", {"id": bundle_id, "display": {"name": "Empty"}})

    with pytest.raises(CatalogValidationError, match="Bundle missing id/display.name: bundles/empty.bundle.json") as excinfo:
        build_index(repo_root)

    assert excinfo.value.path == "bundles/empty.bundle.json"
    assert not (repo_root / "index.json").exists()


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"display": {"name": "x"}}, "Missing/invalid meta.id in presets/votesites/bad.meta.json"),
        ({"id": "   ", "display": {"name": "x"}}, "Missing/invalid meta.id"),
        ({"id": "votesite:bad"}, "Missing/invalid display.name in presets/votesites/bad.meta.json"),
        ({"id": "votesite:bad", "display": {"name": " "}}, "Missing/invalid display.name"),
    ],
)
def test_preset_missing_required_fields(repo_root: Path, write_json, payload: dict, message: str) -> None:
    write_json("presets/votesites/bad.meta.json", payload)

    with pytest.raises(CatalogValidationError, match=message) as excinfo:
        build_index(repo_root)

    assert excinfo.value.path == "presets/votesites/bad.meta.json"


def test_invalid_json_is_an_integrity_error(repo_root: Path) -> None:
    target = repo_root / "presets" / "votesites" / "bad.meta.json"
    target.parent.mkdir(parents=True)
    target.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError, match="presets/votesites/bad.meta.json"):
        build_index(repo_root)


def test_invalid_utf8_is_an_integrity_error(repo_root: Path) -> None:
    target = repo_root / "presets" / "votesites" / "bad.meta.json"
    target.parent.mkdir(parents=True)
    target.write_bytes(b'{"id": "votesite:\xff", "display": {"name": "Bad"}}')

    with pytest.raises(CatalogIntegrityError, match="presets/votesites/bad.meta.json: failed to parse catalog JSON"):
        build_index(repo_root)

    assert not (repo_root / "index.json").exists()


def test_non_object_document_is_an_integrity_error(repo_root: Path, write_json) -> None:
    target = repo_root / "presets" / "list.meta.json"
    target.write_text("[]", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError, match="expected a JSON object"):
        build_index(repo_root)


def test_missing_roots_are_fatal(tmp_path: Path) -> None:
    with pytest.raises(MissingRootError, match="No presets/ or bundles/ folder found"):
        build_index(tmp_path)


def test_bundles_root_alone_is_enough(tmp_path: Path) -> None:
    (tmp_path / "bundles").mkdir()
    (tmp_path / "bundles" / "x.bundle.json").write_text(
        json.dumps({"id": "bundle:x", "display": {"name": "X"}}),
        encoding="utf-8",
    )

    assert build_index(tmp_path).entry_count == 1


def test_unrelated_files_are_ignored(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    write_json("presets/votesites/a.json", {"not": "indexed"})
    (repo_root / "presets" / "votesites" / "generic.votesites.yml").write_text("VoteSites: {}\n", encoding="utf-8")
    write_json("presets/b.bundle.json", {"id": "bundle:wrong-root", "display": {"name": "B"}})

    ids = [entry.id for entry in PresetIndexBuilder(repo_root).collect().entries]

    assert ids == ["votesite:a"]


def test_check_index_reports_missing_and_up_to_date(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))

    assert check_index(repo_root).missing is True

    build_index(repo_root)
    result = check_index(repo_root)
    assert result.up_to_date is True
    assert not (repo_root / "index.json.tmp").exists()


def test_check_index_reports_differences(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    write_json("presets/votesites/b.meta.json", _preset("votesite:b"))
    build_index(repo_root)
    before = (repo_root / "index.json").read_text(encoding="utf-8")

    write_json("presets/votesites/a.meta.json", _preset("votesite:a", name="Renamed"))
    (repo_root / "presets" / "votesites" / "b.meta.json").unlink()
    write_json("presets/rewards/c.meta.json", _preset("reward:c"))

    result = check_index(repo_root)

    assert result.up_to_date is False
    assert result.added_ids == ("reward:c",)
    assert result.removed_ids == ("votesite:b",)
    assert result.changed_ids == ("votesite:a",)
    assert (repo_root / "index.json").read_text(encoding="utf-8") == before


def test_check_index_reports_reordered_entries(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    write_json("presets/votesites/b.meta.json", _preset("votesite:b"))
    index_path = build_index(repo_root).output_path
    document = _read(index_path)
    document["entries"].reverse()
    index_path.write_text(json.dumps(document), encoding="utf-8")

    result = check_index(repo_root)

    assert result.order_changed is True
    assert result.added_ids == result.removed_ids == result.changed_ids == ()
    assert result.up_to_date is False


def test_check_index_reports_schema_version_change(repo_root: Path, write_json) -> None:
    write_json("presets/votesites/a.meta.json", _preset("votesite:a"))
    index_path = build_index(repo_root).output_path
    document = _read(index_path)
    document["schemaVersion"] = 0
    index_path.write_text(json.dumps(document), encoding="utf-8")

    result = check_index(repo_root)

    assert result.schema_version_changed is True
    assert result.order_changed is False
    assert result.changed_ids == ()
    assert result.up_to_date is False
