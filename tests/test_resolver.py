"""Tests for machine-specific vs. shared path resolution."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

import pytest

from sharedconf.core import ResolutionKind, ResolutionResult, resolve
from sharedconf.errors import InvalidArgumentError


@pytest.fixture()
def roots(tmp_path: Path):
    machine_root = tmp_path / "machine"
    shared_root = tmp_path / "shared"
    machine_root.mkdir()
    shared_root.mkdir()
    return machine_root, shared_root


def _write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_machine_specific_wins_over_shared(roots) -> None:
    machine_root, shared_root = roots
    _write_json(machine_root / "display.json", {"Theme": "Dark"})
    _write_json(shared_root / "display.json", {"Theme": "Light"})

    result = resolve("display.json", machine_root, shared_root)

    assert result.kind is ResolutionKind.MACHINE
    assert result.path == machine_root / "display.json"
    assert json.loads(result.path.read_text(encoding="utf-8")) == {"Theme": "Dark"}


def test_falls_back_to_shared(roots) -> None:
    machine_root, shared_root = roots
    _write_json(shared_root / "mouse.json", {"Speed": 10})

    result = resolve("mouse.json", machine_root, shared_root)

    assert result.kind is ResolutionKind.SHARED
    assert result.path == shared_root / "mouse.json"
    assert result.found


def test_not_found_is_a_result_not_an_error(roots) -> None:
    machine_root, shared_root = roots

    result = resolve("sound.json", machine_root, shared_root)

    assert result == ResolutionResult(ResolutionKind.NOT_FOUND)
    assert result.path is None
    assert not result.found
    assert result.to_dict() == {"kind": "not_found", "path": None}


def test_invalid_machine_content_still_wins(roots) -> None:
    machine_root, shared_root = roots
    (machine_root / "display.json").write_text("{not json", encoding="utf-8")
    _write_json(shared_root / "display.json", {"Theme": "Light"})

    assert resolve("display.json", machine_root, shared_root).kind is ResolutionKind.MACHINE


def test_directory_items_resolve(roots) -> None:
    machine_root, shared_root = roots
    (shared_root / "files" / "color_profiles").mkdir(parents=True)

    result = resolve("files/color_profiles", str(machine_root), str(shared_root))

    assert result.kind is ResolutionKind.SHARED
    assert result.path == shared_root / "files" / "color_profiles"


def test_nested_relative_path(roots) -> None:
    machine_root, shared_root = roots
    _write_json(machine_root / "registry" / "app.json", {})

    result = resolve("registry/app.json", machine_root, shared_root)

    assert result.to_dict() == {"kind": "machine", "path": str(machine_root / "registry" / "app.json")}


def test_probes_machine_first_and_short_circuits() -> None:
    probed: List[Path] = []

    def exists(path: Path) -> bool:
        probed.append(path)
        return True

    result = resolve("item.json", "/m", "/s", exists=exists)

    assert result.kind is ResolutionKind.MACHINE
    assert probed == [Path("/m/item.json")]


def test_probes_each_root_once_in_order() -> None:
    probed: List[Path] = []

    def exists(path: Path) -> bool:
        probed.append(path)
        return False

    result = resolve("item.json", "/m", "/s", exists=exists)

    assert result.kind is ResolutionKind.NOT_FOUND
    assert probed == [Path("/m/item.json"), Path("/s/item.json")]


@pytest.mark.parametrize(
    ("relative_path", "machine_root", "shared_root", "name"),
    [
        ("", "/m", "/s", "relative_path"),
        ("item.json", "", "/s", "machine_root"),
        ("item.json", "/m", "   ", "shared_root"),
        (None, "/m", "/s", "relative_path"),
        ("item.json", None, "/s", "machine_root"),
        ("item.json", "/m", 42, "shared_root"),
    ],
)
def test_rejects_missing_or_empty_arguments(relative_path, machine_root, shared_root, name) -> None:
    with pytest.raises(InvalidArgumentError, match=name):
        resolve(relative_path, machine_root, shared_root)


def test_rejects_absolute_relative_path(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError, match="relative"):
        resolve(str(tmp_path / "display.json"), "/m", "/s")


@pytest.mark.parametrize("relative_path", ["../secret.json", "registry/../../secret.json", ".."])
def test_rejects_parent_segments_escaping_roots(roots, relative_path) -> None:
    machine_root, shared_root = roots
    (machine_root.parent / "secret.json").write_text("{}", encoding="utf-8")

    with pytest.raises(InvalidArgumentError, match="inside the backup roots"):
        resolve(relative_path, machine_root, shared_root)
