"""Tests for JSON artifact helpers."""

from pathlib import Path

import pytest

import io_utils
from io_utils import list_source_files, read_json, write_json, write_json_files


def test_write_and_read_json_roundtrip(tmp_path: Path) -> None:
    target = tmp_path / "artifacts" / "sample.json"
    payload = {"themes": ["教育", "研究"], "count": 2}

    write_json(target, payload)

    assert read_json(target) == payload
    # non-ASCII text is stored as UTF-8, not escaped
    assert "教育" in target.read_text(encoding="utf-8")


def test_write_json_leaves_no_temp_files(tmp_path: Path) -> None:
    target = tmp_path / "index.json"
    write_json(target, {"version": 1})
    write_json(target, {"version": 2})

    assert read_json(target) == {"version": 2}
    assert [p.name for p in tmp_path.iterdir()] == ["index.json"]


def test_write_json_failure_keeps_previous_artifact(tmp_path: Path) -> None:
    target = tmp_path / "index.json"
    write_json(target, {"version": 1})

    with pytest.raises(TypeError):
        write_json(target, {"version": object()})

    assert read_json(target) == {"version": 1}
    assert [p.name for p in tmp_path.iterdir()] == ["index.json"]


def test_list_source_files_sorted_and_files_only(tmp_path: Path) -> None:
    (tmp_path / "b.md").write_text("b")
    (tmp_path / "a.md").write_text("a")
    (tmp_path / "nested").mkdir()

    assert [p.name for p in list_source_files(tmp_path)] == ["a.md", "b.md"]


def test_list_source_files_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        list_source_files(tmp_path / "missing")


def _seed_artifacts(tmp_path: Path) -> tuple[Path, Path]:
    first = tmp_path / "episodes-index.json"
    second = tmp_path / "themes.json"
    write_json_files({first: {"build": 1}, second: {"build": 1}})
    return first, second


def test_write_json_files_serialisation_failure_publishes_nothing(tmp_path: Path) -> None:
    first, second = _seed_artifacts(tmp_path)

    with pytest.raises(TypeError):
        write_json_files({first: {"build": 2}, second: {"build": object()}})

    assert read_json(first) == {"build": 1}
    assert read_json(second) == {"build": 1}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["episodes-index.json", "themes.json"]


def test_write_json_files_write_failure_publishes_nothing(tmp_path: Path, monkeypatch) -> None:
    first, second = _seed_artifacts(tmp_path)
    real_stage = io_utils._stage

    def failing_stage(path: Path, data: bytes) -> Path:
        if path.name == "themes.json":
            raise OSError("No space left on device")
        return real_stage(path, data)

    monkeypatch.setattr(io_utils, "_stage", failing_stage)

    with pytest.raises(OSError):
        write_json_files({first: {"build": 2}, second: {"build": 2}})

    assert read_json(first) == {"build": 1}
    assert read_json(second) == {"build": 1}
    assert sorted(p.name for p in tmp_path.iterdir()) == ["episodes-index.json", "themes.json"]
