"""Utilities for reading source documents and writing JSON index artifacts."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import orjson


def _coerce_path(path: str | Path) -> Path:
    """Convert input to a resolved Path."""
    if isinstance(path, Path):
        return path
    return Path(path)


def list_source_files(directory: str | Path) -> list[Path]:
    """Return the regular files directly under ``directory`` in filename order."""
    resolved_dir = _coerce_path(directory)
    if not resolved_dir.exists():
        raise FileNotFoundError(f"Source directory not found at {resolved_dir}")
    if not resolved_dir.is_dir():
        raise NotADirectoryError(f"Source path {resolved_dir} is not a directory")
    return sorted((entry for entry in resolved_dir.iterdir() if entry.is_file()), key=lambda p: p.name)


def read_text(path: str | Path) -> str:
    """Read a UTF-8 document."""
    return _coerce_path(path).read_text(encoding="utf-8")


def dumps_json(payload: Mapping[str, Any]) -> bytes:
    """Serialise a mapping as indented UTF-8 JSON with a trailing newline."""
    return orjson.dumps(dict(payload), option=orjson.OPT_INDENT_2) + b"\n"


def _stage(path: Path, data: bytes) -> Path:
    """Write ``data`` to a temporary sibling of ``path`` and return the temp path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return Path(tmp_name)


def write_json_files(payloads: Mapping[str | Path, Mapping[str, Any]]) -> None:
    """Publish several JSON artifacts together.

    Every payload is serialised and staged in a temporary file next to its
    destination before any destination is replaced. A serialisation or write
    failure therefore leaves all previous artifacts untouched.
    """
    encoded = [(_coerce_path(path), dumps_json(payload)) for path, payload in payloads.items()]

    staged: list[tuple[Path, Path]] = []
    try:
        for path, data in encoded:
            staged.append((_stage(path, data), path))
        for tmp_path, path in staged:
            os.replace(tmp_path, path)
    finally:
        for tmp_path, _ in staged:
            tmp_path.unlink(missing_ok=True)


def write_json(path: str | Path, payload: Mapping[str, Any]) -> None:
    """Atomically write a mapping as JSON."""
    write_json_files({path: payload})


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON document into a dictionary."""
    resolved_path = _coerce_path(path)
    with resolved_path.open("rb") as handle:
        return orjson.loads(handle.read())
