# shadowgen/io.py
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .constants import MODEL_PART_FILES, SHADOWS_PART_DIR


def _load_yaml_mapping(path: Path) -> dict[str, Any]:
    raw = path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML {path}: {e}") from e

    # An empty part file is allowed and contributes nothing.
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML must be a mapping in {path}, got {type(data).__name__}"
        )

    return data


def _deep_merge_model(
    dst: dict[str, Any], src: dict[str, Any], *, src_path: Path
) -> None:
    """Merge `src` into `dst` in place.

    Merge rules:
      - missing key -> copy
      - list + list -> concatenate (load order)
      - dict + dict -> recursive merge
      - equal scalars -> keep; differing scalars -> error
    """
    for key, value in src.items():
        if key not in dst:
            dst[key] = value
            continue

        existing = dst[key]
        if isinstance(existing, list) and isinstance(value, list):
            dst[key] = existing + value
            continue

        if isinstance(existing, dict) and isinstance(value, dict):
            _deep_merge_model(existing, value, src_path=src_path)
            continue

        if existing == value:
            continue

        raise ValueError(
            f"Model merge conflict on key {key!r} from {src_path}: "
            f"existing={existing!r}, new={value!r}"
        )


def load_model(path: Path) -> dict[str, Any]:
    """Load the YAML shadow model (split directory or single file)."""
    if not path.exists():
        raise FileNotFoundError(str(path))

    # A split-part file given directly means its directory is the model root.
    if path.is_file() and path.name in set(MODEL_PART_FILES):
        path = path.parent

    if not path.is_dir():
        return _load_yaml_mapping(path)

    merged: dict[str, Any] = {}
    for filename in MODEL_PART_FILES:
        part_path = path / filename
        if not part_path.exists():
            continue
        _deep_merge_model(merged, _load_yaml_mapping(part_path), src_path=part_path)

    # shadows/*.yaml, each typically holding `shadows: [...]`.
    shadows_dir = path / SHADOWS_PART_DIR
    if shadows_dir.is_dir():
        for part_path in sorted(shadows_dir.glob("*.yaml")):
            _deep_merge_model(merged, _load_yaml_mapping(part_path), src_path=part_path)

    return merged
