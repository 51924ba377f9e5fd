# c4_gen/io.py
"""Load a YAML architecture model from a single file or a split directory.

A split directory holds any of the MODEL_PART_FILES; parts are read in that
order and merged section by section. Only the known top-level sections are
kept: anything else is reported on stderr and dropped.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import yaml

from .constants import MODEL_LIST_SECTIONS, MODEL_MAPPING_SECTIONS, MODEL_PART_FILES
from .errors import ModelError

Model = dict[str, Any]


def _yaml_error_location(err: yaml.YAMLError) -> str:
    mark = getattr(err, "problem_mark", None)
    if mark is None:
        return ""
    return f":{mark.line + 1}:{mark.column + 1}"


def _load_part(path: Path) -> Model:
    """Parse one YAML file and keep its known sections."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        problem = getattr(e, "problem", None) or str(e)
        raise ModelError(f"Invalid YAML in {path}{_yaml_error_location(e)}: {problem}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ModelError(
            f"Top-level YAML must be a mapping in {path}, got {type(data).__name__}"
        )

    known = MODEL_MAPPING_SECTIONS + MODEL_LIST_SECTIONS
    part: Model = {}
    for key, value in data.items():
        if key not in known:
            print(
                f"warning: {path}: ignoring unknown section {key!r} "
                f"(expected one of: {', '.join(known)})",
                file=sys.stderr,
            )
            continue
        part[key] = value
    return part


def _merge_mapping(dst: dict[str, Any], src: dict[str, Any], *, at: str, src_path: Path) -> None:
    for key, value in src.items():
        key_path = f"{at}/{key}"
        if key not in dst:
            dst[key] = value
        elif isinstance(dst[key], dict) and isinstance(value, dict):
            # theme categories: {background, font}
            _merge_mapping(dst[key], value, at=key_path, src_path=src_path)
        elif dst[key] != value:
            raise ModelError(
                f"Model merge conflict at {key_path} from {src_path}: "
                f"{dst[key]!r} != {value!r}"
            )


def _merge_part(merged: Model, part: Model, *, src_path: Path) -> None:
    for section in MODEL_MAPPING_SECTIONS:
        if section not in part or part[section] is None:
            continue
        value = part[section]
        if not isinstance(value, dict):
            raise ModelError(
                f"Section {section!r} in {src_path} must be a mapping, "
                f"got {type(value).__name__}"
            )
        _merge_mapping(merged.setdefault(section, {}), value, at=f"/{section}", src_path=src_path)

    for section in MODEL_LIST_SECTIONS:
        if section not in part or part[section] is None:
            continue
        value = part[section]
        if not isinstance(value, list):
            raise ModelError(
                f"Section {section!r} in {src_path} must be a list, "
                f"got {type(value).__name__}"
            )
        merged.setdefault(section, []).extend(value)


def load_model(path: Path) -> Model:
    """Load a YAML architecture model (split directory or single file)."""
    if not path.exists():
        raise FileNotFoundError(str(path))

    # A split-part file stands for its parent directory.
    if path.is_file() and path.name in MODEL_PART_FILES:
        path = path.parent

    if not path.is_dir():
        return _load_part(path)

    merged: Model = {}
    for filename in MODEL_PART_FILES:
        part_path = path / filename
        if part_path.exists():
            _merge_part(merged, _load_part(part_path), src_path=part_path)
    return merged
