"""Loader for local resources.

Lives in `core/` because it centralizes *which* static data the pipeline
needs (known-spec index, ignore/monitor lists, group table) without
coupling the CLI to file paths. Files are read once per run and never
written.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.config import AppSettings
from core.domain.groups import GroupPolicy
from core.domain.models import IgnoreList, SpecEntry


class ResourceError(RuntimeError):
    """A local resource is missing or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


_SPEC_INDEX = TypeAdapter(list[SpecEntry])


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise ResourceError(path, "file not found")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ResourceError(path, f"invalid JSON ({exc})") from exc


def load_spec_index(path: Path) -> list[SpecEntry]:
    try:
        return _SPEC_INDEX.validate_python(_read_json(path))
    except ValidationError as exc:
        raise ResourceError(path, f"unexpected index format ({exc.error_count()} errors)") from exc


def load_ignore_list(path: Path) -> IgnoreList:
    try:
        return IgnoreList.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ResourceError(path, "expected {\"repos\": {...}, \"specs\": {...}}") from exc


def load_monitor_list(path: Path) -> dict[str, Any]:
    data = _read_json(path)
    if not isinstance(data, dict):
        raise ResourceError(path, "expected an object keyed by repository name")
    return data


def load_group_policy(path: Path) -> GroupPolicy:
    try:
        return GroupPolicy.model_validate(_read_json(path))
    except ValidationError as exc:
        raise ResourceError(path, "expected working-groups/community-groups tables") from exc


def resolve_index_path(settings: AppSettings) -> Path:
    """Index path as configured, relative paths resolved against the cwd."""

    path = settings.index_path.expanduser()
    if path.is_absolute():
        return path
    return Path.cwd() / path
