"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

from rich.console import Console

from adapters.http_client import build_async_client
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.resources_loader import (
    ResourceError,
    load_group_policy,
    load_ignore_list,
    load_monitor_list,
    load_spec_index,
    resolve_index_path,
)

_console = Console(stderr=True)


async def _check_http(settings: AppSettings, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


def _check_file(path: Path, loader: Callable[[Path], object]) -> tuple[bool, str]:
    try:
        data = loader(path)
    except ResourceError as exc:
        return False, str(exc)
    size = len(data) if isinstance(data, (list, dict)) else None
    return True, f"{path} ({size} entries)" if size is not None else str(path)


def run() -> None:
    """Check that the remote documents are reachable and local data files load."""

    settings = AppSettings()
    table = build_doctor_table()

    endpoints = {
        "Validation report": settings.validation_report_url,
        "Repo map": settings.repo_map_url,
        "WHATWG database": settings.whatwg_db_url,
    }
    for label, url in endpoints.items():
        ok, detail = asyncio.run(_check_http(settings, url))
        table.add_row(label, "OK" if ok else "FAIL", f"{url}: {detail}")

    files = {
        "Spec index": (resolve_index_path(settings), load_spec_index),
        "Ignore list": (settings.ignore_path, load_ignore_list),
        "Monitor list": (settings.monitor_path, load_monitor_list),
        "Group table": (settings.groups_path, load_group_policy),
    }
    for label, (path, loader) in files.items():
        ok, detail = _check_file(path, loader)
        table.add_row(label, "OK" if ok else "FAIL", detail)

    _console.print(table)
