"""Remote documents read by the pipeline.

- validate-repos report: W3C groups and their repositories
- spec-dashboard repo map: repository -> produced specifications
- WHATWG standards database
"""

from __future__ import annotations

import httpx
from loguru import logger
from pydantic import TypeAdapter

from adapters.http_client import fetch_json
from core.config import AppSettings
from core.domain.models import RepoMapEntry, ValidationReport, WhatwgDatabase, WhatwgStandard

_REPO_MAP = TypeAdapter(dict[str, list[RepoMapEntry]])


class RemoteDocuments:
    """`DocumentSource` backed by HTTP GETs on the configured endpoints."""

    def __init__(self, client: httpx.AsyncClient, settings: AppSettings | None = None) -> None:
        self._client = client
        self._settings = settings or AppSettings()

    async def fetch_validation_report(self) -> ValidationReport:
        data = await fetch_json(self._client, self._settings.validation_report_url)
        return ValidationReport.model_validate(data)

    async def fetch_repo_map(self) -> dict[str, list[RepoMapEntry]]:
        data = await fetch_json(self._client, self._settings.repo_map_url)
        return _REPO_MAP.validate_python(data)

    async def fetch_whatwg_standards(self) -> list[tuple[str, WhatwgStandard]]:
        data = await fetch_json(self._client, self._settings.whatwg_db_url)
        db = WhatwgDatabase.model_validate(data)

        out: list[tuple[str, WhatwgStandard]] = []
        for workstream in db.workstreams:
            if not workstream.standards:
                logger.debug(f"WHATWG workstream {workstream.id} has no standard")
                continue
            out.append((workstream.id, workstream.standards[0]))
        return out
