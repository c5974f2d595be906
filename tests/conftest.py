"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any, Sequence

import pytest

from core.domain.models import (
    Candidate,
    Repo,
    RepoMapEntry,
    SpecEntry,
    ValidationReport,
    WhatwgStandard,
)

BROWSER_WG = "Web Applications Working Group"
NON_BROWSER_WG = "Publishing Working Group"
WATCHED_CG = "Web Platform Incubator Community Group"


def make_repo(
    full_name: str,
    homepage: str | None = None,
    repo_type: str | list[str] | None = None,
    w3c: bool = True,
) -> dict[str, Any]:
    owner, name = full_name.split("/", 1)
    data: dict[str, Any] = {"owner": {"login": owner}, "name": name, "homepageUrl": homepage}
    if w3c:
        data["w3c"] = {"repo-type": repo_type} if repo_type is not None else {}
    return data


def make_group(group_id: int, name: str, kind: str, repos: Sequence[str]) -> dict[str, Any]:
    return {
        "id": group_id,
        "name": name,
        "type": kind,
        "repos": [{"fullName": r} for r in repos],
    }


def make_spec(nightly: str, series: str, version: str | None = None, release: str | None = None) -> SpecEntry:
    data: dict[str, Any] = {"nightly": {"url": nightly}, "series": {"shortname": series}}
    if version is not None:
        data["seriesVersion"] = version
    if release is not None:
        data["release"] = {"url": release}
    return SpecEntry.model_validate(data)


def repo(full_name: str, **kwargs: Any) -> Repo:
    return Repo.model_validate(make_repo(full_name, **kwargs))


class FakeSource:
    """In-memory `DocumentSource`."""

    def __init__(
        self,
        groups: Sequence[dict[str, Any]] = (),
        repos: Sequence[dict[str, Any]] = (),
        repo_map: dict[str, list[dict[str, Any]]] | None = None,
        whatwg: Sequence[tuple[str, str]] = (),
    ) -> None:
        self.report = ValidationReport.model_validate(
            {"groups": {str(g["id"]): g for g in groups}, "repos": list(repos)}
        )
        self.repo_map = {
            name: [RepoMapEntry.model_validate(e) for e in entries]
            for name, entries in (repo_map or {}).items()
        }
        self.whatwg = [(ws, WhatwgStandard(href=href)) for ws, href in whatwg]
        self.calls: list[str] = []

    async def fetch_validation_report(self) -> ValidationReport:
        self.calls.append("report")
        return self.report

    async def fetch_repo_map(self) -> dict[str, list[RepoMapEntry]]:
        self.calls.append("repo-map")
        return self.repo_map

    async def fetch_whatwg_standards(self) -> list[tuple[str, WhatwgStandard]]:
        self.calls.append("whatwg")
        return self.whatwg


class FakeProber:
    """`SpecProber` resolving a fixed set of URLs, optionally redirected."""

    def __init__(self, existing: dict[str, str] | None = None) -> None:
        self.existing = existing or {}
        self.probed: list[Candidate] = []

    async def probe(self, candidates: Sequence[Candidate]) -> list[Candidate]:
        self.probed.extend(candidates)
        return [
            c.model_copy(update={"spec": self.existing[c.spec]})
            for c in candidates
            if c.spec in self.existing
        ]


@pytest.fixture
def fake_prober() -> FakeProber:
    return FakeProber()
