"""Domain models (Pydantic v2).

These models describe *what* the pipeline works on (groups, repositories,
known specifications, candidates), not *how* the documents are fetched.
Field aliases follow the camelCase/kebab-case keys of the upstream JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def _as_str(value: Any) -> Any:
    # Group ids are numbers in some documents and strings in others.
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class RepoOwner(_Document):
    login: str = Field(..., min_length=1)


class W3CMetadata(_Document):
    """Content of a repository's `w3c.json`."""

    repo_type: str | list[str] | None = Field(default=None, alias="repo-type")


class Repo(_Document):
    """A GitHub repository as listed in the validation report."""

    owner: RepoOwner
    name: str = Field(..., min_length=1)
    homepage_url: str | None = Field(default=None, alias="homepageUrl")
    w3c: W3CMetadata | None = None

    @property
    def full_name(self) -> str:
        return f"{self.owner.login}/{self.name}"


class GroupRepo(_Document):
    full_name: str = Field(..., alias="fullName")


class Group(_Document):
    """A W3C working or community group and the repositories it owns."""

    id: str
    name: str
    type: str
    repos: list[GroupRepo] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _normalize_id(cls, value: Any) -> Any:
        return _as_str(value)


class ValidationReport(_Document):
    groups: dict[str, Group] = Field(default_factory=dict)
    repos: list[Repo] = Field(default_factory=list)


class RepoMapEntry(_Document):
    """One specification produced by a repository (spec dashboard repo map)."""

    url: str
    rec_track: bool = Field(default=False, alias="recTrack")
    group: str | None = None

    @field_validator("group", mode="before")
    @classmethod
    def _normalize_group(cls, value: Any) -> Any:
        return _as_str(value)


class SpecLink(_Document):
    url: str


class SpecSeries(_Document):
    shortname: str


class SpecEntry(_Document):
    """An entry of the known-specifications index."""

    url: str | None = None
    shortname: str | None = None
    nightly: SpecLink | None = None
    release: SpecLink | None = None
    series: SpecSeries
    series_version: str | None = Field(default=None, alias="seriesVersion")


class ShortnameData(_Document):
    """Canonical naming information derived from a specification URL."""

    shortname: str
    series: SpecSeries
    series_version: str | None = Field(default=None, alias="seriesVersion")


class WhatwgStandard(_Document):
    name: str | None = None
    href: str


class WhatwgWorkstream(_Document):
    id: str
    name: str | None = None
    standards: list[WhatwgStandard] = Field(default_factory=list)


class WhatwgDatabase(_Document):
    workstreams: list[WhatwgWorkstream] = Field(default_factory=list)


class IgnoreList(_Document):
    """Repositories and specification URLs that must never be reported.

    Values carry a free-form reason; only the keys matter.
    """

    repos: dict[str, Any] = Field(default_factory=dict)
    specs: dict[str, Any] = Field(default_factory=dict)


class Candidate(BaseModel):
    """A (repository, specification URL) pair missing from the index."""

    model_config = ConfigDict(frozen=True)

    repo: str = Field(..., min_length=1, description="Repository as `owner/name`.")
    spec: str = Field(..., min_length=1, description="Specification URL.")
