"""Contracts for the pipeline's I/O collaborators.

Why Protocol:
- Structural typing keeps the pipeline independent of httpx.
- Tests swap in in-memory documents and a fake prober.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import Candidate, RepoMapEntry, ValidationReport, WhatwgStandard


@runtime_checkable
class DocumentSource(Protocol):
    """Provides the three remote documents the pipeline reads."""

    async def fetch_validation_report(self) -> ValidationReport: ...

    async def fetch_repo_map(self) -> dict[str, list[RepoMapEntry]]: ...

    async def fetch_whatwg_standards(self) -> list[tuple[str, WhatwgStandard]]:
        """Return `(workstream id, first standard)` pairs."""

        ...


@runtime_checkable
class SpecProber(Protocol):
    """Confirms that synthesized specification URLs resolve."""

    async def probe(self, candidates: Sequence[Candidate]) -> list[Candidate]: ...
