"""Candidate discovery pipeline.

Single pass over the fetched documents:

1. classify groups into browser working groups and watched community groups;
2. turn their repositories into candidates (homepage URL, or a probed
   GitHub Pages URL when no homepage is declared);
3. add rec-track specs of browser working groups from the repo map;
4. add WHATWG standards;
5. merge everything and sort once by URL.

Each stage returns its own tuple of candidates; nothing is shared or mutated
across stages. The same URL reached through two stages is reported twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from loguru import logger

from core.canonicalize import canonicalize_gh_url, canonicalize_tr_url, to_gh_url
from core.domain.groups import GroupPolicy
from core.domain.models import Candidate, Group, Repo, RepoMapEntry, WhatwgStandard
from core.interfaces.source import DocumentSource, SpecProber
from core.matcher import SpecMatcher, has_repo_type

REC_TRACK = "rec-track"
CG_REPORT = "cg-report"

_is_rec_track = has_repo_type(REC_TRACK)
_is_cg_report = has_repo_type(CG_REPORT)


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    candidates: tuple[Candidate, ...]
    stage_counts: dict[str, int] = field(default_factory=dict)


def merge_candidates(*stages: Iterable[Candidate]) -> tuple[Candidate, ...]:
    """Concatenate stage outputs and sort by specification URL.

    The sort is stable, so equal URLs keep their discovery order.
    """

    merged = [candidate for stage in stages for candidate in stage]
    return tuple(sorted(merged, key=lambda c: c.spec))


def resolve_group_repos(
    groups: Sequence[Group],
    repos_by_name: Mapping[str, Repo],
    matcher: SpecMatcher,
) -> list[Repo]:
    """Repositories of `groups`, minus ignored/monitored ones."""

    resolved: list[Repo] = []
    for group in groups:
        for ref in group.repos:
            if not matcher.is_relevant_repo(ref.full_name):
                continue
            repo = repos_by_name.get(ref.full_name)
            if repo is None:
                logger.warning(f"{group.name} lists {ref.full_name}, which the report does not describe")
                continue
            resolved.append(repo)
    return resolved


def candidates_from_homepages(repos: Iterable[Repo], matcher: SpecMatcher) -> tuple[Candidate, ...]:
    return matcher.filter(canonicalize_gh_url(r) for r in repos if r.homepage_url)


async def candidates_from_pages(
    repos: Iterable[Repo],
    matcher: SpecMatcher,
    prober: SpecProber,
) -> tuple[Candidate, ...]:
    # Probe only what survived matching, to keep network calls down.
    synthesized = matcher.filter(to_gh_url(r) for r in repos if not r.homepage_url)
    if not synthesized:
        return ()
    return tuple(await prober.probe(synthesized))


def candidates_from_repo_map(
    repo_map: Mapping[str, Sequence[RepoMapEntry]],
    wgs: Sequence[Group],
    matcher: SpecMatcher,
) -> tuple[Candidate, ...]:
    wg_ids = {g.id for g in wgs}
    return matcher.filter(
        Candidate(repo=repo, spec=canonicalize_tr_url(entry.url))
        for repo, entries in repo_map.items()
        for entry in entries
        if entry.rec_track and entry.group in wg_ids
    )


def candidates_from_whatwg(
    standards: Iterable[tuple[str, WhatwgStandard]],
    matcher: SpecMatcher,
) -> tuple[Candidate, ...]:
    return matcher.filter(
        Candidate(repo=f"whatwg/{workstream}", spec=standard.href)
        for workstream, standard in standards
    )


async def find_candidates(
    *,
    source: DocumentSource,
    prober: SpecProber,
    matcher: SpecMatcher,
    policy: GroupPolicy,
) -> PipelineResult:
    report = await source.fetch_validation_report()
    repo_map = await source.fetch_repo_map()
    whatwg = await source.fetch_whatwg_standards()

    wgs, cgs = policy.classify(list(report.groups.values()))
    logger.info(f"{len(wgs)} browser working groups, {len(cgs)} watched community groups")

    repos_by_name: dict[str, Repo] = {}
    for repo in report.repos:
        repos_by_name.setdefault(repo.full_name, repo)

    wg_repos = [r for r in resolve_group_repos(wgs, repos_by_name, matcher) if _is_rec_track(r)]
    cg_repos = [
        r
        for r in resolve_group_repos(cgs, repos_by_name, matcher)
        if r.w3c is None or _is_cg_report(r)
    ]

    stages: dict[str, tuple[Candidate, ...]] = {
        "wg-homepages": candidates_from_homepages(wg_repos, matcher),
        "wg-pages": await candidates_from_pages(wg_repos, matcher, prober),
        "repo-map": candidates_from_repo_map(repo_map, wgs, matcher),
        "cg-homepages": candidates_from_homepages(cg_repos, matcher),
        "cg-pages": await candidates_from_pages(cg_repos, matcher, prober),
        "whatwg": candidates_from_whatwg(whatwg, matcher),
    }
    for name, found in stages.items():
        logger.info(f"{name}: {len(found)} candidates")

    return PipelineResult(
        candidates=merge_candidates(*stages.values()),
        stage_counts={name: len(found) for name, found in stages.items()},
    )
