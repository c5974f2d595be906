"""Matching of candidates against the known-specifications index.

A candidate is kept when its URL is unknown to the index and not ignored.
Three rules decide whether an index entry already covers a URL:

1. the entry's nightly URL starts with the candidate URL;
2. the entry's release URL is exactly the candidate URL;
3. the candidate belongs to the same series and the entry's level is equal
   or more recent.

Rule 3 needs a shortname for the candidate URL. When none can be derived,
the rule reports no match (`UNPARSEABLE_URL_MATCHES`): a URL we cannot
classify is reported rather than silently dropped.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from loguru import logger

from core.domain.models import Candidate, IgnoreList, Repo, SpecEntry
from core.shortname import ShortnameError, compute_shortname, parse_version

UNPARSEABLE_URL_MATCHES = False


def _version_key(version: str | None) -> tuple[int, ...] | None:
    if not version:
        return None
    try:
        return parse_version(version)
    except ValueError:
        return None


def has_repo_type(repo_type: str) -> Callable[[Repo], bool]:
    """Predicate: the repository declares `repo_type` in its w3c.json."""

    def check(repo: Repo) -> bool:
        if repo.w3c is None or not repo.w3c.repo_type:
            return False
        declared = repo.w3c.repo_type
        if isinstance(declared, str):
            return declared == repo_type
        return repo_type in declared

    return check


class SpecMatcher:
    def __init__(
        self,
        specs: Iterable[SpecEntry],
        ignore: IgnoreList | None = None,
        monitored: Mapping[str, Any] | None = None,
    ) -> None:
        self._specs = list(specs)
        self._ignore = ignore or IgnoreList()
        self._monitored = dict(monitored or {})

    def has_more_recent_level(self, entry: SpecEntry, url: str) -> bool:
        try:
            data = compute_shortname(url)
        except ShortnameError as exc:
            logger.debug(f"No shortname for {url}, level check skipped: {exc}")
            return UNPARSEABLE_URL_MATCHES

        if entry.series.shortname != data.series.shortname:
            return False
        known = _version_key(entry.series_version)
        candidate = _version_key(data.series_version)
        if known is None or candidate is None:
            return False
        return known >= candidate

    def matches(self, entry: SpecEntry, url: str) -> bool:
        if entry.nightly is not None and entry.nightly.url.startswith(url):
            return True
        if entry.release is not None and entry.release.url == url:
            return True
        return self.has_more_recent_level(entry, url)

    def has_unknown_spec(self, candidate: Candidate) -> bool:
        return not any(self.matches(entry, candidate.spec) for entry in self._specs)

    def has_relevant_spec(self, candidate: Candidate) -> bool:
        return candidate.spec not in self._ignore.specs

    def is_relevant_repo(self, full_name: str) -> bool:
        return full_name not in self._ignore.repos and full_name not in self._monitored

    def keep(self, candidate: Candidate) -> bool:
        """Candidate is neither indexed nor ignored."""

        return self.has_unknown_spec(candidate) and self.has_relevant_spec(candidate)

    def filter(self, candidates: Iterable[Candidate]) -> tuple[Candidate, ...]:
        return tuple(c for c in candidates if self.keep(c))
