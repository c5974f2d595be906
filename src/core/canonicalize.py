"""URL canonicalization.

Candidates and index entries are compared as strings, so every URL taken
from a repository homepage or from the repo map goes through here first:
the scheme is forced to https, and top-level paths get a trailing slash.
"""

from __future__ import annotations

import httpx

from core.domain.models import Candidate, Repo


class InvalidURLError(ValueError):
    """Raised when a homepage or specification URL cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid URL: {value!r}")
        self.value = value


def _parse_absolute(value: str) -> httpx.URL:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise InvalidURLError(value) from exc
    if not url.scheme or not url.host:
        raise InvalidURLError(value)
    return url


def _with_https(url: httpx.URL, raw_path: str) -> str:
    # raw_path always starts with "/", which also makes empty paths explicit.
    return str(url.copy_with(scheme="https", raw_path=raw_path.encode("ascii")))


def canonicalize_gh_url(repo: Repo) -> Candidate:
    """Build a candidate from the repository homepage URL."""

    url = _parse_absolute(repo.homepage_url or "")
    path, sep, query = url.raw_path.decode("ascii").partition("?")
    if path.rfind("/") == 0 and len(path) > 1:
        path += "/"
    return Candidate(repo=repo.full_name, spec=_with_https(url, f"{path}{sep}{query}"))


def canonicalize_tr_url(value: str) -> str:
    url = _parse_absolute(value)
    return _with_https(url, url.raw_path.decode("ascii"))


def to_gh_url(repo: Repo) -> Candidate:
    """Conventional GitHub Pages URL for a repository without a homepage."""

    return Candidate(
        repo=repo.full_name,
        spec=f"https://{repo.owner.login.lower()}.github.io/{repo.name}/",
    )
