"""Shortname computation for specification URLs.

Derives the canonical shortname of a specification from its URL, then splits
it into a series shortname and a series version:

- `https://www.w3.org/TR/css-grid-2/` -> `css-grid-2`, series `css-grid`, version `2`
- `https://w3c.github.io/webappsec-csp/` -> `csp`
- `https://html.spec.whatwg.org/multipage/` -> `html`

URLs that do not follow a known publication pattern raise `ShortnameError`.
"""

from __future__ import annotations

import re

from core.domain.models import ShortnameData, SpecSeries


class ShortnameError(ValueError):
    """Raised when no shortname can be derived from a URL."""


_URL_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^https?://(?:www\.)?w3\.org/TR/([^/]+)/$"), "{0}"),
    (re.compile(r"//(.+)\.spec\.whatwg\.org/"), "{0}"),
    (re.compile(r"//tc39\.es/proposal-([^/]+)/$"), "tc39-{0}"),
    (re.compile(r"^https://registry\.khronos\.org/webgl/extensions/([^/]+)/$"), "{0}"),
    (re.compile(r"/.*\.github\.io/([^/]+)/(extensions?)\.html$"), "{0}-{1}"),
    (re.compile(r"/.*\.github\.io/(?:webappsec-)?([^/]+)/"), "{0}"),
    (re.compile(r"/drafts\.(?:csswg|fxtf|css-houdini)\.org/([^/]+)/"), "{0}"),
    (re.compile(r"/svgwg\.org/specs/(?:svg-)?([^/]+)/"), "svg-{0}"),
)

_VALID_NAME = re.compile(r"^[\w\-.]+$")
_LEVEL = re.compile(r"^(.*?)-?(\d+(?:\.\d+)?)$")


def _extract_name(url: str) -> str:
    for pattern, template in _URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return template.format(*match.groups())
    if "/" not in url:
        return url
    raise ShortnameError(f"Cannot extract meaningful name from {url}")


def compute_shortname(url: str) -> ShortnameData:
    name = _extract_name(url)
    if not _VALID_NAME.match(name):
        raise ShortnameError(
            f"Specification name contains unexpected characters: {name} (extracted from {url})"
        )

    level = _LEVEL.match(name)
    # A name made only of digits has no series prefix to split off.
    if level and level.group(1):
        series, version = level.group(1), level.group(2)
    else:
        series, version = name, None

    return ShortnameData(
        shortname=name,
        series=SpecSeries(shortname=series),
        series_version=version,
    )


def parse_version(version: str) -> tuple[int, ...]:
    """`"2"` -> `(2,)`, `"1.1"` -> `(1, 1)`."""

    return tuple(int(part) for part in version.split("."))
