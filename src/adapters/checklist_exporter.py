"""Markdown checklist rendering.

One task-list line per candidate, linking back to the repository:

    - [ ] https://w3c.github.io/foo/ from [w3c/foo](https://github.com/w3c/foo)
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import Candidate


def render_line(candidate: Candidate) -> str:
    return f"- [ ] {candidate.spec} from [{candidate.repo}](https://github.com/{candidate.repo})"


def render_checklist(candidates: Iterable[Candidate]) -> str:
    return "\n".join(render_line(c) for c in candidates)
