"""Existence probe for synthesized GitHub Pages URLs.

Repositories without a declared homepage get a conventional
`https://<owner>.github.io/<name>/` URL; it is only reported when it
actually resolves. All probes of a batch run concurrently, without a bound
or retries. Transport errors propagate to the caller.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

import httpx
from loguru import logger

from core.domain.models import Candidate


async def has_existing_spec(client: httpx.AsyncClient, candidate: Candidate) -> Candidate | None:
    """Return the candidate with its final (redirected) URL, or None on non-2xx."""

    resp = await client.get(candidate.spec)
    if not resp.is_success:
        logger.debug(f"{candidate.spec} -> HTTP {resp.status_code}, dropped")
        return None
    return candidate.model_copy(update={"spec": str(resp.url)})


class HttpProber:
    """`SpecProber` issuing one GET per candidate."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def probe(self, candidates: Sequence[Candidate]) -> list[Candidate]:
        results = await asyncio.gather(*(has_existing_spec(self._client, c) for c in candidates))
        return [c for c in results if c is not None]
