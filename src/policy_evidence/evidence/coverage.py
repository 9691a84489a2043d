"""Coarse section coverage: how many summary sections have an attributable citation."""

from __future__ import annotations

from typing import Iterable, Optional

from policy_evidence.domain.models import Citation, Location


def source_ratio_from(blocks: Optional[Iterable[Optional[str]]], citations: Optional[Iterable[Optional[Citation]]]) -> float:
    total = sum(1 for b in blocks or () if b and b.strip())
    if not total:
        return 0.0
    pool = [c for c in citations or () if c is not None]
    # Prefer coverage by section location when available
    locations = {c.location for c in pool if c.location}
    if locations:
        return min(1.0, len(locations) / total)
    # Fallback: unique links across all sections
    urls = {c.url for c in pool if c.url}
    return min(1.0, len(urls) / total)


def first_citation_for(citations: Optional[Iterable[Optional[Citation]]], location: Location) -> Optional[Citation]:
    pool = [c for c in citations or () if c is not None]
    for citation in pool:
        if citation.location == location:
            return citation
    return pool[0] if pool else None


__all__ = ["source_ratio_from", "first_citation_for"]
