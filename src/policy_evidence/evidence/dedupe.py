"""Citation pool deduplication."""

from __future__ import annotations

from typing import Iterable, List, Optional

from policy_evidence.domain.models import Citation
from policy_evidence.text.normalize import normalize_key


def citation_key(citation: Optional[Citation]) -> str:
    """Lowercased quote, or source name when the quote is blank. Empty means unusable."""
    if citation is None:
        return ""
    return normalize_key(citation.quote) or normalize_key(citation.source_name)


def dedupe_citations(citations: Optional[Iterable[Optional[Citation]]]) -> List[Citation]:
    seen = set()
    unique: List[Citation] = []
    for citation in citations or ():
        key = citation_key(citation)
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(citation)
    return unique


__all__ = ["citation_key", "dedupe_citations"]
