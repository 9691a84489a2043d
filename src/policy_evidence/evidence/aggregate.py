"""Pick the best supporting citation for a claim."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from policy_evidence.domain.models import BestEvidence, Citation
from policy_evidence.evidence.constants import Heuristics
from policy_evidence.evidence.dedupe import dedupe_citations
from policy_evidence.evidence.matcher import match_claim_to_quote
from policy_evidence.text.normalize import normalize


def best_in_pool(
    claim: Optional[str],
    pool: Sequence[Citation],
    heuristics: Optional[Heuristics] = None,
) -> BestEvidence:
    """Scan an already deduplicated pool."""
    result = BestEvidence()
    for citation in pool:
        if not normalize(citation.quote):
            continue
        match = match_claim_to_quote(claim, citation.quote, heuristics)
        if match.score > result.score:
            result = BestEvidence(
                best=citation,
                score=match.score,
                overlap=match.overlap,
                has_number_match=match.has_number_match,
            )
    return result


def find_best_evidence_for_claim(
    claim: Optional[str],
    citations: Optional[Iterable[Optional[Citation]]],
    heuristics: Optional[Heuristics] = None,
) -> BestEvidence:
    """Highest scoring quoted citation; the first one wins ties and a zero score never wins."""
    return best_in_pool(claim, dedupe_citations(citations), heuristics)


__all__ = ["best_in_pool", "find_best_evidence_for_claim"]
