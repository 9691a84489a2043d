"""Per-claim supported/unverified verdicts."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from policy_evidence.domain.models import AnnotatedClaim, Citation, ClaimStatus
from policy_evidence.evidence.aggregate import best_in_pool
from policy_evidence.evidence.constants import DEFAULT_HEURISTICS, Heuristics
from policy_evidence.evidence.dedupe import dedupe_citations
from policy_evidence.text.normalize import tokenize


logger = logging.getLogger("policy_evidence.evidence")


def annotate_claims_with_evidence(
    claims: Optional[Iterable[str]],
    citations: Optional[Iterable[Optional[Citation]]],
    threshold: float,
    heuristics: Optional[Heuristics] = None,
) -> List[AnnotatedClaim]:
    """Annotate each claim, preserving order and length.

    A claim is supported when its best citation scores at least ``threshold`` and
    covers enough of the claim's content words. Short claims (few content tokens)
    need the stricter overlap. Unverified claims never carry a citation.
    """
    h = heuristics or DEFAULT_HEURISTICS
    pool = dedupe_citations(citations)
    annotated: List[AnnotatedClaim] = []
    for claim in claims or ():
        evidence = best_in_pool(claim, pool, h)
        min_overlap = h.min_overlap_for(len(tokenize(claim)))
        supported = evidence.best is not None and evidence.score >= threshold and evidence.overlap >= min_overlap
        logger.debug(
            "claim annotated",
            extra={
                "claim": claim,
                "score": round(evidence.score, 4),
                "overlap": round(evidence.overlap, 4),
                "min_overlap": min_overlap,
                "supported": supported,
            },
        )
        annotated.append(
            AnnotatedClaim(
                claim=claim,
                status=ClaimStatus.supported if supported else ClaimStatus.unverified,
                score=evidence.score,
                overlap=evidence.overlap,
                best_citation=evidence.best if supported else None,
            )
        )
    return annotated


__all__ = ["annotate_claims_with_evidence"]
