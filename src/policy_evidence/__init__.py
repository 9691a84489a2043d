"""Claim verification for AI-generated policy summaries."""

from policy_evidence.domain.models import (
    AnnotatedClaim,
    BestEvidence,
    Citation,
    ClaimStatus,
    EvidenceMatch,
    Location,
)
from policy_evidence.evidence import (
    DEFAULT_HEURISTICS,
    Heuristics,
    annotate_claims_with_evidence,
    dedupe_citations,
    find_best_evidence_for_claim,
    match_claim_to_quote,
    score_claim_to_quote,
    source_ratio_from,
    split_into_claims,
)
from policy_evidence.text.normalize import extract_numbers, normalize, normalize_key, tokenize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AnnotatedClaim",
    "BestEvidence",
    "Citation",
    "ClaimStatus",
    "EvidenceMatch",
    "Location",
    "DEFAULT_HEURISTICS",
    "Heuristics",
    "annotate_claims_with_evidence",
    "dedupe_citations",
    "find_best_evidence_for_claim",
    "match_claim_to_quote",
    "score_claim_to_quote",
    "source_ratio_from",
    "split_into_claims",
    "extract_numbers",
    "normalize",
    "normalize_key",
    "tokenize",
]
