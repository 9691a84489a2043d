"""Claim verification engine: split summaries into claims and score them against citations."""

from policy_evidence.evidence.aggregate import find_best_evidence_for_claim
from policy_evidence.evidence.annotate import annotate_claims_with_evidence
from policy_evidence.evidence.constants import DEFAULT_HEURISTICS, Heuristics
from policy_evidence.evidence.coverage import first_citation_for, source_ratio_from
from policy_evidence.evidence.dedupe import citation_key, dedupe_citations
from policy_evidence.evidence.matcher import match_claim_to_quote, score_claim_to_quote
from policy_evidence.evidence.splitter import split_into_claims

__all__ = [
    "DEFAULT_HEURISTICS",
    "Heuristics",
    "annotate_claims_with_evidence",
    "citation_key",
    "dedupe_citations",
    "find_best_evidence_for_claim",
    "first_citation_for",
    "match_claim_to_quote",
    "score_claim_to_quote",
    "source_ratio_from",
    "split_into_claims",
]
