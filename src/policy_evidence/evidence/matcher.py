"""Lexical similarity between one claim and one citation quote."""

from __future__ import annotations

from typing import Optional

from policy_evidence.domain.models import EvidenceMatch
from policy_evidence.evidence.constants import DEFAULT_HEURISTICS, Heuristics
from policy_evidence.text.normalize import extract_numbers, normalize, tokenize


def match_claim_to_quote(claim: Optional[str], quote: Optional[str], heuristics: Optional[Heuristics] = None) -> EvidenceMatch:
    """Score how well ``quote`` attests ``claim``.

    ``overlap`` is claim-centric: the share of the claim's content words found in
    the quote. It is weighted above Jaccard so a long quote that restates the claim
    inside extra context still scores well. A number shared verbatim adds a bonus.
    Provenance is left blank; attach it with ``EvidenceMatch.with_source``.
    """
    h = heuristics or DEFAULT_HEURISTICS
    claim_set = set(tokenize(claim))
    quote_set = set(tokenize(quote))

    inter = len(claim_set & quote_set)
    union = len(claim_set | quote_set)
    jaccard = inter / union if union else 0.0
    overlap = inter / len(claim_set) if claim_set else 0.0

    quote_nums = set(extract_numbers(quote))
    has_number_match = any(n in quote_nums for n in extract_numbers(claim))

    score = h.overlap_weight * overlap + h.jaccard_weight * jaccard
    if has_number_match:
        score += h.number_bonus
    score = min(1.0, max(0.0, score))

    return EvidenceMatch(
        quote=normalize(quote),
        score=score,
        overlap=overlap,
        has_number_match=has_number_match,
    )


def score_claim_to_quote(claim: Optional[str], quote: Optional[str], heuristics: Optional[Heuristics] = None) -> float:
    return match_claim_to_quote(claim, quote, heuristics).score


__all__ = ["match_claim_to_quote", "score_claim_to_quote"]
