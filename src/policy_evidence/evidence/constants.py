"""Tunable constants for claim splitting and evidence scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Heuristics:
    # splitter
    merge_min_words: int = 6
    list_merge_min_words: int = 3
    min_claim_words: int = 3
    max_claims: int = 6
    continuation_words: Tuple[str, ...] = ("and", "or", "but", "also", "with")
    # annotator
    short_claim_tokens: int = 4
    short_claim_min_overlap: float = 0.6
    long_claim_min_overlap: float = 0.35
    # matcher
    overlap_weight: float = 0.6
    jaccard_weight: float = 0.4
    number_bonus: float = 0.1

    def min_overlap_for(self, token_count: int) -> float:
        if token_count <= self.short_claim_tokens:
            return self.short_claim_min_overlap
        return self.long_claim_min_overlap


DEFAULT_HEURISTICS = Heuristics()


__all__ = ["Heuristics", "DEFAULT_HEURISTICS"]
