"""Split generated summary prose into short, independently checkable claims."""

from __future__ import annotations

import re
from typing import List, Optional

from policy_evidence.evidence.constants import DEFAULT_HEURISTICS, Heuristics
from policy_evidence.text.normalize import has_number, normalize, tokenize


INLINE_BULLET_RE = re.compile(r"\s[-•]\s")
LIST_SPLIT_RE = re.compile(r"\s*\n\s*|\s+[-•]\s+")
BULLET_PREFIX_RE = re.compile(r"^[-•*]\s+")
# Sentence punctuation only counts when followed by whitespace, so "1.5" and "$950.00" stay whole.
SENTENCE_SPLIT_RE = re.compile(r"(?<=[.;!?])\s+")
ALNUM_RE = re.compile(r"[a-z0-9]", re.IGNORECASE)


def _is_list(raw: str, normalized: str) -> bool:
    return "\n" in raw or INLINE_BULLET_RE.search(normalized) is not None


def _list_parts(raw: str) -> List[str]:
    parts = []
    for piece in LIST_SPLIT_RE.split(raw):
        piece = BULLET_PREFIX_RE.sub("", normalize(piece)).strip()
        if piece:
            parts.append(piece)
    return parts


def _sentence_parts(normalized: str) -> List[str]:
    return [p.strip() for p in SENTENCE_SPLIT_RE.split(normalized) if p.strip()]


def _is_meaningful(part: str) -> bool:
    if not ALNUM_RE.search(part):
        return False
    return bool(tokenize(part)) or has_number(part)


def _is_continuation(words: List[str], heuristics: Heuristics) -> bool:
    first = words[0].strip(",;:").lower()
    if first in heuristics.continuation_words:
        return True
    # "It also changes penalties." leans on the previous claim as much as "Also changes penalties."
    return len(words) > 1 and words[1].strip(",;:").lower() == "also"


def _should_merge(part: str, min_words: int, heuristics: Heuristics) -> bool:
    words = part.split()
    if len(words) < min_words:
        return True
    return _is_continuation(words, heuristics)


def split_into_claims(text: Optional[str], heuristics: Optional[Heuristics] = None) -> List[str]:
    """Break summary text into at most ``max_claims`` claim strings.

    Newline or bullet separated text is split per item; other text is split per
    sentence. Short or dangling fragments are folded into a neighbouring claim.
    Returns an empty list only when the text is blank, and falls back to the whole
    normalized text when splitting does not produce anything useful.
    """
    h = heuristics or DEFAULT_HEURISTICS
    normalized = normalize(text)
    if not normalized:
        return []

    raw = str(text)
    if _is_list(raw, normalized):
        parts = _list_parts(raw)
        min_words = h.list_merge_min_words
    else:
        parts = _sentence_parts(normalized)
        min_words = h.merge_min_words

    if len(parts) <= 1:
        return [normalized]

    merged: List[str] = []
    buffer = ""
    for part in parts:
        if not _is_meaningful(part):
            continue
        if _should_merge(part, min_words, h):
            if merged:
                merged[-1] = f"{merged[-1]} {part}"
            else:
                buffer = f"{buffer} {part}".strip()
            continue
        merged.append(f"{buffer} {part}".strip())
        buffer = ""
    if buffer:
        # only reachable when nothing stood on its own
        merged.append(buffer)

    cleaned = [c for c in merged if has_number(c) or len(c.split()) >= h.min_claim_words]
    if not cleaned:
        return [normalized]
    return cleaned[: h.max_claims]


__all__ = ["split_into_claims"]
