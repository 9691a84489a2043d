"""Text normalization shared by the claim splitter and the matcher."""

from __future__ import annotations

import re
from typing import List, Optional


STOPWORDS = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "to",
        "of",
        "in",
        "on",
        "for",
        "with",
        "by",
        "from",
        "that",
        "this",
        "these",
        "those",
        "is",
        "are",
        "was",
        "were",
        "be",
        "been",
        "being",
        "will",
        "shall",
        "may",
        "can",
        "could",
        "should",
        "would",
        "it",
        "its",
        "as",
        "at",
    }
)

WHITESPACE_RE = re.compile(r"\s+")
PUNCT_RE = re.compile(r"[^\w\s]")
NUMBER_RE = re.compile(r"\b\d+(?:\.\d+)?\b")


def normalize(text: Optional[str]) -> str:
    """Collapse runs of whitespace (newlines included) and trim."""
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", str(text)).strip()


def normalize_key(text: Optional[str]) -> str:
    return normalize(text).lower()


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase content words with punctuation stripped and stopwords removed.

    Order and duplicates are preserved; callers that need sets build them.
    """
    cleaned = PUNCT_RE.sub(" ", normalize_key(text))
    return [w for w in cleaned.split() if w and w not in STOPWORDS]


def extract_numbers(text: Optional[str]) -> List[str]:
    """Integer and decimal literals as they appear in the text ("$950" -> "950")."""
    if not text:
        return []
    return NUMBER_RE.findall(str(text))


def has_number(text: Optional[str]) -> bool:
    return bool(text) and NUMBER_RE.search(str(text)) is not None


def word_count(text: Optional[str]) -> int:
    return len(normalize(text).split())


__all__ = [
    "STOPWORDS",
    "normalize",
    "normalize_key",
    "tokenize",
    "extract_numbers",
    "has_number",
    "word_count",
]
