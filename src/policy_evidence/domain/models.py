"""Domain models for claim verification."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, List, Optional, Tuple


class Location(str, Enum):
    tldr = "tldr"
    what = "what"
    who = "who"
    pros = "pros"
    cons = "cons"

    @classmethod
    def parse(cls, value: Any) -> Optional["Location"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class ClaimStatus(str, Enum):
    supported = "supported"
    unverified = "unverified"


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Citation:
    """A quoted excerpt plus provenance offered as evidence.

    ``None`` marks an absent field and is distinct from an empty string.
    """

    quote: Optional[str] = None
    source_name: Optional[str] = None
    url: Optional[str] = None
    location: Optional[Location] = None
    badge: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Citation":
        source_name = data.get("sourceName", data.get("source_name"))
        return cls(
            quote=_optional_str(data.get("quote")),
            source_name=_optional_str(source_name),
            url=_optional_str(data.get("url")),
            location=Location.parse(data.get("location")),
            badge=_optional_str(data.get("badge")),
        )

    def to_dict(self) -> dict:
        out: dict = {"quote": self.quote, "sourceName": self.source_name}
        if self.url is not None:
            out["url"] = self.url
        if self.location is not None:
            out["location"] = self.location.value
        if self.badge is not None:
            out["badge"] = self.badge
        return out


@dataclass(frozen=True)
class EvidenceMatch:
    quote: str
    score: float
    overlap: float
    has_number_match: bool
    source_name: str = ""
    url: Optional[str] = None

    def with_source(self, citation: Citation) -> "EvidenceMatch":
        return replace(self, source_name=citation.source_name or "", url=citation.url)

    def to_dict(self) -> dict:
        return {
            "quote": self.quote,
            "sourceName": self.source_name,
            "url": self.url,
            "score": self.score,
            "overlap": self.overlap,
            "hasNumberMatch": self.has_number_match,
        }


@dataclass(frozen=True)
class BestEvidence:
    best: Optional[Citation] = None
    score: float = 0.0
    overlap: float = 0.0
    has_number_match: bool = False


@dataclass(frozen=True)
class AnnotatedClaim:
    claim: str
    status: ClaimStatus
    score: float
    overlap: float
    best_citation: Optional[Citation] = None

    @property
    def supported(self) -> bool:
        return self.status is ClaimStatus.supported

    def to_dict(self) -> dict:
        return {
            "claim": self.claim,
            "status": self.status.value,
            "bestCitation": self.best_citation.to_dict() if self.best_citation else None,
            "score": self.score,
            "overlap": self.overlap,
        }


@dataclass(frozen=True)
class EvidenceMetric:
    supported: int
    total: int
    notice: Optional[str] = None

    @property
    def label(self) -> str:
        return f"Supported {self.supported}/{self.total} claims"

    def to_dict(self) -> dict:
        return {"supported": self.supported, "total": self.total, "label": self.label, "notice": self.notice}


def _section_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return "\n".join(str(v) for v in value if v)
    return str(value)


@dataclass(frozen=True)
class Summary:
    """A generated summary with its candidate citation pool."""

    tldr: Optional[str] = None
    what_it_does: Optional[str] = None
    who_affected: Optional[str] = None
    pros: Optional[str] = None
    cons: Optional[str] = None
    citations: Tuple[Citation, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Summary":
        raw_citations = data.get("citations") or []
        citations = tuple(Citation.from_dict(c) for c in raw_citations if isinstance(c, dict))
        return cls(
            tldr=_section_text(data.get("tldr")),
            what_it_does=_section_text(data.get("whatItDoes", data.get("what_it_does"))),
            who_affected=_section_text(data.get("whoAffected", data.get("who_affected"))),
            pros=_section_text(data.get("pros")),
            cons=_section_text(data.get("cons")),
            citations=citations,
        )

    def section(self, location: Location) -> str:
        text = {
            Location.tldr: self.tldr,
            Location.what: self.what_it_does,
            Location.who: self.who_affected,
            Location.pros: self.pros,
            Location.cons: self.cons,
        }[location]
        return text or ""

    def blocks(self) -> List[str]:
        return [self.section(loc) for loc in Location]


@dataclass(frozen=True)
class SectionReport:
    location: Location
    claims: Tuple[AnnotatedClaim, ...]
    metric: EvidenceMetric
    first_citation: Optional[Citation] = None

    def to_dict(self) -> dict:
        return {
            "location": self.location.value,
            "metric": self.metric.to_dict(),
            "claims": [c.to_dict() for c in self.claims],
            "firstCitation": self.first_citation.to_dict() if self.first_citation else None,
        }


@dataclass(frozen=True)
class SummaryReport:
    threshold: float
    source_ratio: float
    sections: Tuple[SectionReport, ...] = field(default_factory=tuple)
    citation_count: int = 0
    section_count: int = 0

    def to_dict(self) -> dict:
        return {
            "threshold": self.threshold,
            "sourceRatio": self.source_ratio,
            "citationCount": self.citation_count,
            "sectionCount": self.section_count,
            "sections": [s.to_dict() for s in self.sections],
        }
