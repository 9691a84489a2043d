"""Verify a generated summary against its citation pool."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from policy_evidence.config import Settings, load_config
from policy_evidence.domain.errors import SummaryFormatError
from policy_evidence.domain.models import (
    AnnotatedClaim,
    EvidenceMetric,
    Location,
    SectionReport,
    Summary,
    SummaryReport,
)
from policy_evidence.evidence.annotate import annotate_claims_with_evidence
from policy_evidence.evidence.constants import Heuristics
from policy_evidence.evidence.coverage import first_citation_for, source_ratio_from
from policy_evidence.evidence.dedupe import dedupe_citations
from policy_evidence.evidence.splitter import split_into_claims


logger = logging.getLogger("policy_evidence.verification")

NOTICE_NO_CLAIMS = "no_claims"
NOTICE_NO_EVIDENCE = "no_evidence"
NOTICE_LIMITED = "limited"

NOTICE_TEXT = {
    NOTICE_NO_CLAIMS: "No content available.",
    NOTICE_NO_EVIDENCE: "No matching evidence found in the available source excerpts.",
    NOTICE_LIMITED: "Some claims may be unverified because the available excerpts are limited. Open sources below for full text.",
}
NO_QUOTE_MESSAGE = "No supporting quote found"


def summarize_annotations(annotated: Sequence[AnnotatedClaim]) -> EvidenceMetric:
    total = len(annotated)
    supported = sum(1 for a in annotated if a.supported)
    if total == 0:
        notice: Optional[str] = NOTICE_NO_CLAIMS
    elif supported == 0:
        notice = NOTICE_NO_EVIDENCE
    elif supported / total < 0.5:
        notice = NOTICE_LIMITED
    else:
        notice = None
    return EvidenceMetric(supported=supported, total=total, notice=notice)


def evidence_panel(annotated: AnnotatedClaim, max_quote_chars: int = 300) -> dict:
    """What an expanded per-claim evidence panel shows."""
    citation = annotated.best_citation
    if not annotated.supported or citation is None:
        return {"status": annotated.status.value, "message": NO_QUOTE_MESSAGE}
    quote = (citation.quote or "").strip()
    if len(quote) > max_quote_chars:
        quote = f"{quote[:max_quote_chars]}…"
    return {
        "status": annotated.status.value,
        "quote": quote,
        "sourceName": citation.source_name or "",
        "url": citation.url,
    }


def _resolve_sections(sections: Optional[Iterable], settings: Settings) -> List[Location]:
    requested = sections if sections is not None else settings.evidence.sections
    resolved: List[Location] = []
    for value in requested:
        loc = Location.parse(value)
        if loc is None:
            logger.warning("ignoring unknown section", extra={"section": str(value)})
            continue
        if loc not in resolved:
            resolved.append(loc)
    return resolved


def verify_summary(
    summary: Summary,
    threshold: Optional[float] = None,
    sections: Optional[Iterable] = None,
    heuristics: Optional[Heuristics] = None,
    config: Optional[Settings] = None,
) -> SummaryReport:
    cfg = config or load_config()
    h = heuristics or cfg.evidence.to_heuristics()
    cutoff = cfg.evidence.threshold if threshold is None else threshold
    pool = dedupe_citations(summary.citations)
    logger.debug("citation pool deduplicated", extra={"raw": len(summary.citations), "unique": len(pool)})

    reports: List[SectionReport] = []
    for location in _resolve_sections(sections, cfg):
        text = summary.section(location)
        if not text.strip():
            continue
        claims = split_into_claims(text, h)
        annotated = annotate_claims_with_evidence(claims, pool, cutoff, h)
        reports.append(
            SectionReport(
                location=location,
                claims=tuple(annotated),
                metric=summarize_annotations(annotated),
                first_citation=first_citation_for(pool, location),
            )
        )

    blocks = summary.blocks()
    ratio = source_ratio_from(blocks, summary.citations)
    logger.info(
        "summary verified",
        extra={
            "sections": [r.location.value for r in reports],
            "supported": sum(r.metric.supported for r in reports),
            "claims": sum(r.metric.total for r in reports),
            "source_ratio": round(ratio, 4),
        },
    )
    return SummaryReport(
        threshold=cutoff,
        source_ratio=ratio,
        sections=tuple(reports),
        citation_count=len(pool),
        section_count=sum(1 for b in blocks if b.strip()),
    )


def load_summary(path: Path) -> Summary:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SummaryFormatError(f"Cannot read summary file {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SummaryFormatError(f"Summary file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SummaryFormatError(f"Summary file must contain a JSON object: {path}")
    return Summary.from_dict(data)


__all__ = [
    "NO_QUOTE_MESSAGE",
    "NOTICE_TEXT",
    "summarize_annotations",
    "evidence_panel",
    "verify_summary",
    "load_summary",
]
