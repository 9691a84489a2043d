import json
from pathlib import Path

import pytest

from policy_evidence.config import Settings
from policy_evidence.domain.errors import SummaryFormatError
from policy_evidence.domain.models import AnnotatedClaim, Citation, ClaimStatus, Location, Summary
from policy_evidence.services import verification_service as vs


def test_summary_from_dict_accepts_generator_keys():
    summary = Summary.from_dict(
        {
            "tldr": "Short text.",
            "whatItDoes": "Does things.",
            "who_affected": "Everyone.",
            "pros": ["Cheaper", "Faster"],
            "citations": [
                {"quote": "q", "sourceName": "LAO", "location": "WHAT"},
                {"quote": "r", "source_name": "SOS", "location": "footer"},
                "not a citation",
            ],
        }
    )
    assert summary.what_it_does == "Does things."
    assert summary.who_affected == "Everyone."
    assert summary.pros == "Cheaper\nFaster"
    assert summary.cons is None
    assert summary.citations == (
        Citation(quote="q", source_name="LAO", location=Location.what),
        Citation(quote="r", source_name="SOS"),
    )
    assert summary.blocks() == ["Short text.", "Does things.", "Everyone.", "Cheaper\nFaster", ""]


def test_verify_summary_supported_tldr(summary_dict):
    report = vs.verify_summary(Summary.from_dict(summary_dict), config=Settings())
    assert report.threshold == 0.18
    assert report.citation_count == 1
    assert report.section_count == 5
    assert report.source_ratio == pytest.approx(1 / 5)
    [section] = report.sections
    assert section.location is Location.tldr
    assert section.metric.supported == 1
    assert section.metric.total == 1
    assert section.metric.notice is None
    assert section.claims[0].status is ClaimStatus.supported
    assert section.first_citation.source_name == "LAO"


def test_verify_summary_without_citations(summary_dict):
    summary_dict["citations"] = []
    report = vs.verify_summary(Summary.from_dict(summary_dict), config=Settings())
    [section] = report.sections
    assert section.metric.supported == 0
    assert section.metric.notice == "no_evidence"
    assert all(c.best_citation is None for c in section.claims)
    assert section.first_citation is None
    assert report.source_ratio == 0


def test_verify_summary_sections_and_threshold(summary_dict):
    del summary_dict["whoAffected"]
    report = vs.verify_summary(
        Summary.from_dict(summary_dict),
        threshold=0.99,
        sections=["tldr", "who", "what", "bogus", "tldr"],
        config=Settings(),
    )
    assert [s.location for s in report.sections] == [Location.tldr, Location.what]
    assert report.threshold == 0.99
    assert report.sections[0].claims[0].status is ClaimStatus.unverified
    assert report.section_count == 4


def test_verify_summary_uses_configured_sections(summary_dict):
    settings = Settings(evidence={"sections": ["pros", "cons"], "threshold": 0.5})
    report = vs.verify_summary(Summary.from_dict(summary_dict), config=settings)
    assert [s.location for s in report.sections] == [Location.pros, Location.cons]
    assert report.threshold == 0.5


def test_report_to_dict_is_json_serializable(summary_dict):
    report = vs.verify_summary(Summary.from_dict(summary_dict), config=Settings())
    data = json.loads(json.dumps(report.to_dict()))
    assert data["sections"][0]["metric"]["label"] == "Supported 1/1 claims"
    assert data["sections"][0]["claims"][0]["bestCitation"]["location"] == "tldr"


def _claim(status: ClaimStatus, citation=None) -> AnnotatedClaim:
    return AnnotatedClaim(claim="c", status=status, score=0.5, overlap=0.5, best_citation=citation)


def test_summarize_annotations_notices():
    supported = _claim(ClaimStatus.supported, Citation(quote="q", source_name="s"))
    unverified = _claim(ClaimStatus.unverified)
    assert vs.summarize_annotations([]).notice == "no_claims"
    assert vs.summarize_annotations([unverified]).notice == "no_evidence"
    assert vs.summarize_annotations([supported, unverified, unverified]).notice == "limited"
    metric = vs.summarize_annotations([supported, supported, unverified])
    assert metric.notice is None
    assert metric.label == "Supported 2/3 claims"


def test_evidence_panel_truncates_long_quotes():
    citation = Citation(quote="x" * 400, source_name="Official Guide", url="https://voterguide.sos.ca.gov/")
    panel = vs.evidence_panel(_claim(ClaimStatus.supported, citation))
    assert len(panel["quote"]) == 301
    assert panel["quote"].endswith("…")
    assert panel["sourceName"] == "Official Guide"


def test_evidence_panel_unverified_message():
    panel = vs.evidence_panel(_claim(ClaimStatus.unverified))
    assert panel == {"status": "unverified", "message": vs.NO_QUOTE_MESSAGE}


def test_load_summary(tmp_path: Path, summary_dict):
    path = tmp_path / "summary.json"
    path.write_text(json.dumps(summary_dict), encoding="utf-8")
    summary = vs.load_summary(path)
    assert summary.tldr.startswith("Reclassifies")
    assert len(summary.citations) == 1


def test_load_summary_errors(tmp_path: Path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    listed = tmp_path / "list.json"
    listed.write_text("[]", encoding="utf-8")
    for path in [bad, listed, tmp_path / "missing.json"]:
        with pytest.raises(SummaryFormatError):
            vs.load_summary(path)
