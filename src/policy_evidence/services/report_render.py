"""Render a verification report as Markdown."""

from __future__ import annotations

from jinja2 import Template

from policy_evidence.domain.models import AnnotatedClaim, Location, SummaryReport
from policy_evidence.services.verification_service import NOTICE_TEXT, evidence_panel


SECTION_TITLES = {
    Location.tldr: "TL;DR",
    Location.what: "What it does",
    Location.who: "Who's affected",
    Location.pros: "Pros",
    Location.cons: "Cons",
}


# trim_blocks drops the newline after each block tag, so every line ends outside a tag
def _report_template() -> Template:
    return Template(
        """# Evidence report
{% for section in sections %}

## {{ section.title }}

{{ section.label }}
{% if section.notice %}

_{{ section.notice }}_
{% endif %}

{% for item in section.claims %}
- **{{ item.badge }}** {{ item.claim }}
{% if item.quote %}
  > {{ item.quote }}
  Source: {{ item.source }}
{% else %}
  {{ item.message }}
{% endif %}
{% endfor %}
{% else %}

_No content available._
{% endfor %}

Sources cited: {{ cited }}/{{ total }} sections
""",
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _claim_row(item: AnnotatedClaim, max_quote_chars: int) -> dict:
    panel = evidence_panel(item, max_quote_chars)
    url = panel.get("url")
    name = panel.get("sourceName") or ""
    return {
        "claim": item.claim,
        "badge": "Supported" if item.supported else "Unverified",
        "quote": panel.get("quote"),
        "source": f"[{name or url}]({url})" if url else name,
        "message": panel.get("message"),
    }


def render_markdown(report: SummaryReport, max_quote_chars: int = 300) -> str:
    sections = []
    for section in report.sections:
        sections.append(
            {
                "title": SECTION_TITLES[section.location],
                "label": section.metric.label,
                "notice": NOTICE_TEXT.get(section.metric.notice) if section.metric.notice else None,
                "claims": [_claim_row(item, max_quote_chars) for item in section.claims],
            }
        )
    cited = round(report.source_ratio * report.section_count)
    return _report_template().render(sections=sections, cited=cited, total=report.section_count)


__all__ = ["render_markdown", "SECTION_TITLES"]
