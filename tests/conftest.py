import logging

import pytest

from policy_evidence.domain.models import Citation, Location


ENV_VARS = [
    "POLICY_EVIDENCE_CONFIG",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
    "EVIDENCE_THRESHOLD",
    "EVIDENCE_SECTIONS",
    "EVIDENCE_MAX_CLAIMS",
    "EVIDENCE_MERGE_MIN_WORDS",
    "EVIDENCE_LIST_MERGE_MIN_WORDS",
    "EVIDENCE_MAX_QUOTE_CHARS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def lao_citation():
    return Citation(
        quote="The measure reclassifies some nonviolent theft offenses and sets the threshold at $950.",
        source_name="LAO",
        url="https://www.lao.ca.gov/",
        location=Location.tldr,
    )


@pytest.fixture
def summary_dict():
    return {
        "tldr": "Reclassifies certain nonviolent theft offenses as misdemeanors when the value is $950 or less; includes resentencing provisions.",
        "whatItDoes": "Adjusts penalties and funding thresholds for specific offenses.",
        "whoAffected": "People charged with covered offenses and local agencies.",
        "pros": "Focuses resources on serious crime and saves incarceration costs.",
        "cons": "Could reduce deterrence or require administrative updates.",
        "citations": [
            {
                "quote": "The measure reclassifies some nonviolent theft offenses and sets the threshold at $950.",
                "sourceName": "LAO",
                "url": "https://www.lao.ca.gov/",
                "location": "tldr",
            }
        ],
    }


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
