from __future__ import annotations

import pytest

from bid_readiness.models import ProofItem, WinTheme
from bid_readiness.taxonomy import create_default_persona_settings
from tests.helpers.factories import make_section, make_strategy


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    monkeypatch.setenv("BID_READINESS_CONFIG_PATH", "")
    monkeypatch.setenv("BID_READINESS_TAXONOMY_PATH", "")


@pytest.fixture
def persona_settings():
    return create_default_persona_settings()


@pytest.fixture
def sample_strategy():
    return make_strategy(
        [
            ("Technical Approach", 0.4),
            ("Pricing and Cost", 0.3),
            ("Team Qualifications", 0.3),
        ],
        themes=[
            WinTheme(id="t1", label="Proven methodology", description="Agile delivery approach"),
        ],
        proof_plan=[
            ProofItem(id="p1", label="Case study", priority=5),
            ProofItem(id="p2", label="Reference letter", priority=3),
        ],
    )


@pytest.fixture
def sample_sections():
    return [
        make_section("approach", themes=["t1"], proof=["p1"]),
        make_section("pricing", proof=["p2"]),
        make_section("team"),
    ]
