from __future__ import annotations

import pytest
from pydantic import ValidationError

from bid_readiness.models import EvaluationCriterion, ProofItem, Section, WinStrategy


def test_strategy_accepts_camel_case_payload():
    strategy = WinStrategy.model_validate(
        {
            "evaluationCriteria": [
                {"label": "Technical Approach", "weight": 0.4, "primarySections": ["approach"]},
                {"label": "Pricing"},
            ],
            "winThemes": [{"id": "t1", "label": "Speed"}],
            "proofPlan": [{"id": "p1", "label": "Case study", "priority": 5}],
        }
    )

    assert strategy.evaluation_criteria[0].primary_sections == ["approach"]
    assert strategy.evaluation_criteria[1].effective_weight == 0.5
    assert strategy.find_theme("t1").label == "Speed"
    assert strategy.find_theme("missing") is None


def test_section_accepts_snake_case_and_reports_applied_inputs():
    section = Section.model_validate(
        {
            "id": "s1",
            "section_key": "approach",
            "generated_using": {
                "has_win_strategy": True,
                "win_themes_applied": ["t1"],
                "proof_items_applied": ["p1"],
            },
        }
    )

    assert section.has_content is True
    assert section.themes_applied == ["t1"]
    assert section.proof_applied == ["p1"]
    assert Section(id="s2", section_key="team", status="empty").has_content is False
    assert Section(id="s3", section_key="team").proof_applied == []


def test_proof_priority_defaults_to_three():
    assert ProofItem(id="p1").effective_priority == 3
    assert ProofItem(id="p3", priority=5).effective_priority == 5


@pytest.mark.parametrize("priority", [0, 6])
def test_proof_priority_must_be_between_one_and_five(priority):
    with pytest.raises(ValidationError):
        ProofItem(id="p1", priority=priority)


def test_criterion_weight_must_be_within_unit_range():
    with pytest.raises(ValidationError):
        EvaluationCriterion(label="Heavy", weight=1.5)
