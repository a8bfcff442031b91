from __future__ import annotations

import pytest

from bid_readiness.config_store import DEFAULT_BID_READINESS_CONFIG, BidReadinessConfig
from bid_readiness.readiness import (
    BidReadinessBreakdown,
    BidRisk,
    persona_alignment_score,
    proof_coverage_score,
)
from bid_readiness.readiness.components import adjusted_score, overall_score
from tests.helpers.factories import make_coverage, make_criterion_coverage


def _breakdown(*scores: float) -> BidReadinessBreakdown:
    foundational, strategy, coverage, proof, persona = scores
    return BidReadinessBreakdown(
        foundational_readiness=foundational,
        strategy_health=strategy,
        rubric_coverage_health=coverage,
        proof_coverage=proof,
        persona_alignment=persona,
        weights=DEFAULT_BID_READINESS_CONFIG.weights,
    )


def test_persona_alignment_is_neutral_without_settings():
    coverage = make_coverage([make_criterion_coverage("A")], has_persona_settings=False)

    assert persona_alignment_score(None) == 75
    assert persona_alignment_score(coverage) == 75


def test_persona_alignment_is_full_without_criteria():
    assert persona_alignment_score(make_coverage([])) == 100


@pytest.mark.parametrize(
    "criteria,expected",
    [
        ([make_criterion_coverage("A", weight=0.1, persona_risk_level="medium")], 90),
        (
            [
                make_criterion_coverage("A", weight=0.4, persona_risk_level="high"),
                make_criterion_coverage("B", weight=0.2, index=1),
            ],
            60,
        ),
        ([make_criterion_coverage("A", weight=0.5, persona_risk_level="low")], 75),
        ([make_criterion_coverage("A", weight=1.0, persona_risk_level="high")], 0),
    ],
)
def test_persona_alignment_penalizes_weighted_mismatches(criteria, expected):
    assert persona_alignment_score(make_coverage(criteria)) == expected


def test_proof_coverage_is_mean_of_criteria():
    coverage = make_coverage(
        [
            make_criterion_coverage("A", proof=100),
            make_criterion_coverage("B", proof=45, index=1),
        ]
    )

    assert proof_coverage_score(coverage) == 73
    assert proof_coverage_score(make_coverage([])) == 0
    assert proof_coverage_score(None) == 0


def test_overall_score_is_weighted_sum():
    assert overall_score(_breakdown(90, 90, 90, 90, 90), DEFAULT_BID_READINESS_CONFIG) == 90
    assert overall_score(_breakdown(50, 50, 60, 60, 75), DEFAULT_BID_READINESS_CONFIG) == 58


def test_overall_score_renormalizes_missing_components_when_configured():
    breakdown = _breakdown(80, 0, 80, 80, 75)
    renormalize = BidReadinessConfig.model_validate({"partial_data": {"mode": "renormalize"}})

    zero_filled = overall_score(breakdown, DEFAULT_BID_READINESS_CONFIG, has_strategy=False)
    renormalized = overall_score(breakdown, renormalize, has_strategy=False)

    assert zero_filled == 63
    # 63.25 / 0.8 * 0.9
    assert renormalized == 71


def test_renormalize_without_any_input_scores_zero():
    config = BidReadinessConfig.model_validate({"partial_data": {"mode": "renormalize"}})

    score = overall_score(
        _breakdown(0, 0, 0, 0, 75),
        config,
        has_foundational=False,
        has_strategy=False,
        has_coverage=False,
    )

    assert score == 0


def test_adjusted_score_applies_configured_penalties():
    coverage = make_coverage(
        [
            make_criterion_coverage("A", proof=10, persona_risk_level="high"),
            make_criterion_coverage("B", proof=20, index=1),
        ]
    )
    risks = [BidRisk(category="strategy", severity="critical", description="x")]
    config = BidReadinessConfig.model_validate(
        {"penalties": {"persona_mismatch_multiplier": 0.5}}
    )

    # (80 - 10 - 2 * 2) * 0.5
    assert adjusted_score(80, risks, coverage, config) == 33
    assert adjusted_score(5, risks, None, config) == 0
