"""End-to-end: strategy and sections -> coverage -> readiness -> outcomes -> tuning."""

from __future__ import annotations

from bid_readiness.config_store import get_bid_readiness_config
from bid_readiness.coverage import compute_rubric_coverage
from bid_readiness.models import ProofItem
from bid_readiness.outcomes import (
    RfpOutcomeRecord,
    analyze_outcomes,
    build_submission_snapshot,
    get_relevant_insights,
)
from bid_readiness.readiness import (
    BidReadinessInputs,
    assess_bid_readiness,
    compute_bid_readiness,
)
from bid_readiness.tuning import apply_suggestion, suggest_readiness_tuning
from tests.helpers.factories import make_records, make_section, make_strategy


def _three_criteria_strategy():
    return make_strategy(
        [("Delivery Method", 0.5), ("Staffing Plan", 0.3), ("Local Presence", 0.2)],
        proof_plan=[ProofItem(id="p1", priority=4), ProofItem(id="p2", priority=2)],
        primary_sections={
            "Delivery Method": ["approach"],
            "Staffing Plan": ["team"],
            "Local Presence": ["references"],
        },
    )


def _sections():
    return [
        make_section("approach", proof=["p1", "p2"]),
        make_section("team", proof=["p1", "p2"]),
    ]


def test_coverage_health_is_weighted_mean_of_criteria(persona_settings):
    coverage = compute_rubric_coverage(_three_criteria_strategy(), _sections(), persona_settings)

    by_label = {item.criterion_label: item for item in coverage.criterion_coverage}
    assert by_label["Delivery Method"].coverage_score == 100
    assert by_label["Delivery Method"].proof_coverage_score == 100
    assert by_label["Staffing Plan"].coverage_score == 100
    assert by_label["Staffing Plan"].proof_coverage_score == 100
    assert by_label["Local Presence"].coverage_score == 0
    assert by_label["Local Presence"].is_risk is True
    assert coverage.criterion_coverage[0].criterion_label == "Local Presence"
    assert coverage.overall_health == 80


def test_assess_bid_readiness_runs_full_pipeline():
    config = get_bid_readiness_config()

    readiness = assess_bid_readiness(
        strategy=_three_criteria_strategy(),
        sections=_sections(),
        foundational_score=85,
        strategy_score=90,
        config=config,
    )

    assert readiness.is_reliable_assessment is True
    assert readiness.breakdown.rubric_coverage_health == 80
    assert readiness.breakdown.proof_coverage == 67
    assert readiness.breakdown.persona_alignment == 75
    assert readiness.score == 81
    assert readiness.recommendation == "go"
    assert readiness.reasons[0] == "Overall readiness score is 81% - ready to proceed"
    assert readiness.top_risks == []

    direct = compute_bid_readiness(
        BidReadinessInputs(
            foundational_score=85,
            strategy_score=90,
            rubric_coverage=compute_rubric_coverage(_three_criteria_strategy(), _sections()),
        ),
        config,
    )
    assert direct.score == readiness.score


def test_outcome_history_drives_surfacing_and_tuning():
    history = make_records(
        25, 15, score=80, recommendation="go", prefix="strong"
    ) + make_records(
        25,
        5,
        score=40,
        recommendation="no_go",
        prefix="weak",
        risks=[{"category": "strategy", "severity": "critical"}],
        loss_reasons=["experience"],
    )

    analysis = analyze_outcomes(history)
    insight = analysis.find_insight("score >= 70")
    assert insight.sample_size == 25
    assert insight.win_rate_delta == 20
    assert insight.confidence == "high"
    assert insight.recommendation

    readiness = compute_bid_readiness(BidReadinessInputs(10, 10, None))
    snapshot = build_submission_snapshot(readiness)
    history.append(RfpOutcomeRecord(id="latest", submission_snapshot=snapshot, outcome=None))
    assert analyze_outcomes(history).complete_records == 50

    relevant = get_relevant_insights(analysis, readiness)
    assert relevant[0].insight.signal == "submitted with critical risks"

    result = suggest_readiness_tuning(analysis)
    assert result.has_enough_data is True
    assert [item.id for item in result.suggestions] == [
        "tuning-penalty-1",
        "tuning-penalty-2",
        "tuning-penalty-3",
    ]

    config = get_bid_readiness_config()
    tuned = apply_suggestion(config, result.suggestions[0])
    assert tuned.penalties.critical_risk_penalty == 15
    assert config.penalties.critical_risk_penalty == 10
