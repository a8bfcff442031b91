from __future__ import annotations

from datetime import datetime, timezone

from bid_readiness.outcomes import (
    CRITICAL_RISKS_SIGNAL,
    OutcomeAnalysisResult,
    OutcomeInsight,
    build_submission_snapshot,
    get_relevant_insights,
    get_submission_insights,
    has_valid_insights,
)
from bid_readiness.readiness import BidReadinessInputs, compute_bid_readiness
from tests.helpers.factories import make_coverage, make_criterion_coverage


def _insight(signal, delta, *, sample=20, category="score_threshold", confidence="high"):
    return OutcomeInsight(
        signal=signal,
        win_rate_delta=delta,
        sample_size=sample,
        confidence=confidence,
        category=category,
    )


def _analysis(*insights, complete=40) -> OutcomeAnalysisResult:
    return OutcomeAnalysisResult(
        total_analyzed=complete,
        complete_records=complete,
        overall_win_rate=40,
        insights=list(insights),
        is_statistically_meaningful=complete >= 5,
    )


def _readiness(foundational, strategy):
    coverage = make_coverage(
        [make_criterion_coverage("A", weight=0.1)],
        overall_health=100,
        has_persona_settings=False,
    )
    return compute_bid_readiness(
        BidReadinessInputs(
            foundational_score=foundational,
            strategy_score=strategy,
            rubric_coverage=coverage,
        )
    )


def test_has_valid_insights():
    assert has_valid_insights(None) is False
    assert has_valid_insights(_analysis(_insight("score >= 70", 20), complete=3)) is False
    assert has_valid_insights(_analysis(_insight("score >= 70", 20, confidence="low"))) is False
    assert has_valid_insights(_analysis(_insight("score >= 70", 20))) is True


def test_submission_insights_are_ordered_by_specificity():
    analysis = _analysis(
        _insight("score >= 70", 15),
        _insight("recommendation = Conditional Go", -12, category="recommendation"),
        _insight("submitted with acknowledged risks", -8, category="acknowledgement"),
        _insight(CRITICAL_RISKS_SIGNAL, -25, category="risk", confidence="medium"),
    )

    relevant = get_submission_insights(
        analysis,
        "conditional",
        has_critical_risks=True,
        has_acknowledged_risks=True,
        score=72,
    )

    assert [item.insight.signal for item in relevant] == [
        CRITICAL_RISKS_SIGNAL,
        "submitted with acknowledged risks",
        "recommendation = Conditional Go",
    ]
    assert relevant[0].relevance_reason.endswith("won 25% less often than average")


def test_submission_insights_filter_weak_and_low_confidence():
    analysis = _analysis(
        _insight("recommendation = Go", 3, category="recommendation"),
        _insight("score >= 80", 30, confidence="low"),
        _insight("score >= 70", 12),
    )

    relevant = get_submission_insights(
        analysis, "go", has_critical_risks=False, has_acknowledged_risks=False, score=85
    )

    assert [item.insight.signal for item in relevant] == ["score >= 70"]
    assert relevant[0].relevance_reason == "Bids with score >= 70 won 12% more often than average"


def test_submission_insights_empty_without_meaningful_analysis():
    analysis = _analysis(_insight("score >= 70", 30), complete=4)

    assert get_submission_insights(analysis, "go", False, False) == []
    assert get_submission_insights(None, "go", False, False) == []


def test_relevant_insights_follow_readiness():
    readiness = _readiness(100, 10)
    analysis = _analysis(
        _insight(CRITICAL_RISKS_SIGNAL, -20, category="risk"),
        _insight("score >= 80", 18),
        _insight("score < 80", -18),
    )

    relevant = get_relevant_insights(analysis, readiness, max_insights=2)

    assert readiness.has_critical_risks is True
    assert [item.insight.signal for item in relevant] == [CRITICAL_RISKS_SIGNAL, "score < 80"]


def test_build_submission_snapshot_captures_readiness():
    readiness = _readiness(100, 10)
    submitted_at = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    snapshot = build_submission_snapshot(
        readiness, risks_acknowledged=True, submitted_by="user-1", submitted_at=submitted_at
    )

    assert snapshot.score == readiness.score
    assert snapshot.recommendation == "conditional"
    assert snapshot.submitted_at == "2026-03-01T12:00:00+00:00"
    assert snapshot.submitted_by == "user-1"
    assert snapshot.has_critical_risks is True
    assert snapshot.has_acknowledged_risks is True
    assert snapshot.breakdown["strategy_health"] == 10
    assert snapshot.summary.startswith(f"Bid readiness is {readiness.score}%.")
