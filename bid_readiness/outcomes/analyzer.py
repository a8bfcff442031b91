"""Correlate submission-time readiness snapshots with won/lost outcomes.

Every signal is reported as the win rate of a bucket of bids minus the
baseline win rate. Buckets smaller than ``MIN_BUCKET_SIZE`` are not reported.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from bid_readiness.common import round_half_up, safe_mean
from bid_readiness.readiness import get_recommendation_label

from .types import (
    MIN_COMPLETE_RECORDS,
    ComponentCorrelation,
    InsightCategory,
    InsightConfidence,
    LossReasonSummary,
    OutcomeAnalysisResult,
    OutcomeInsight,
    RfpOutcomeRecord,
)

logger = logging.getLogger(__name__)

DEFAULT_SCORE_THRESHOLDS = (50, 60, 70, 80)
MIN_BUCKET_SIZE = 3
HIGH_CONFIDENCE_SAMPLE = 20
MEDIUM_CONFIDENCE_SAMPLE = 10
MEANINGFUL_DELTA = 10
STRONG_DELTA = 20

ACKNOWLEDGED_RISKS_SIGNAL = "submitted with acknowledged risks"
NO_OUTSTANDING_RISKS_SIGNAL = "no outstanding risks"
CRITICAL_RISKS_SIGNAL = "submitted with critical risks"

RecordPredicate = Callable[[RfpOutcomeRecord], bool]


def analyze_outcomes(
    records: Iterable[RfpOutcomeRecord],
    *,
    score_thresholds: Sequence[int] = DEFAULT_SCORE_THRESHOLDS,
) -> OutcomeAnalysisResult:
    records = list(records)
    complete = [record for record in records if record.is_complete]
    won = sum(1 for record in complete if record.outcome == "won")
    baseline = round_half_up(won / len(complete) * 100) if complete else 0

    insights: list[OutcomeInsight] = []
    insights.extend(_score_threshold_insights(complete, baseline, score_thresholds))
    insights.extend(_recommendation_insights(complete, baseline))
    insights.extend(_risk_insights(complete, baseline))
    insights.sort(key=lambda insight: -abs(insight.win_rate_delta))

    result = OutcomeAnalysisResult(
        total_analyzed=len(records),
        complete_records=len(complete),
        overall_win_rate=baseline,
        insights=insights,
        component_correlations=_component_correlations(complete),
        loss_reasons=_loss_reasons(complete),
        is_statistically_meaningful=len(complete) >= MIN_COMPLETE_RECORDS,
        minimum_sample_recommendation=MIN_COMPLETE_RECORDS,
    )
    logger.debug(
        "Outcome analysis: %d records, %d complete, baseline=%d%%, %d insights",
        result.total_analyzed,
        result.complete_records,
        baseline,
        len(insights),
    )
    return result


def confidence_for_sample(sample_size: int) -> InsightConfidence:
    if sample_size >= HIGH_CONFIDENCE_SAMPLE:
        return "high"
    if sample_size >= MEDIUM_CONFIDENCE_SAMPLE:
        return "medium"
    return "low"


def _win_rate(records: list[RfpOutcomeRecord]) -> int:
    wins = sum(1 for record in records if record.outcome == "won")
    return round_half_up(wins / len(records) * 100)


def _bucket_insight(
    signal: str,
    records: list[RfpOutcomeRecord],
    predicate: RecordPredicate,
    baseline: int,
    category: InsightCategory,
) -> OutcomeInsight | None:
    bucket = [record for record in records if predicate(record)]
    if len(bucket) < MIN_BUCKET_SIZE:
        return None
    win_rate = _win_rate(bucket)
    delta = win_rate - baseline
    return OutcomeInsight(
        signal=signal,
        win_rate_delta=delta,
        sample_size=len(bucket),
        confidence=confidence_for_sample(len(bucket)),
        category=category,
        win_rate=win_rate,
        recommendation=_insight_recommendation(signal, delta),
    )


def _insight_recommendation(signal: str, delta: int) -> str | None:
    magnitude = abs(delta)
    if magnitude < MEANINGFUL_DELTA:
        return None
    if delta > 0:
        if magnitude >= STRONG_DELTA:
            return (
                f"Strong positive signal: bids where {signal} win {magnitude}% "
                "more often than average"
            )
        return f"Bids where {signal} win {magnitude}% more often than average"
    if magnitude >= STRONG_DELTA:
        return f"Strong warning: bids where {signal} win {magnitude}% less often than average"
    return f"Bids where {signal} win {magnitude}% less often than average; review before submitting"


def _collect(candidates: Iterable[OutcomeInsight | None]) -> list[OutcomeInsight]:
    return [insight for insight in candidates if insight is not None]


def _score(record: RfpOutcomeRecord) -> float:
    return record.submission_snapshot.score


def _score_threshold_insights(
    records: list[RfpOutcomeRecord], baseline: int, thresholds: Sequence[int]
) -> list[OutcomeInsight]:
    candidates: list[OutcomeInsight | None] = []
    for threshold in thresholds:
        candidates.append(
            _bucket_insight(
                f"score >= {threshold}",
                records,
                lambda record, t=threshold: _score(record) >= t,
                baseline,
                "score_threshold",
            )
        )
        candidates.append(
            _bucket_insight(
                f"score < {threshold}",
                records,
                lambda record, t=threshold: _score(record) < t,
                baseline,
                "score_threshold",
            )
        )
    return _collect(candidates)


def _recommendation_insights(
    records: list[RfpOutcomeRecord], baseline: int
) -> list[OutcomeInsight]:
    return _collect(
        _bucket_insight(
            f"recommendation = {get_recommendation_label(recommendation)}",
            records,
            lambda record, r=recommendation: record.submission_snapshot.recommendation == r,
            baseline,
            "recommendation",
        )
        for recommendation in ("go", "conditional", "no_go")
    )


def _risk_insights(records: list[RfpOutcomeRecord], baseline: int) -> list[OutcomeInsight]:
    return _collect(
        [
            _bucket_insight(
                ACKNOWLEDGED_RISKS_SIGNAL,
                records,
                lambda record: record.submission_snapshot.has_acknowledged_risks,
                baseline,
                "acknowledgement",
            ),
            _bucket_insight(
                NO_OUTSTANDING_RISKS_SIGNAL,
                records,
                lambda record: not record.submission_snapshot.has_acknowledged_risks,
                baseline,
                "acknowledgement",
            ),
            _bucket_insight(
                CRITICAL_RISKS_SIGNAL,
                records,
                lambda record: record.submission_snapshot.has_critical_risks,
                baseline,
                "risk",
            ),
        ]
    )


def _loss_reasons(records: list[RfpOutcomeRecord]) -> list[LossReasonSummary]:
    lost = [record for record in records if record.outcome == "lost"]
    if not lost:
        return []

    scores_by_reason: dict[str, list[float]] = {}
    for record in lost:
        for tag in record.loss_reason_tags or []:
            scores_by_reason.setdefault(tag, []).append(_score(record))

    summaries = [
        LossReasonSummary(
            reason=reason,
            count=len(scores),
            percentage=round_half_up(len(scores) / len(lost) * 100),
            avg_readiness_score=round_half_up(safe_mean(scores)),
        )
        for reason, scores in scores_by_reason.items()
    ]
    summaries.sort(key=lambda summary: -summary.count)
    return summaries


def _component_correlations(records: list[RfpOutcomeRecord]) -> list[ComponentCorrelation]:
    won_scores: dict[str, list[float]] = {}
    lost_scores: dict[str, list[float]] = {}
    for record in records:
        breakdown = record.submission_snapshot.breakdown
        if not breakdown:
            continue
        target = won_scores if record.outcome == "won" else lost_scores
        for component, value in breakdown.items():
            target.setdefault(component, []).append(value)
            won_scores.setdefault(component, [])
            lost_scores.setdefault(component, [])

    correlations: list[ComponentCorrelation] = []
    for component in won_scores:
        won = won_scores[component]
        lost = lost_scores[component]
        if not won or not lost or len(won) + len(lost) < MIN_BUCKET_SIZE:
            continue
        won_average = round_half_up(safe_mean(won))
        lost_average = round_half_up(safe_mean(lost))
        correlations.append(
            ComponentCorrelation(
                component=component,
                won_average=won_average,
                lost_average=lost_average,
                delta=won_average - lost_average,
                sample_size=len(won) + len(lost),
            )
        )
    correlations.sort(key=lambda item: -abs(item.delta))
    return correlations
