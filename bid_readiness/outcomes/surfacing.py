"""Pick the historical insights that matter for the bid currently being assessed."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from bid_readiness.readiness import BidReadiness, get_recommendation_label

from .analyzer import ACKNOWLEDGED_RISKS_SIGNAL, CRITICAL_RISKS_SIGNAL
from .types import OutcomeAnalysisResult, OutcomeInsight

MIN_RELEVANT_DELTA = 5
DEFAULT_MAX_INSIGHTS = 3


@dataclass(frozen=True)
class RelevantInsight:
    insight: OutcomeInsight
    relevance_reason: str

    def as_dict(self) -> dict[str, Any]:
        return {"insight": self.insight.as_dict(), "relevance_reason": self.relevance_reason}


def has_valid_insights(analysis: OutcomeAnalysisResult | None) -> bool:
    if analysis is None or not analysis.is_statistically_meaningful:
        return False
    return any(insight.confidence != "low" for insight in analysis.insights)


def get_relevant_insights(
    analysis: OutcomeAnalysisResult | None,
    readiness: BidReadiness,
    max_insights: int = DEFAULT_MAX_INSIGHTS,
) -> list[RelevantInsight]:
    return get_submission_insights(
        analysis,
        readiness.recommendation,
        has_critical_risks=readiness.has_critical_risks,
        has_acknowledged_risks=bool(readiness.top_risks),
        max_insights=max_insights,
        score=readiness.score,
    )


def get_submission_insights(
    analysis: OutcomeAnalysisResult | None,
    recommendation: str,
    has_critical_risks: bool,
    has_acknowledged_risks: bool,
    max_insights: int = DEFAULT_MAX_INSIGHTS,
    *,
    score: float | None = None,
) -> list[RelevantInsight]:
    """Insights matching the bid's risks, recommendation and score, most specific first."""
    if analysis is None or not analysis.is_statistically_meaningful:
        return []

    usable = {
        insight.signal: insight
        for insight in analysis.insights
        if insight.confidence != "low" and abs(insight.win_rate_delta) >= MIN_RELEVANT_DELTA
    }
    relevant: list[RelevantInsight] = []

    critical = usable.get(CRITICAL_RISKS_SIGNAL)
    if has_critical_risks and critical is not None:
        relevant.append(
            RelevantInsight(
                critical,
                f"This bid has critical risks; past bids submitted with critical risks "
                f"won {_describe_delta(critical)}",
            )
        )

    acknowledged = usable.get(ACKNOWLEDGED_RISKS_SIGNAL)
    if has_acknowledged_risks and acknowledged is not None:
        relevant.append(
            RelevantInsight(
                acknowledged,
                f"This bid has open risks; past bids submitted with acknowledged risks "
                f"won {_describe_delta(acknowledged)}",
            )
        )

    label = get_recommendation_label(recommendation)
    matching = usable.get(f"recommendation = {label}")
    if matching is not None:
        relevant.append(
            RelevantInsight(
                matching,
                f"Past {label} recommendations won {_describe_delta(matching)}",
            )
        )

    if score is not None:
        threshold_insight = _matching_threshold_insight(usable.values(), score)
        if threshold_insight is not None:
            relevant.append(
                RelevantInsight(
                    threshold_insight,
                    f"Bids with {threshold_insight.signal} "
                    f"won {_describe_delta(threshold_insight)}",
                )
            )

    return relevant[:max_insights]


def _matching_threshold_insight(
    insights: Iterable[OutcomeInsight], score: float
) -> OutcomeInsight | None:
    matches: list[OutcomeInsight] = []
    for insight in insights:
        if insight.category != "score_threshold":
            continue
        operator, _, raw_threshold = insight.signal.removeprefix("score ").partition(" ")
        try:
            threshold = float(raw_threshold)
        except ValueError:
            continue
        if (operator == ">=" and score >= threshold) or (operator == "<" and score < threshold):
            matches.append(insight)
    if not matches:
        return None
    return max(matches, key=lambda insight: abs(insight.win_rate_delta))


def _describe_delta(insight: OutcomeInsight) -> str:
    direction = "more" if insight.win_rate_delta > 0 else "less"
    return f"{abs(insight.win_rate_delta)}% {direction} often than average"
