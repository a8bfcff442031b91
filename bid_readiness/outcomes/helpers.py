from __future__ import annotations

from .analyzer import MEANINGFUL_DELTA, STRONG_DELTA
from .types import OutcomeAnalysisResult, OutcomeInsight

PREDICTIVE_SIGNALS = ("score >= 70", "recommendation = Go")


def get_top_insights(result: OutcomeAnalysisResult, limit: int = 5) -> list[OutcomeInsight]:
    """Insights worth showing: not low confidence, unless the effect is very large."""
    eligible = [
        insight
        for insight in result.insights
        if insight.confidence != "low" or abs(insight.win_rate_delta) >= STRONG_DELTA
    ]
    eligible.sort(key=lambda insight: -abs(insight.win_rate_delta))
    return eligible[:limit]


def get_insights_by_category(result: OutcomeAnalysisResult, category: str) -> list[OutcomeInsight]:
    return [insight for insight in result.insights if insight.category == category]


def _predictive_insights(result: OutcomeAnalysisResult) -> list[OutcomeInsight]:
    return [
        insight
        for insight in result.insights
        if insight.signal in PREDICTIVE_SIGNALS
        and insight.win_rate_delta >= MEANINGFUL_DELTA
        and insight.confidence != "low"
    ]


def is_readiness_predictive(result: OutcomeAnalysisResult) -> bool:
    return bool(_predictive_insights(result))


def get_analysis_summary(result: OutcomeAnalysisResult) -> str:
    if not result.is_statistically_meaningful:
        return (
            f"Insufficient data: {result.complete_records} completed RFP(s) with outcomes, "
            f"need at least {result.minimum_sample_recommendation} for meaningful analysis."
        )

    predictive = _predictive_insights(result)
    if predictive:
        strongest = max(predictive, key=lambda insight: insight.win_rate_delta)
        return (
            f"Readiness is predictive: bids with {strongest.signal} show "
            f"+{strongest.win_rate_delta}% win rate vs the {result.overall_win_rate}% baseline."
        )

    return (
        f"Overall win rate is {result.overall_win_rate}% across {result.complete_records} RFPs. "
        "No strong correlation between readiness and outcomes yet."
    )
