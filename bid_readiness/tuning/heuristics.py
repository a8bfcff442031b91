"""Independent calibration heuristics; each proposes at most one suggestion."""

from __future__ import annotations

from typing import Callable, Sequence

from bid_readiness.config_store import BidReadinessConfig, ConfigChange
from bid_readiness.outcomes import (
    ACKNOWLEDGED_RISKS_SIGNAL,
    CRITICAL_RISKS_SIGNAL,
    OutcomeAnalysisResult,
    OutcomeInsight,
)

from .types import ReadinessTuningSuggestion, TuningImpact, TuningRationale, TuningRiskLevel

MIN_MEANINGFUL_DELTA = 10
MAX_THRESHOLD_ADJUSTMENT = 5
MAX_PENALTY_ADJUSTMENT = 0.1

CRITICAL_PENALTY_STEP = 5
CRITICAL_PENALTY_CAP = 25
GO_THRESHOLD_CAP = 85
MIN_THRESHOLD_GAP = 10
CONDITIONAL_BAND_SIMILARITY = 5
PERSONA_MULTIPLIER_FLOOR = 0.6
PROOF_GAP_STEP = 1
PROOF_GAP_CAP = 5
PROOF_LOSS_SHARE = 25
PROOF_LOSS_REASONS = ("experience", "fit")
STRONG_THRESHOLD_SIGNAL = "score >= 80"

Heuristic = Callable[
    [OutcomeAnalysisResult, BidReadinessConfig], "ReadinessTuningSuggestion | None"
]


def suggestion_id(category: str, index: int) -> str:
    return f"tuning-{category}-{index}"


def assess_risk(changes: Sequence[ConfigChange]) -> TuningRiskLevel:
    total = sum(abs(change.to_value - change.from_value) for change in changes)
    if total > 20:
        return "high"
    if total > 10 or any("threshold" in change.path for change in changes):
        return "medium"
    return "low"


def assess_impact(changes: Sequence[ConfigChange]) -> TuningImpact:
    if any("threshold" in change.path for change in changes):
        return "significant"
    if any(change.path.startswith("penalties.") for change in changes):
        return "moderate"
    return "minor"


def insight_rationale(insight: OutcomeInsight) -> list[TuningRationale]:
    sign = "+" if insight.win_rate_delta > 0 else ""
    return [
        TuningRationale(label=insight.signal, type="signal"),
        TuningRationale(
            label=f"{insight.sample_size} RFPs", type="sample_size", value=insight.sample_size
        ),
        TuningRationale(label=insight.confidence, type="confidence", value=insight.confidence),
        TuningRationale(
            label=f"{sign}{insight.win_rate_delta}%",
            type="correlation",
            value=insight.win_rate_delta,
        ),
    ]


def _confident(insight: OutcomeInsight | None) -> OutcomeInsight | None:
    if insight is None or insight.confidence == "low":
        return None
    return insight


def _fmt(value: float) -> str:
    return f"{value:g}"


def suggest_critical_risk_penalty(
    analysis: OutcomeAnalysisResult, config: BidReadinessConfig
) -> ReadinessTuningSuggestion | None:
    insight = _confident(analysis.find_insight(CRITICAL_RISKS_SIGNAL))
    if insight is None or insight.win_rate_delta > -MIN_MEANINGFUL_DELTA:
        return None

    current = config.penalties.critical_risk_penalty
    proposed = min(current + CRITICAL_PENALTY_STEP, CRITICAL_PENALTY_CAP)
    if proposed <= current:
        return None

    change = ConfigChange(
        path="penalties.critical_risk_penalty",
        from_value=current,
        to_value=proposed,
        description=f"Critical risk penalty: -{_fmt(current)}pts -> -{_fmt(proposed)}pts",
    )
    return ReadinessTuningSuggestion(
        id=suggestion_id("penalty", 1),
        title="Increase Critical Risk Penalty",
        description=(
            f"RFPs submitted with critical risks show {insight.win_rate_delta}% lower win rate. "
            "Consider increasing the score penalty for critical risks."
        ),
        changes=[change],
        expected_impact=assess_impact([change]),
        risk=assess_risk([change]),
        confidence=insight.confidence,
        rationale=insight_rationale(insight),
        category="penalty",
    )


def suggest_go_threshold(
    analysis: OutcomeAnalysisResult, config: BidReadinessConfig
) -> ReadinessTuningSuggestion | None:
    current = config.thresholds.go
    above = _confident(analysis.find_insight(f"score >= {_fmt(current)}"))
    below = _confident(analysis.find_insight(f"score < {_fmt(current)}"))
    strong = analysis.find_insight(STRONG_THRESHOLD_SIGNAL)
    if above is None or below is None or strong is None:
        return None

    gap = above.win_rate_delta - below.win_rate_delta
    if abs(gap) >= MIN_MEANINGFUL_DELTA:
        return None
    if strong.win_rate_delta <= above.win_rate_delta + MIN_MEANINGFUL_DELTA:
        return None

    proposed = min(current + MAX_THRESHOLD_ADJUSTMENT, GO_THRESHOLD_CAP)
    if proposed <= current:
        return None

    change = ConfigChange(
        path="thresholds.go",
        from_value=current,
        to_value=proposed,
        description=f"GO threshold: {_fmt(current)} -> {_fmt(proposed)}",
    )
    return ReadinessTuningSuggestion(
        id=suggestion_id("threshold", 1),
        title="Raise GO Threshold",
        description=(
            f"Current GO threshold of {_fmt(current)}% shows weak predictive power. "
            "Higher scores (>=80%) have stronger correlation with wins."
        ),
        changes=[change],
        expected_impact="significant",
        risk="medium",
        confidence=strong.confidence,
        rationale=insight_rationale(strong),
        category="threshold",
    )


def suggest_conditional_band(
    analysis: OutcomeAnalysisResult, config: BidReadinessConfig
) -> ReadinessTuningSuggestion | None:
    conditional = _confident(analysis.find_insight("recommendation = Conditional Go"))
    no_go = _confident(analysis.find_insight("recommendation = No-Go"))
    if conditional is None or no_go is None:
        return None

    if (
        conditional.win_rate_delta > -MIN_MEANINGFUL_DELTA
        or no_go.win_rate_delta > -MIN_MEANINGFUL_DELTA
    ):
        return None
    if abs(conditional.win_rate_delta - no_go.win_rate_delta) > CONDITIONAL_BAND_SIMILARITY:
        return None

    current = config.thresholds.conditional_min
    proposed = min(current + MAX_THRESHOLD_ADJUSTMENT, config.thresholds.go - MIN_THRESHOLD_GAP)
    if proposed <= current:
        return None

    change = ConfigChange(
        path="thresholds.conditional_min",
        from_value=current,
        to_value=proposed,
        description=f"Conditional minimum: {_fmt(current)} -> {_fmt(proposed)}",
    )
    return ReadinessTuningSuggestion(
        id=suggestion_id("threshold", 2),
        title="Narrow Conditional Range",
        description=(
            "Conditional Go recommendations show similar win rates to No-Go "
            f"({conditional.win_rate_delta}% vs {no_go.win_rate_delta}%). "
            "Consider raising the minimum threshold."
        ),
        changes=[change],
        expected_impact="significant",
        risk="medium",
        confidence=conditional.confidence,
        rationale=insight_rationale(conditional),
        category="threshold",
    )


def suggest_acknowledged_risk_penalty(
    analysis: OutcomeAnalysisResult, config: BidReadinessConfig
) -> ReadinessTuningSuggestion | None:
    insight = _confident(analysis.find_insight(ACKNOWLEDGED_RISKS_SIGNAL))
    if insight is None or insight.win_rate_delta > -MIN_MEANINGFUL_DELTA:
        return None

    current = config.penalties.persona_mismatch_multiplier
    proposed = round(max(current - MAX_PENALTY_ADJUSTMENT, PERSONA_MULTIPLIER_FLOOR), 2)
    if proposed >= current:
        return None

    change = ConfigChange(
        path="penalties.persona_mismatch_multiplier",
        from_value=current,
        to_value=proposed,
        description=(
            f"Persona mismatch penalty: {(1 - current) * 100:.0f}% -> {(1 - proposed) * 100:.0f}%"
        ),
    )
    return ReadinessTuningSuggestion(
        id=suggestion_id("penalty", 2),
        title="Increase Acknowledged Risk Impact",
        description=(
            f"RFPs submitted despite acknowledged risks show {insight.win_rate_delta}% lower "
            "win rate. Consider stricter scoring for unresolved issues."
        ),
        changes=[change],
        expected_impact="moderate",
        risk="low",
        confidence=insight.confidence,
        rationale=insight_rationale(insight),
        category="penalty",
    )


def suggest_proof_gap_penalty(
    analysis: OutcomeAnalysisResult, config: BidReadinessConfig
) -> ReadinessTuningSuggestion | None:
    shares = {
        summary.reason: summary.percentage
        for summary in analysis.loss_reasons
        if summary.reason in PROOF_LOSS_REASONS
    }
    if not shares:
        return None
    combined = sum(shares.values())
    if combined < PROOF_LOSS_SHARE:
        return None

    current = config.penalties.proof_gap_penalty
    proposed = min(current + PROOF_GAP_STEP, PROOF_GAP_CAP)
    if proposed <= current:
        return None

    experience_share = shares.get("experience", 0)
    change = ConfigChange(
        path="penalties.proof_gap_penalty",
        from_value=current,
        to_value=proposed,
        description=f"Proof gap penalty: -{_fmt(current)}pts/gap -> -{_fmt(proposed)}pts/gap",
    )
    return ReadinessTuningSuggestion(
        id=suggestion_id("penalty", 3),
        title="Increase Proof Gap Penalty",
        description=(
            f'"Lacked experience" and "poor fit" cited in {combined}% of losses. '
            "Consider penalizing proof gaps more heavily."
        ),
        changes=[change],
        expected_impact="moderate",
        risk="low",
        confidence="medium",
        rationale=[
            TuningRationale(label="Experience gap", type="signal"),
            TuningRationale(
                label=f"{experience_share}% of losses", type="correlation", value=experience_share
            ),
            TuningRationale(
                label=f"{len(analysis.loss_reasons)} reasons analyzed", type="sample_size"
            ),
        ],
        category="penalty",
    )


HEURISTICS: tuple[Heuristic, ...] = (
    suggest_critical_risk_penalty,
    suggest_go_threshold,
    suggest_conditional_band,
    suggest_acknowledged_risk_penalty,
    suggest_proof_gap_penalty,
)
