from __future__ import annotations

from dataclasses import dataclass

from bid_readiness.config_store import BidReadinessThresholds

from .types import BidReadinessBreakdown, BidRecommendation, BidRisk

HARD_STOP_THRESHOLD = 20
CONDITION_THRESHOLD = 60
STRENGTH_THRESHOLD = 70
BLOCKER_THRESHOLD = 40

RECOMMENDATION_LABELS: dict[str, str] = {
    "go": "Go",
    "conditional": "Conditional Go",
    "no_go": "No-Go",
}


@dataclass(frozen=True)
class RecommendationDecision:
    recommendation: BidRecommendation
    reasons: list[str]
    conditions: list[str] | None = None


def get_recommendation_label(recommendation: str) -> str:
    return RECOMMENDATION_LABELS.get(recommendation, recommendation)


def determine_recommendation(
    score: int,
    breakdown: BidReadinessBreakdown,
    risks: list[BidRisk],
    thresholds: BidReadinessThresholds,
) -> RecommendationDecision:
    critical = [risk for risk in risks if risk.severity == "critical"]
    high = [risk for risk in risks if risk.severity == "high"]

    if (
        breakdown.foundational_readiness < HARD_STOP_THRESHOLD
        and breakdown.strategy_health < HARD_STOP_THRESHOLD
    ):
        return RecommendationDecision(
            recommendation="no_go",
            reasons=[
                "Both foundational data and win strategy are critically incomplete",
                "Responses would be generic and uncompetitive",
                "Recommend completing foundational data before bidding",
            ],
        )

    if score >= thresholds.go:
        if critical:
            return RecommendationDecision(
                recommendation="conditional",
                reasons=[
                    f"Overall readiness score is {score}%, but critical issues remain",
                    *(risk.description for risk in critical[:2]),
                ],
                conditions=[risk.mitigation for risk in critical if risk.mitigation],
            )
        return RecommendationDecision(recommendation="go", reasons=_go_reasons(score, breakdown))

    if score >= thresholds.conditional_min:
        reasons = [f"Overall readiness score is {score}% - proceed with caution"]
        if high:
            reasons.append(f"{len(high)} high-priority risk(s) identified")
        conditions = _conditions(breakdown)
        return RecommendationDecision(
            recommendation="conditional",
            reasons=reasons,
            conditions=conditions or None,
        )

    return RecommendationDecision(
        recommendation="no_go",
        reasons=_no_go_reasons(score, breakdown, critical, high),
    )


def _go_reasons(score: int, breakdown: BidReadinessBreakdown) -> list[str]:
    reasons = [f"Overall readiness score is {score}% - ready to proceed"]
    if breakdown.strategy_health >= STRENGTH_THRESHOLD:
        reasons.append("Win strategy is well-defined")
    if breakdown.rubric_coverage_health >= STRENGTH_THRESHOLD:
        reasons.append("Good coverage across evaluation criteria")
    if breakdown.foundational_readiness >= STRENGTH_THRESHOLD:
        reasons.append("Strong foundational data")
    return reasons


def _conditions(breakdown: BidReadinessBreakdown) -> list[str]:
    conditions: list[str] = []
    if breakdown.foundational_readiness < CONDITION_THRESHOLD:
        conditions.append(
            f"Strengthen foundational data (currently at {breakdown.foundational_readiness:g}%)"
        )
    if breakdown.strategy_health < CONDITION_THRESHOLD:
        conditions.append(f"Complete win strategy (currently at {breakdown.strategy_health:g}%)")
    if breakdown.rubric_coverage_health < CONDITION_THRESHOLD:
        conditions.append(
            f"Improve section coverage (currently at {breakdown.rubric_coverage_health:g}%)"
        )
    if breakdown.persona_alignment < CONDITION_THRESHOLD:
        conditions.append("Address persona skew in sections")
    return conditions


def _no_go_reasons(
    score: int,
    breakdown: BidReadinessBreakdown,
    critical: list[BidRisk],
    high: list[BidRisk],
) -> list[str]:
    reasons = [f"Overall readiness score is {score}% - not ready to proceed"]
    if critical:
        reasons.append(f"{len(critical)} critical issue(s) must be resolved")
    if high:
        reasons.append(f"{len(high)} high-priority risk(s) present")
    if breakdown.foundational_readiness < BLOCKER_THRESHOLD:
        reasons.append("Foundational data is too incomplete for competitive response")
    if breakdown.strategy_health < BLOCKER_THRESHOLD:
        reasons.append("Win strategy needs significant improvement")
    return reasons
