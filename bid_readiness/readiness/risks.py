from __future__ import annotations

from bid_readiness.common import round_half_up
from bid_readiness.config_store import RiskThresholds
from bid_readiness.coverage import RubricCoverageResult, describe_missing_sections

from .types import SEVERITY_ORDER, BidReadinessBreakdown, BidRisk

CRITERION_RISK_WEIGHT = 0.3
CRITERION_RISK_COVERAGE = 50
MAX_CRITERION_RISKS = 3


def identify_risks(
    breakdown: BidReadinessBreakdown,
    coverage: RubricCoverageResult | None,
    thresholds: RiskThresholds,
) -> list[BidRisk]:
    """Build the full risk list, most severe first."""
    risks: list[BidRisk] = []
    risks.extend(_foundational_risks(breakdown.foundational_readiness, thresholds))
    risks.extend(_strategy_risks(breakdown.strategy_health, thresholds))
    risks.extend(_coverage_risks(breakdown.rubric_coverage_health, thresholds))
    risks.extend(_proof_risks(breakdown.proof_coverage, thresholds))
    risks.extend(_persona_risks(breakdown.persona_alignment, thresholds))
    if coverage is not None:
        risks.extend(_criterion_risks(coverage))

    risks.sort(key=lambda risk: SEVERITY_ORDER[risk.severity])
    return risks


def _foundational_risks(score: float, thresholds: RiskThresholds) -> list[BidRisk]:
    if score < thresholds.critical:
        return [
            BidRisk(
                category="foundational",
                severity="critical",
                description="Foundational data is severely incomplete - responses will be generic",
                mitigation="Add agency profile, team members, and case studies before proceeding",
            )
        ]
    if score < thresholds.high:
        return [
            BidRisk(
                category="foundational",
                severity="high",
                description="Foundational data is incomplete - some sections may lack specificity",
                mitigation="Review and complete missing foundational data",
            )
        ]
    if score < thresholds.medium:
        return [
            BidRisk(
                category="foundational",
                severity="medium",
                description="Foundational data could use improvement for stronger responses",
            )
        ]
    return []


def _strategy_risks(score: float, thresholds: RiskThresholds) -> list[BidRisk]:
    if score < thresholds.critical:
        return [
            BidRisk(
                category="strategy",
                severity="critical",
                description=(
                    "No win strategy defined - responses will not be aligned to evaluation criteria"
                ),
                mitigation="Define evaluation criteria, win themes, and proof plan",
            )
        ]
    if score < thresholds.high:
        return [
            BidRisk(
                category="strategy",
                severity="high",
                description=(
                    "Win strategy is incomplete - alignment with RFP requirements may be weak"
                ),
                mitigation=(
                    "Complete all strategy components including criteria weights and proof plan"
                ),
            )
        ]
    return []


def _coverage_risks(score: float, thresholds: RiskThresholds) -> list[BidRisk]:
    if score < thresholds.critical:
        return [
            BidRisk(
                category="coverage",
                severity="critical",
                description="Evaluation criteria are not being addressed in sections",
                mitigation="Review and regenerate sections with win strategy enabled",
            )
        ]
    if score < thresholds.high:
        return [
            BidRisk(
                category="coverage",
                severity="high",
                description="Several evaluation criteria have coverage gaps",
                mitigation="Review sections flagged for missing criteria and regenerate",
            )
        ]
    return []


def _proof_risks(score: float, thresholds: RiskThresholds) -> list[BidRisk]:
    if score >= thresholds.high:
        return []
    return [
        BidRisk(
            category="proof",
            severity="high" if score < thresholds.critical else "medium",
            description="Proof points (case studies, references) are underutilized",
            mitigation="Add more proof items to the strategy and regenerate relevant sections",
        )
    ]


def _persona_risks(score: float, thresholds: RiskThresholds) -> list[BidRisk]:
    if score < thresholds.high:
        return [
            BidRisk(
                category="persona",
                severity="high",
                description=(
                    "Significant persona skew detected - content may not resonate with evaluators"
                ),
                mitigation="Review persona assignments and adjust section framing",
            )
        ]
    if score < thresholds.medium:
        return [
            BidRisk(
                category="persona",
                severity="medium",
                description="Some content framing may not match expected evaluator preferences",
            )
        ]
    return []


def _criterion_risks(coverage: RubricCoverageResult) -> list[BidRisk]:
    uncovered = [
        item
        for item in coverage.criterion_coverage
        if item.weight >= CRITERION_RISK_WEIGHT and item.coverage_score < CRITERION_RISK_COVERAGE
    ]
    return [
        BidRisk(
            category="coverage",
            severity="high",
            description=(
                f'High-weight criterion "{item.criterion_label}" '
                f"({round_half_up(item.weight * 100)}%) has only {item.coverage_score}% coverage"
            ),
            mitigation=f"Review and strengthen {describe_missing_sections(item)} section(s)",
        )
        for item in uncovered[:MAX_CRITERION_RISKS]
    ]
