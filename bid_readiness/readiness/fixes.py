from __future__ import annotations

from bid_readiness.common import round_half_up
from bid_readiness.config_store import BidReadinessWeights
from bid_readiness.coverage import RubricCoverageResult
from bid_readiness.taxonomy import get_short_section_label

from .types import BidReadinessBreakdown, BidReadinessFix

MAX_FIXES = 5
COMPONENT_FIX_CEILING = 80
MIN_COMPONENT_LIFT = 5
MIN_SECTION_LIFT = 3
MAX_SECTION_LIFT = 25
SECTION_LIFT_PER_WEIGHT = 20
PERSONA_FIX_PRIORITY = 3


def identify_highest_impact_fixes(
    breakdown: BidReadinessBreakdown,
    coverage: RubricCoverageResult | None,
) -> list[BidReadinessFix]:
    fixes = _component_fixes(breakdown)
    if coverage is not None:
        fixes.extend(_section_fixes(coverage, breakdown.weights))
        fixes.extend(_persona_fixes(coverage, breakdown.weights))

    fixes.sort(key=lambda fix: (fix.priority, -fix.expected_lift))
    return fixes[:MAX_FIXES]


def _component_fixes(breakdown: BidReadinessBreakdown) -> list[BidReadinessFix]:
    gaps = [
        (
            "foundational",
            breakdown.foundational_readiness,
            breakdown.weights.foundational,
            "Complete foundational data: agency profile, team members and case studies",
            "high",
        ),
        (
            "strategy",
            breakdown.strategy_health,
            breakdown.weights.strategy,
            "Complete win strategy with criteria, themes, and proof plan",
            "medium",
        ),
    ]
    fixes: list[BidReadinessFix] = []
    for section_key, score, weight, reason, effort in gaps:
        if score >= COMPONENT_FIX_CEILING:
            continue
        lift = round_half_up((100 - score) * weight)
        if lift < MIN_COMPONENT_LIFT:
            continue
        fixes.append(
            BidReadinessFix(
                section_key=section_key,
                reason=reason,
                expected_lift=lift,
                effort=effort,
                priority=1 if lift > 15 else 2 if lift > 10 else 3,
            )
        )
    return fixes


def _section_fixes(
    coverage: RubricCoverageResult, weights: BidReadinessWeights
) -> list[BidReadinessFix]:
    fixes: list[BidReadinessFix] = []
    for section in coverage.section_coverage:
        if not (section.needs_review or section.missing_high_weight_criteria):
            continue

        raw_lift = 0.0
        for label in section.missing_high_weight_criteria:
            criterion = coverage.find_criterion(label)
            if criterion is not None:
                raw_lift += (criterion.weight or 0.3) * SECTION_LIFT_PER_WEIGHT
        lift = min(round_half_up(raw_lift * weights.coverage), MAX_SECTION_LIFT)
        if lift < MIN_SECTION_LIFT:
            continue

        missing = len(section.missing_high_weight_criteria)
        fixes.append(
            BidReadinessFix(
                section_key=section.section_key,
                reason=(
                    f"Add coverage for {missing} high-weight criteria in "
                    f"{get_short_section_label(section.section_key)}"
                ),
                expected_lift=lift,
                effort="high" if missing > 2 else "medium" if missing > 1 else "low",
                priority=1 if missing > 2 else 2,
            )
        )
    return fixes


def _persona_fixes(
    coverage: RubricCoverageResult, weights: BidReadinessWeights
) -> list[BidReadinessFix]:
    skewed: list[str] = []
    for item in coverage.criterion_coverage:
        if item.has_persona_mismatch and item.persona_risk_level == "high":
            skewed.extend(key for key in item.covered_by_section_keys if key not in skewed)

    lift = round_half_up(10 * weights.persona)
    return [
        BidReadinessFix(
            section_key=section_key,
            reason=(
                f"Adjust {get_short_section_label(section_key)} framing "
                "to match evaluator expectations"
            ),
            expected_lift=lift,
            effort="low",
            priority=PERSONA_FIX_PRIORITY,
        )
        for section_key in skewed
    ]
