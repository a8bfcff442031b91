from __future__ import annotations

from bid_readiness.common import clamp_score, round_half_up
from bid_readiness.config_store import BidReadinessConfig
from bid_readiness.coverage import RubricCoverageResult

from .types import BidReadinessBreakdown, BidRisk

NEUTRAL_PERSONA_ALIGNMENT = 75
PERSONA_SEVERITY_MULTIPLIERS = {"high": 1.5, "medium": 1.0, "low": 0.5}
_AVERAGE_CRITERION_WEIGHT = 0.5
_MAX_SEVERITY_MULTIPLIER = 1.5
PROOF_GAP_THRESHOLD = 30


def persona_alignment_score(coverage: RubricCoverageResult | None) -> int:
    """Score 0-100; mismatches on heavier criteria and higher risk levels cost more."""
    if coverage is None or not coverage.has_persona_settings:
        return NEUTRAL_PERSONA_ALIGNMENT

    criteria = coverage.criterion_coverage
    if not criteria:
        return 100

    penalty = 0.0
    for item in criteria:
        if item.has_persona_mismatch and item.persona_risk_level != "none":
            multiplier = PERSONA_SEVERITY_MULTIPLIERS.get(item.persona_risk_level, 0.5)
            penalty += (item.weight or 0.5) * multiplier

    max_penalty = len(criteria) * _AVERAGE_CRITERION_WEIGHT * _MAX_SEVERITY_MULTIPLIER
    normalized = min(1.0, penalty / max(max_penalty, 1))
    return round_half_up(100 * (1 - normalized))


def proof_coverage_score(coverage: RubricCoverageResult | None) -> int:
    if coverage is None or not coverage.criterion_coverage:
        return 0
    total = sum(item.proof_coverage_score for item in coverage.criterion_coverage)
    return round_half_up(total / len(coverage.criterion_coverage))


def overall_score(
    breakdown: BidReadinessBreakdown,
    config: BidReadinessConfig,
    *,
    has_foundational: bool = True,
    has_strategy: bool = True,
    has_coverage: bool = True,
) -> int:
    weights = breakdown.weights
    components = [
        (breakdown.foundational_readiness, weights.foundational, has_foundational),
        (breakdown.strategy_health, weights.strategy, has_strategy),
        (breakdown.rubric_coverage_health, weights.coverage, has_coverage),
        (breakdown.proof_coverage, weights.proof, has_coverage),
        (breakdown.persona_alignment, weights.persona, has_coverage),
    ]

    if config.partial_data.mode == "zero_fill" or all(present for _, _, present in components):
        return round_half_up(sum(score * weight for score, weight, _ in components))

    supplied = [(score, weight) for score, weight, present in components if present]
    supplied_weight = sum(weight for _, weight in supplied)
    if supplied_weight <= 0:
        return 0
    renormalized = sum(score * weight for score, weight in supplied) / supplied_weight
    return round_half_up(renormalized * config.partial_data.dampening)


def adjusted_score(
    score: int,
    risks: list[BidRisk],
    coverage: RubricCoverageResult | None,
    config: BidReadinessConfig,
) -> int:
    """Apply the configured penalties to ``score``; the recommendation ignores this value."""
    penalties = config.penalties
    critical_count = sum(1 for risk in risks if risk.severity == "critical")
    proof_gaps = 0
    mismatch_count = 0
    if coverage is not None:
        proof_gaps = sum(
            1
            for item in coverage.criterion_coverage
            if item.proof_coverage_score < PROOF_GAP_THRESHOLD
        )
        mismatch_count = coverage.persona_mismatch_count

    value = (
        score
        - penalties.critical_risk_penalty * critical_count
        - penalties.proof_gap_penalty * proof_gaps
    )
    if mismatch_count > 0:
        value *= penalties.persona_mismatch_multiplier
    return round_half_up(clamp_score(value))
