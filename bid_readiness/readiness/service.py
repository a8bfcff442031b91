"""Bid readiness scoring and Go/No-Go recommendation.

Combines the rubric coverage result with two externally computed readiness
scores (foundational data completeness and win strategy completeness) into a
single weighted score. Missing inputs never raise: they score as absent and
the result is flagged with ``is_reliable_assessment=False``.
"""

from __future__ import annotations

import logging

from bid_readiness.config_store import DEFAULT_BID_READINESS_CONFIG, BidReadinessConfig
from bid_readiness.coverage import compute_rubric_coverage
from bid_readiness.models import PersonaSettings, Section, WinStrategy
from bid_readiness.taxonomy import Taxonomy

from . import components
from .fixes import identify_highest_impact_fixes
from .recommendation import determine_recommendation
from .risks import identify_risks
from .types import BidReadiness, BidReadinessBreakdown, BidReadinessInputs

logger = logging.getLogger(__name__)

MAX_TOP_RISKS = 5

EFFORT_LABELS = {
    "low": "~30 min",
    "medium": "~2 hrs",
    "high": "~1 day",
}


def compute_bid_readiness(
    inputs: BidReadinessInputs,
    config: BidReadinessConfig | None = None,
) -> BidReadiness:
    config = config or DEFAULT_BID_READINESS_CONFIG
    coverage = inputs.rubric_coverage

    breakdown = BidReadinessBreakdown(
        foundational_readiness=inputs.foundational_score or 0,
        strategy_health=inputs.strategy_score or 0,
        rubric_coverage_health=coverage.overall_health if coverage is not None else 0,
        proof_coverage=components.proof_coverage_score(coverage),
        persona_alignment=components.persona_alignment_score(coverage),
        weights=config.weights,
    )
    score = components.overall_score(
        breakdown,
        config,
        has_foundational=inputs.foundational_score is not None,
        has_strategy=inputs.strategy_score is not None,
        has_coverage=coverage is not None,
    )

    risks = identify_risks(breakdown, coverage, config.risk_thresholds)
    fixes = identify_highest_impact_fixes(breakdown, coverage)
    decision = determine_recommendation(score, breakdown, risks, config.thresholds)
    is_reliable = (
        inputs.foundational_score is not None
        and inputs.strategy_score is not None
        and coverage is not None
    )

    logger.debug(
        "Bid readiness score=%d recommendation=%s risks=%d fixes=%d reliable=%s",
        score,
        decision.recommendation,
        len(risks),
        len(fixes),
        is_reliable,
    )
    return BidReadiness(
        score=score,
        recommendation=decision.recommendation,
        reasons=decision.reasons,
        top_risks=risks[:MAX_TOP_RISKS],
        highest_impact_fixes=fixes,
        breakdown=breakdown,
        is_reliable_assessment=is_reliable,
        conditions=decision.conditions,
        adjusted_score=components.adjusted_score(score, risks, coverage, config),
        config_version=config.version,
    )


def assess_bid_readiness(
    *,
    strategy: WinStrategy | None,
    sections: list[Section],
    foundational_score: float | None,
    strategy_score: float | None,
    persona_settings: PersonaSettings | None = None,
    config: BidReadinessConfig | None = None,
    taxonomy: Taxonomy | None = None,
) -> BidReadiness:
    """Run the coverage analyzer and the scorer in one call."""
    coverage = compute_rubric_coverage(
        strategy, sections, persona_settings, taxonomy=taxonomy
    )
    return compute_bid_readiness(
        BidReadinessInputs(
            foundational_score=foundational_score,
            strategy_score=strategy_score,
            rubric_coverage=coverage,
            strategy=strategy,
            sections=sections,
            persona_settings=persona_settings,
        ),
        config,
    )


def is_bid_ready(inputs: BidReadinessInputs, config: BidReadinessConfig | None = None) -> bool:
    return compute_bid_readiness(inputs, config).recommendation == "go"


def get_effort_label(effort: str) -> str:
    return EFFORT_LABELS.get(effort, effort)


def get_bid_readiness_summary(readiness: BidReadiness) -> str:
    score = readiness.score
    if readiness.recommendation == "go":
        return f"Bid readiness is {score}%. Ready to proceed with high confidence."
    if readiness.recommendation == "conditional":
        return (
            f"Bid readiness is {score}%. Can proceed, but address "
            f"{len(readiness.top_risks)} risk(s) for best results."
        )
    return (
        f"Bid readiness is {score}%. Not recommended to proceed without significant improvements."
    )
