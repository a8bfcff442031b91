from .components import persona_alignment_score, proof_coverage_score
from .recommendation import RECOMMENDATION_LABELS, get_recommendation_label
from .service import (
    assess_bid_readiness,
    compute_bid_readiness,
    get_bid_readiness_summary,
    get_effort_label,
    is_bid_ready,
)
from .types import (
    BidReadiness,
    BidReadinessBreakdown,
    BidReadinessFix,
    BidReadinessInputs,
    BidRecommendation,
    BidRisk,
)

__all__ = [
    "BidReadiness",
    "BidReadinessBreakdown",
    "BidReadinessFix",
    "BidReadinessInputs",
    "BidRecommendation",
    "BidRisk",
    "RECOMMENDATION_LABELS",
    "assess_bid_readiness",
    "compute_bid_readiness",
    "get_bid_readiness_summary",
    "get_effort_label",
    "get_recommendation_label",
    "is_bid_ready",
    "persona_alignment_score",
    "proof_coverage_score",
]
