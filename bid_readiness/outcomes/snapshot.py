from __future__ import annotations

from datetime import datetime, timezone

from bid_readiness.readiness import BidReadiness, get_bid_readiness_summary

from .types import AcknowledgedRisk, SubmissionSnapshot


def build_submission_snapshot(
    readiness: BidReadiness,
    *,
    risks_acknowledged: bool = False,
    submitted_by: str | None = None,
    submitted_at: datetime | None = None,
) -> SubmissionSnapshot:
    """Capture a readiness assessment at submission time for later outcome analysis."""
    timestamp = submitted_at or datetime.now(timezone.utc)
    breakdown = readiness.breakdown
    return SubmissionSnapshot(
        score=readiness.score,
        recommendation=readiness.recommendation,
        summary=get_bid_readiness_summary(readiness),
        acknowledged_risks=[
            AcknowledgedRisk(
                category=risk.category,
                severity=risk.severity,
                description=risk.description,
            )
            for risk in readiness.top_risks
        ],
        risks_acknowledged=risks_acknowledged,
        submitted_at=timestamp.isoformat(),
        submitted_by=submitted_by,
        breakdown={
            "foundational_readiness": breakdown.foundational_readiness,
            "strategy_health": breakdown.strategy_health,
            "rubric_coverage_health": breakdown.rubric_coverage_health,
            "proof_coverage": breakdown.proof_coverage,
            "persona_alignment": breakdown.persona_alignment,
        },
    )
