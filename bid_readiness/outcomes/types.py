from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, Field

from bid_readiness.models import INPUT_MODEL_CONFIG

InsightConfidence = Literal["low", "medium", "high"]
InsightCategory = Literal["score_threshold", "recommendation", "acknowledgement", "risk"]

MIN_COMPLETE_RECORDS = 5


class AcknowledgedRisk(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    category: str
    severity: Literal["low", "medium", "high", "critical"]
    description: str = ""


class SubmissionSnapshot(BaseModel):
    """Readiness assessment captured when the proposal was submitted."""

    model_config = INPUT_MODEL_CONFIG

    score: float = Field(..., ge=0, le=100)
    recommendation: Literal["go", "conditional", "no_go"]
    summary: str = ""
    acknowledged_risks: list[AcknowledgedRisk] = Field(default_factory=list)
    risks_acknowledged: bool = False
    submitted_at: str | None = None
    submitted_by: str | None = None
    breakdown: dict[str, float] | None = None

    @property
    def has_acknowledged_risks(self) -> bool:
        return self.risks_acknowledged or bool(self.acknowledged_risks)

    @property
    def has_critical_risks(self) -> bool:
        return any(risk.severity == "critical" for risk in self.acknowledged_risks)


class RfpOutcomeRecord(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    id: str
    submission_snapshot: SubmissionSnapshot | None = None
    outcome: Literal["won", "lost"] | None = None
    loss_reason_tags: list[str] | None = None

    @property
    def is_complete(self) -> bool:
        return self.submission_snapshot is not None and self.outcome is not None


@dataclass(frozen=True)
class OutcomeInsight:
    """Win-rate difference between one bucket of bids and the baseline."""

    signal: str
    win_rate_delta: int
    sample_size: int
    confidence: InsightConfidence
    category: InsightCategory
    win_rate: int | None = None
    recommendation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "signal": self.signal,
            "win_rate_delta": self.win_rate_delta,
            "sample_size": self.sample_size,
            "confidence": self.confidence,
            "category": self.category,
            "win_rate": self.win_rate,
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class LossReasonSummary:
    reason: str
    count: int
    percentage: int
    avg_readiness_score: int | None

    def as_dict(self) -> dict[str, Any]:
        return {
            "reason": self.reason,
            "count": self.count,
            "percentage": self.percentage,
            "avg_readiness_score": self.avg_readiness_score,
        }


@dataclass(frozen=True)
class ComponentCorrelation:
    """Mean component score of won bids versus lost bids."""

    component: str
    won_average: int
    lost_average: int
    delta: int
    sample_size: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "component": self.component,
            "won_average": self.won_average,
            "lost_average": self.lost_average,
            "delta": self.delta,
            "sample_size": self.sample_size,
        }


@dataclass(frozen=True)
class OutcomeAnalysisResult:
    total_analyzed: int
    complete_records: int
    overall_win_rate: int
    insights: list[OutcomeInsight] = field(default_factory=list)
    component_correlations: list[ComponentCorrelation] = field(default_factory=list)
    loss_reasons: list[LossReasonSummary] = field(default_factory=list)
    is_statistically_meaningful: bool = False
    minimum_sample_recommendation: int = MIN_COMPLETE_RECORDS

    def find_insight(self, signal: str) -> OutcomeInsight | None:
        for insight in self.insights:
            if insight.signal == signal:
                return insight
        return None

    def as_dict(self) -> dict[str, Any]:
        return {
            "total_analyzed": self.total_analyzed,
            "complete_records": self.complete_records,
            "overall_win_rate": self.overall_win_rate,
            "insights": [insight.as_dict() for insight in self.insights],
            "component_correlations": [item.as_dict() for item in self.component_correlations],
            "loss_reasons": [item.as_dict() for item in self.loss_reasons],
            "is_statistically_meaningful": self.is_statistically_meaningful,
            "minimum_sample_recommendation": self.minimum_sample_recommendation,
        }
