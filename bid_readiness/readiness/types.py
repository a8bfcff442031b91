from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from bid_readiness.config_store import BidReadinessWeights
from bid_readiness.coverage import RubricCoverageResult
from bid_readiness.models import PersonaSettings, Section, WinStrategy

BidRecommendation = Literal["go", "conditional", "no_go"]
RiskSeverity = Literal["low", "medium", "high", "critical"]
FixEffort = Literal["low", "medium", "high"]

SEVERITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}


@dataclass(frozen=True)
class BidReadinessInputs:
    """Everything the scorer needs; scores are 0-100 or None when not computed."""

    foundational_score: float | None
    strategy_score: float | None
    rubric_coverage: RubricCoverageResult | None
    strategy: WinStrategy | None = None
    sections: list[Section] = field(default_factory=list)
    persona_settings: PersonaSettings | None = None


@dataclass(frozen=True)
class BidRisk:
    category: str
    severity: RiskSeverity
    description: str
    mitigation: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "severity": self.severity,
            "description": self.description,
            "mitigation": self.mitigation,
        }


@dataclass(frozen=True)
class BidReadinessFix:
    section_key: str
    reason: str
    expected_lift: int
    effort: FixEffort
    priority: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "section_key": self.section_key,
            "reason": self.reason,
            "expected_lift": self.expected_lift,
            "effort": self.effort,
            "priority": self.priority,
        }


@dataclass(frozen=True)
class BidReadinessBreakdown:
    foundational_readiness: float
    strategy_health: float
    rubric_coverage_health: float
    proof_coverage: float
    persona_alignment: float
    weights: BidReadinessWeights

    def as_dict(self) -> dict[str, Any]:
        return {
            "foundational_readiness": self.foundational_readiness,
            "strategy_health": self.strategy_health,
            "rubric_coverage_health": self.rubric_coverage_health,
            "proof_coverage": self.proof_coverage,
            "persona_alignment": self.persona_alignment,
            "weights": self.weights.model_dump(),
        }


@dataclass(frozen=True)
class BidReadiness:
    """One readiness assessment with its recommendation, risks and fixes."""

    score: int
    recommendation: BidRecommendation
    reasons: list[str]
    top_risks: list[BidRisk]
    highest_impact_fixes: list[BidReadinessFix]
    breakdown: BidReadinessBreakdown
    is_reliable_assessment: bool
    conditions: list[str] | None = None
    adjusted_score: int | None = None
    config_version: str | None = None

    @property
    def has_critical_risks(self) -> bool:
        return any(risk.severity == "critical" for risk in self.top_risks)

    def as_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "recommendation": self.recommendation,
            "reasons": list(self.reasons),
            "top_risks": [risk.as_dict() for risk in self.top_risks],
            "highest_impact_fixes": [fix.as_dict() for fix in self.highest_impact_fixes],
            "breakdown": self.breakdown.as_dict(),
            "is_reliable_assessment": self.is_reliable_assessment,
            "conditions": list(self.conditions) if self.conditions is not None else None,
            "adjusted_score": self.adjusted_score,
            "config_version": self.config_version,
        }
