"""Bid readiness scoring configuration schema.

The models only enforce types; business invariants (weights summing to one,
ordered thresholds) are reported by :mod:`bid_readiness.config_store.validation`
so that callers can decide whether to reject, warn or repair.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from pydantic import BaseModel, Field


class BidReadinessWeights(BaseModel):
    """Relative weight of each readiness component."""

    model_config = {"frozen": True}

    foundational: float = Field(default=0.25, description="Foundational data completeness")
    strategy: float = Field(default=0.20, description="Win strategy completeness")
    coverage: float = Field(default=0.25, description="Rubric coverage health")
    proof: float = Field(default=0.15, description="Proof coverage")
    persona: float = Field(default=0.15, description="Persona alignment")

    def total(self) -> float:
        return self.foundational + self.strategy + self.coverage + self.proof + self.persona


class BidReadinessThresholds(BaseModel):
    model_config = {"frozen": True}

    go: float = Field(default=70, description="Minimum score for a Go recommendation")
    conditional_min: float = Field(
        default=50, description="Minimum score for a Conditional Go recommendation"
    )


class BidReadinessPenalties(BaseModel):
    model_config = {"frozen": True}

    critical_risk_penalty: float = Field(
        default=10, description="Points deducted per critical risk"
    )
    persona_mismatch_multiplier: float = Field(
        default=1.0, description="Score multiplier applied when persona skew is present"
    )
    proof_gap_penalty: float = Field(
        default=2, description="Points deducted per criterion with a proof gap"
    )


class RiskThresholds(BaseModel):
    """Component scores below these bounds raise risks of the named severity."""

    model_config = {"frozen": True}

    critical: float = 20
    high: float = 40
    medium: float = 60


class PartialDataPolicy(BaseModel):
    """How the overall score treats readiness components that were not supplied.

    ``zero_fill`` scores an absent component as 0. ``renormalize`` divides by
    the weight of the components actually supplied and multiplies the result
    by ``dampening`` whenever anything is missing.
    """

    model_config = {"frozen": True}

    mode: Literal["zero_fill", "renormalize"] = "zero_fill"
    dampening: float = Field(default=0.9, gt=0, le=1)


class BidReadinessConfig(BaseModel):
    model_config = {"frozen": True}

    version: str = "1.0.0"
    weights: BidReadinessWeights = Field(default_factory=BidReadinessWeights)
    thresholds: BidReadinessThresholds = Field(default_factory=BidReadinessThresholds)
    penalties: BidReadinessPenalties = Field(default_factory=BidReadinessPenalties)
    risk_thresholds: RiskThresholds = Field(default_factory=RiskThresholds)
    partial_data: PartialDataPolicy = Field(default_factory=PartialDataPolicy)


DEFAULT_BID_READINESS_CONFIG = BidReadinessConfig()


@dataclass(frozen=True)
class ConfigChange:
    """A single leaf-level difference between two configurations."""

    path: str
    from_value: Any
    to_value: Any
    description: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "from": self.from_value,
            "to": self.to_value,
            "description": self.description,
        }
