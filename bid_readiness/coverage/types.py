from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

NO_CRITERIA_NOTE = "No evaluation criteria defined in win strategy"


@dataclass(frozen=True)
class CriterionCoverage:
    """Coverage of one evaluation criterion across the drafted sections."""

    criterion_label: str
    criterion_index: int
    weight: float
    covered_by_section_keys: list[str]
    coverage_score: int
    proof_coverage_score: int
    weighted_score: float
    notes: list[str] = field(default_factory=list)
    missing_sections: list[str] = field(default_factory=list)
    is_risk: bool = False
    expected_persona: str | None = None
    covering_personas: list[str] = field(default_factory=list)
    has_persona_mismatch: bool = False
    persona_risk_level: str = "none"
    persona_risk_description: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "criterion_label": self.criterion_label,
            "criterion_index": self.criterion_index,
            "weight": self.weight,
            "covered_by_section_keys": list(self.covered_by_section_keys),
            "coverage_score": self.coverage_score,
            "proof_coverage_score": self.proof_coverage_score,
            "weighted_score": self.weighted_score,
            "notes": list(self.notes),
            "missing_sections": list(self.missing_sections),
            "is_risk": self.is_risk,
            "expected_persona": self.expected_persona,
            "covering_personas": list(self.covering_personas),
            "has_persona_mismatch": self.has_persona_mismatch,
            "persona_risk_level": self.persona_risk_level,
            "persona_risk_description": self.persona_risk_description,
        }


@dataclass(frozen=True)
class SectionCoverage:
    section_key: str
    section_id: str
    criteria_touched: list[str]
    missing_high_weight_criteria: list[str]
    themes_applied: list[str]
    proof_applied: list[str]
    coverage_score: int
    needs_review: bool
    primary_persona: str | None = None
    secondary_personas: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, Any]:
        return {
            "section_key": self.section_key,
            "section_id": self.section_id,
            "criteria_touched": list(self.criteria_touched),
            "missing_high_weight_criteria": list(self.missing_high_weight_criteria),
            "themes_applied": list(self.themes_applied),
            "proof_applied": list(self.proof_applied),
            "coverage_score": self.coverage_score,
            "needs_review": self.needs_review,
            "primary_persona": self.primary_persona,
            "secondary_personas": list(self.secondary_personas),
        }


@dataclass(frozen=True)
class RubricCoverageResult:
    """Criterion and section coverage, sorted with the most critical gaps first."""

    criterion_coverage: list[CriterionCoverage]
    section_coverage: list[SectionCoverage]
    overall_health: int
    uncovered_high_weight_count: int
    sections_needing_review: int
    summary_notes: list[str]
    persona_mismatch_count: int = 0
    has_persona_settings: bool = False

    def find_criterion(self, label: str) -> CriterionCoverage | None:
        for item in self.criterion_coverage:
            if item.criterion_label == label:
                return item
        return None

    def as_dict(self) -> dict[str, Any]:
        return {
            "criterion_coverage": [item.as_dict() for item in self.criterion_coverage],
            "section_coverage": [item.as_dict() for item in self.section_coverage],
            "overall_health": self.overall_health,
            "uncovered_high_weight_count": self.uncovered_high_weight_count,
            "sections_needing_review": self.sections_needing_review,
            "summary_notes": list(self.summary_notes),
            "persona_mismatch_count": self.persona_mismatch_count,
            "has_persona_settings": self.has_persona_settings,
        }
