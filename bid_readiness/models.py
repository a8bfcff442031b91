"""Input models for bid readiness analysis.

Upstream collaborators hand over camelCase JSON; every model accepts both the
camelCase aliases and the snake_case field names.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

INPUT_MODEL_CONFIG = {
    "frozen": True,
    "populate_by_name": True,
    "alias_generator": to_camel,
}

DEFAULT_CRITERION_WEIGHT = 0.5
DEFAULT_PROOF_PRIORITY = 3

PersonaType = Literal["procurement", "technical", "executive"]


class EvaluationCriterion(BaseModel):
    """One weighted dimension an evaluator will score the proposal against."""

    model_config = INPUT_MODEL_CONFIG

    label: str = Field(..., min_length=1)
    weight: float | None = Field(default=None, ge=0, le=1)
    guidance: str | None = None
    primary_sections: list[str] = Field(default_factory=list)

    @property
    def effective_weight(self) -> float:
        return DEFAULT_CRITERION_WEIGHT if self.weight is None else self.weight


class WinTheme(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    id: str
    label: str
    description: str = ""


class ProofItem(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    id: str
    label: str = ""
    priority: int | None = Field(default=None, ge=1, le=5)

    @property
    def effective_priority(self) -> int:
        return self.priority or DEFAULT_PROOF_PRIORITY


class WinStrategy(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    evaluation_criteria: list[EvaluationCriterion] = Field(default_factory=list)
    win_themes: list[WinTheme] = Field(default_factory=list)
    proof_plan: list[ProofItem] = Field(default_factory=list)

    def find_theme(self, theme_id: str) -> WinTheme | None:
        for theme in self.win_themes:
            if theme.id == theme_id:
                return theme
        return None


class GeneratedUsing(BaseModel):
    """Record of which strategy inputs were applied when a section was drafted."""

    model_config = INPUT_MODEL_CONFIG

    has_win_strategy: bool = False
    win_themes_applied: list[str] = Field(default_factory=list)
    proof_items_applied: list[str] = Field(default_factory=list)


class Section(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    id: str
    section_key: str
    title: str = ""
    status: str = "draft"
    generated_using: GeneratedUsing | None = None

    @property
    def has_content(self) -> bool:
        return self.status != "empty"

    @property
    def themes_applied(self) -> list[str]:
        if self.generated_using is None:
            return []
        return list(self.generated_using.win_themes_applied)

    @property
    def proof_applied(self) -> list[str]:
        if self.generated_using is None:
            return []
        return list(self.generated_using.proof_items_applied)


class PersonaSectionAssignment(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    section_key: str
    primary_persona: PersonaType
    secondary_personas: list[PersonaType] = Field(default_factory=list)
    is_manual_override: bool = False


class PersonaSettings(BaseModel):
    model_config = INPUT_MODEL_CONFIG

    enabled: bool = False
    section_assignments: list[PersonaSectionAssignment] = Field(default_factory=list)

    def assignment_for(self, section_key: str) -> PersonaSectionAssignment | None:
        for assignment in self.section_assignments:
            if assignment.section_key == section_key:
                return assignment
        return None
