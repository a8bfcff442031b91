"""Evaluator personas and their default assignment to proposal sections."""

from __future__ import annotations

from dataclasses import dataclass

from bid_readiness.models import PersonaSectionAssignment, PersonaSettings

EVALUATOR_PERSONA_TYPES = ("procurement", "technical", "executive")

PERSONA_LABELS = {
    "procurement": "Procurement",
    "technical": "Technical",
    "executive": "Executive",
}

FALLBACK_PERSONA = "technical"


@dataclass(frozen=True)
class SectionPersonas:
    primary: str
    secondary: tuple[str, ...] = ()


DEFAULT_SECTION_PERSONAS: dict[str, SectionPersonas] = {
    "agency_overview": SectionPersonas("executive", ("procurement",)),
    "approach": SectionPersonas("technical", ("executive",)),
    "team": SectionPersonas("technical", ("executive",)),
    "work_samples": SectionPersonas("technical", ("executive",)),
    "plan_timeline": SectionPersonas("technical", ("procurement",)),
    "pricing": SectionPersonas("procurement", ("executive",)),
    "references": SectionPersonas("procurement", ("executive",)),
}


def get_persona_for_section(
    section_key: str, persona_settings: PersonaSettings | None = None
) -> SectionPersonas:
    if persona_settings is not None:
        assignment = persona_settings.assignment_for(section_key)
        if assignment is not None:
            return SectionPersonas(
                assignment.primary_persona, tuple(assignment.secondary_personas)
            )
    return DEFAULT_SECTION_PERSONAS.get(section_key, SectionPersonas(FALLBACK_PERSONA))


def get_persona_label(persona: str) -> str:
    return PERSONA_LABELS.get(persona, persona)


def create_default_persona_settings() -> PersonaSettings:
    return PersonaSettings(
        enabled=True,
        section_assignments=[
            PersonaSectionAssignment(
                section_key=section_key,
                primary_persona=personas.primary,
                secondary_personas=list(personas.secondary),
            )
            for section_key, personas in DEFAULT_SECTION_PERSONAS.items()
        ],
    )
