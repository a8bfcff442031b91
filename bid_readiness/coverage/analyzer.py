"""Map evaluation criteria onto drafted proposal sections.

A section addresses a criterion only when it was generated with the win
strategy and either one of its applied themes overlaps the criterion label or
it is one of the sections the criterion is expected to live in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bid_readiness.common import round_half_up
from bid_readiness.models import EvaluationCriterion, PersonaSettings, Section, WinStrategy
from bid_readiness.taxonomy import (
    Taxonomy,
    default_taxonomy,
    get_persona_for_section,
    get_persona_label,
    get_short_section_label,
)

from .types import NO_CRITERIA_NOTE, CriterionCoverage, RubricCoverageResult, SectionCoverage

logger = logging.getLogger(__name__)

HIGH_WEIGHT_THRESHOLD = 0.25
HIGH_WEIGHT_GAP_THRESHOLD = 0.3
RISK_WEIGHT_THRESHOLD = 0.2
MIN_THEME_WORD_LENGTH = 3

_DEFAULT_TAXONOMY = default_taxonomy()


@dataclass(frozen=True)
class _PersonaAssessment:
    expected_persona: str | None = None
    covering_personas: tuple[str, ...] = ()
    has_mismatch: bool = False
    risk_level: str = "none"
    description: str | None = None


def compute_rubric_coverage(
    strategy: WinStrategy | None,
    sections: list[Section],
    persona_settings: PersonaSettings | None = None,
    *,
    taxonomy: Taxonomy | None = None,
) -> RubricCoverageResult:
    taxonomy = taxonomy or _DEFAULT_TAXONOMY
    has_persona_settings = bool(persona_settings and persona_settings.enabled)

    if strategy is None or not strategy.evaluation_criteria:
        return _empty_result(sections, persona_settings, has_persona_settings)

    criteria = strategy.evaluation_criteria
    suggested_by_index = [_suggested_sections(criterion, taxonomy) for criterion in criteria]
    section_criteria: dict[str, list[str]] = {}
    coverages: list[CriterionCoverage] = []

    for index, criterion in enumerate(criteria):
        suggested = suggested_by_index[index]
        covering = [
            section
            for section in sections
            if _section_addresses_criterion(section, criterion, suggested, strategy)
        ]
        covered_keys = [section.section_key for section in covering]
        for key in covered_keys:
            section_criteria.setdefault(key, []).append(criterion.label)

        coverages.append(
            _criterion_coverage(
                index,
                criterion,
                suggested,
                covering,
                strategy,
                taxonomy,
                persona_settings if has_persona_settings else None,
            )
        )

    coverages.sort(key=_priority_key)

    section_coverages = [
        _section_coverage(section, criteria, suggested_by_index, section_criteria, persona_settings)
        for section in sections
    ]

    total_weight = sum(item.weight for item in coverages)
    overall_health = (
        round_half_up(sum(item.coverage_score * item.weight for item in coverages) / total_weight)
        if total_weight > 0
        else 100
    )
    uncovered_high_weight_count = sum(
        1
        for item in coverages
        if item.weight >= HIGH_WEIGHT_THRESHOLD and item.coverage_score == 0
    )
    sections_needing_review = sum(1 for item in section_coverages if item.needs_review)
    persona_mismatch_count = sum(
        1
        for item in coverages
        if item.has_persona_mismatch and item.persona_risk_level != "low"
    )

    logger.debug(
        "Rubric coverage: %d criteria, health=%d, uncovered_high_weight=%d",
        len(coverages),
        overall_health,
        uncovered_high_weight_count,
    )
    return RubricCoverageResult(
        criterion_coverage=coverages,
        section_coverage=section_coverages,
        overall_health=overall_health,
        uncovered_high_weight_count=uncovered_high_weight_count,
        sections_needing_review=sections_needing_review,
        summary_notes=_summary_notes(
            uncovered_high_weight_count,
            sections_needing_review,
            persona_mismatch_count,
            overall_health,
        ),
        persona_mismatch_count=persona_mismatch_count,
        has_persona_settings=has_persona_settings,
    )


def get_suggested_sections_for_review(
    criterion_label: str,
    strategy: WinStrategy,
    *,
    taxonomy: Taxonomy | None = None,
) -> list[str]:
    for criterion in strategy.evaluation_criteria:
        if criterion.label == criterion_label:
            return _suggested_sections(criterion, taxonomy or _DEFAULT_TAXONOMY)
    return []


def is_criterion_covered_by_section(
    criterion_label: str, section_key: str, coverage: RubricCoverageResult
) -> bool:
    criterion = coverage.find_criterion(criterion_label)
    return criterion is not None and section_key in criterion.covered_by_section_keys


def _suggested_sections(criterion: EvaluationCriterion, taxonomy: Taxonomy) -> list[str]:
    if criterion.primary_sections:
        return list(criterion.primary_sections)
    return taxonomy.suggested_sections(f"{criterion.label} {criterion.guidance or ''}")


def _section_addresses_criterion(
    section: Section,
    criterion: EvaluationCriterion,
    suggested: list[str],
    strategy: WinStrategy,
) -> bool:
    generated_using = section.generated_using
    if generated_using is None or not generated_using.has_win_strategy:
        return False

    label = criterion.label.lower()
    label_words = [word for word in label.split(" ") if len(word) > MIN_THEME_WORD_LENGTH]
    for theme_id in generated_using.win_themes_applied:
        theme = strategy.find_theme(theme_id)
        if theme is None:
            continue
        theme_text = f"{theme.label} {theme.description}".lower()
        if label in theme_text or any(word in theme_text for word in label_words):
            return True

    return section.section_key in suggested and section.has_content


def _proof_coverage(covering: list[Section], strategy: WinStrategy) -> int:
    if not covering:
        return 0
    if not strategy.proof_plan:
        return 100

    applied: set[str] = set()
    for section in covering:
        applied.update(section.proof_applied)
    if not applied:
        return 0

    total = 0
    earned = 0
    for proof in strategy.proof_plan:
        priority = proof.effective_priority
        total += priority
        if proof.id in applied:
            earned += priority
    return round_half_up(earned / total * 100) if total > 0 else 100


def _criterion_coverage(
    index: int,
    criterion: EvaluationCriterion,
    suggested: list[str],
    covering: list[Section],
    strategy: WinStrategy,
    taxonomy: Taxonomy,
    persona_settings: PersonaSettings | None,
) -> CriterionCoverage:
    weight = criterion.effective_weight
    covered_keys = [section.section_key for section in covering]
    missing_sections = [key for key in suggested if key not in covered_keys]
    coverage_score = (
        min(100, round_half_up(len(covered_keys) / len(suggested) * 100)) if suggested else 100
    )
    proof_score = _proof_coverage(covering, strategy)

    notes: list[str] = []
    if coverage_score == 0:
        notes.append("Not covered by any section")
    elif coverage_score < 50:
        notes.append(f"Only {len(covered_keys)}/{len(suggested)} expected sections cover this")
    if proof_score < 50 and strategy.proof_plan:
        notes.append(f"Low proof coverage ({proof_score}%)")
    if weight >= HIGH_WEIGHT_GAP_THRESHOLD and coverage_score < 100:
        notes.append("High-weight criterion with coverage gaps")

    persona = _PersonaAssessment()
    if persona_settings is not None:
        persona = _assess_persona(criterion, covered_keys, weight, taxonomy, persona_settings)
        if persona.has_mismatch:
            notes.append(f"Persona skew: {persona.description}")

    return CriterionCoverage(
        criterion_label=criterion.label,
        criterion_index=index,
        weight=weight,
        covered_by_section_keys=covered_keys,
        coverage_score=coverage_score,
        proof_coverage_score=proof_score,
        weighted_score=coverage_score * (1 + (1 - weight)),
        notes=notes,
        missing_sections=missing_sections,
        is_risk=weight >= RISK_WEIGHT_THRESHOLD and (coverage_score < 50 or proof_score < 30),
        expected_persona=persona.expected_persona,
        covering_personas=list(persona.covering_personas),
        has_persona_mismatch=persona.has_mismatch,
        persona_risk_level=persona.risk_level,
        persona_risk_description=persona.description,
    )


def _assess_persona(
    criterion: EvaluationCriterion,
    covered_keys: list[str],
    weight: float,
    taxonomy: Taxonomy,
    persona_settings: PersonaSettings,
) -> _PersonaAssessment:
    expected = taxonomy.expected_persona(criterion.label)
    assignments = [get_persona_for_section(key, persona_settings) for key in covered_keys]
    covering = tuple(assignment.primary for assignment in assignments)

    if expected is None or not covering or expected in covering:
        return _PersonaAssessment(expected_persona=expected, covering_personas=covering)

    expected_label = get_persona_label(expected)
    covering_labels = "/".join(get_persona_label(persona) for persona in covering)
    if any(expected in assignment.secondary for assignment in assignments):
        level = "low"
        description = (
            f"{expected_label} criterion covered in section(s) where they review as secondary"
        )
    elif weight >= HIGH_WEIGHT_GAP_THRESHOLD:
        level = "high"
        description = (
            f"High-weight {expected_label} criterion covered only in {covering_labels} sections"
        )
    else:
        level = "medium"
        description = f"{expected_label} criterion framed for {covering_labels} evaluators"

    return _PersonaAssessment(
        expected_persona=expected,
        covering_personas=covering,
        has_mismatch=True,
        risk_level=level,
        description=description,
    )


def _priority_key(item: CriterionCoverage) -> tuple[int, float, int]:
    return (
        0 if item.is_risk else 1,
        -(item.weight * (100 - item.coverage_score)),
        item.criterion_index,
    )


def _section_coverage(
    section: Section,
    criteria: list[EvaluationCriterion],
    suggested_by_index: list[list[str]],
    section_criteria: dict[str, list[str]],
    persona_settings: PersonaSettings | None,
) -> SectionCoverage:
    touched = list(section_criteria.get(section.section_key, []))
    mapped = [
        criterion
        for criterion, suggested in zip(criteria, suggested_by_index)
        if section.section_key in suggested
    ]
    missing_high_weight = [
        criterion.label
        for criterion in mapped
        if criterion.effective_weight >= HIGH_WEIGHT_THRESHOLD and criterion.label not in touched
    ]
    coverage_score = min(100, round_half_up(len(touched) / len(mapped) * 100)) if mapped else 100
    personas = get_persona_for_section(section.section_key, persona_settings)

    return SectionCoverage(
        section_key=section.section_key,
        section_id=section.id,
        criteria_touched=touched,
        missing_high_weight_criteria=missing_high_weight,
        themes_applied=section.themes_applied,
        proof_applied=section.proof_applied,
        coverage_score=coverage_score,
        needs_review=bool(missing_high_weight) or (bool(mapped) and coverage_score < 50),
        primary_persona=personas.primary,
        secondary_personas=list(personas.secondary),
    )


def _empty_result(
    sections: list[Section],
    persona_settings: PersonaSettings | None,
    has_persona_settings: bool,
) -> RubricCoverageResult:
    section_coverages = []
    for section in sections:
        personas = get_persona_for_section(section.section_key, persona_settings)
        section_coverages.append(
            SectionCoverage(
                section_key=section.section_key,
                section_id=section.id,
                criteria_touched=[],
                missing_high_weight_criteria=[],
                themes_applied=section.themes_applied,
                proof_applied=section.proof_applied,
                coverage_score=100,
                needs_review=False,
                primary_persona=personas.primary,
                secondary_personas=list(personas.secondary),
            )
        )
    return RubricCoverageResult(
        criterion_coverage=[],
        section_coverage=section_coverages,
        overall_health=100,
        uncovered_high_weight_count=0,
        sections_needing_review=0,
        summary_notes=[NO_CRITERIA_NOTE],
        persona_mismatch_count=0,
        has_persona_settings=has_persona_settings,
    )


def _summary_notes(
    uncovered_high_weight_count: int,
    sections_needing_review: int,
    persona_mismatch_count: int,
    overall_health: int,
) -> list[str]:
    notes: list[str] = []
    if uncovered_high_weight_count > 0:
        notes.append(f"{uncovered_high_weight_count} high-weight criteria uncovered")
    if sections_needing_review > 0:
        notes.append(f"{sections_needing_review} sections need review")
    if persona_mismatch_count > 0:
        notes.append(f"{persona_mismatch_count} criteria with persona skew")
    if overall_health < 50:
        notes.append("Coverage health is low - major gaps in criteria alignment")
    elif overall_health < 75:
        notes.append("Some criteria have coverage gaps")
    if not notes:
        notes.append("Good coverage across evaluation criteria")
    return notes


def describe_missing_sections(item: CriterionCoverage) -> str:
    return ", ".join(get_short_section_label(key) for key in item.missing_sections)
