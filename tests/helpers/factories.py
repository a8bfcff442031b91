"""Builders for bid readiness test inputs."""

from __future__ import annotations

from typing import Any

from bid_readiness.coverage import CriterionCoverage, RubricCoverageResult, SectionCoverage
from bid_readiness.models import (
    EvaluationCriterion,
    GeneratedUsing,
    ProofItem,
    Section,
    WinStrategy,
    WinTheme,
)
from bid_readiness.outcomes import RfpOutcomeRecord, SubmissionSnapshot


def make_strategy(
    criteria: list[tuple[str, float | None]] | None = None,
    *,
    themes: list[WinTheme] | None = None,
    proof_plan: list[ProofItem] | None = None,
    primary_sections: dict[str, list[str]] | None = None,
) -> WinStrategy:
    primary_sections = primary_sections or {}
    return WinStrategy(
        evaluation_criteria=[
            EvaluationCriterion(
                label=label,
                weight=weight,
                primary_sections=primary_sections.get(label, []),
            )
            for label, weight in (criteria or [])
        ],
        win_themes=themes or [],
        proof_plan=proof_plan or [],
    )


def make_section(
    section_key: str,
    *,
    has_win_strategy: bool = True,
    themes: list[str] | None = None,
    proof: list[str] | None = None,
    status: str = "draft",
    generated: bool = True,
) -> Section:
    return Section(
        id=f"sec-{section_key}",
        section_key=section_key,
        title=section_key.replace("_", " ").title(),
        status=status,
        generated_using=(
            GeneratedUsing(
                has_win_strategy=has_win_strategy,
                win_themes_applied=themes or [],
                proof_items_applied=proof or [],
            )
            if generated
            else None
        ),
    )


def make_criterion_coverage(
    label: str,
    *,
    index: int = 0,
    weight: float = 0.3,
    coverage: int = 100,
    proof: int = 100,
    sections: list[str] | None = None,
    missing: list[str] | None = None,
    persona_risk_level: str = "none",
) -> CriterionCoverage:
    return CriterionCoverage(
        criterion_label=label,
        criterion_index=index,
        weight=weight,
        covered_by_section_keys=sections or [],
        coverage_score=coverage,
        proof_coverage_score=proof,
        weighted_score=coverage * (2 - weight),
        missing_sections=missing or [],
        has_persona_mismatch=persona_risk_level != "none",
        persona_risk_level=persona_risk_level,
    )


def make_coverage(
    criteria: list[CriterionCoverage],
    *,
    overall_health: int = 100,
    sections: list[SectionCoverage] | None = None,
    has_persona_settings: bool = True,
) -> RubricCoverageResult:
    return RubricCoverageResult(
        criterion_coverage=criteria,
        section_coverage=sections or [],
        overall_health=overall_health,
        uncovered_high_weight_count=0,
        sections_needing_review=sum(1 for item in sections or [] if item.needs_review),
        summary_notes=[],
        persona_mismatch_count=sum(
            1
            for item in criteria
            if item.has_persona_mismatch and item.persona_risk_level != "low"
        ),
        has_persona_settings=has_persona_settings,
    )


def make_record(
    record_id: str,
    *,
    score: float,
    outcome: str | None,
    recommendation: str = "conditional",
    risks: list[dict[str, Any]] | None = None,
    risks_acknowledged: bool = False,
    loss_reasons: list[str] | None = None,
    breakdown: dict[str, float] | None = None,
    with_snapshot: bool = True,
) -> RfpOutcomeRecord:
    snapshot = (
        SubmissionSnapshot(
            score=score,
            recommendation=recommendation,
            acknowledged_risks=risks or [],
            risks_acknowledged=risks_acknowledged,
            breakdown=breakdown,
        )
        if with_snapshot
        else None
    )
    return RfpOutcomeRecord(
        id=record_id,
        submission_snapshot=snapshot,
        outcome=outcome,
        loss_reason_tags=loss_reasons,
    )


def make_records(
    count: int,
    wins: int,
    *,
    score: float,
    prefix: str = "rfp",
    **kwargs: Any,
) -> list[RfpOutcomeRecord]:
    return [
        make_record(
            f"{prefix}-{index}",
            score=score,
            outcome="won" if index < wins else "lost",
            **kwargs,
        )
        for index in range(count)
    ]
