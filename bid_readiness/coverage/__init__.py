from .analyzer import (
    HIGH_WEIGHT_THRESHOLD,
    compute_rubric_coverage,
    describe_missing_sections,
    get_suggested_sections_for_review,
    is_criterion_covered_by_section,
)
from .types import NO_CRITERIA_NOTE, CriterionCoverage, RubricCoverageResult, SectionCoverage

__all__ = [
    "CriterionCoverage",
    "HIGH_WEIGHT_THRESHOLD",
    "NO_CRITERIA_NOTE",
    "RubricCoverageResult",
    "SectionCoverage",
    "compute_rubric_coverage",
    "describe_missing_sections",
    "get_suggested_sections_for_review",
    "is_criterion_covered_by_section",
]
