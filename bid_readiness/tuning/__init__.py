from .advisor import (
    apply_suggestion,
    bump_patch_version,
    export_suggestions,
    generate_patch_for_clipboard,
    get_suggestions_summary,
    suggest_readiness_tuning,
    suggestions_by_category,
)
from .heuristics import HEURISTICS, assess_impact, assess_risk, insight_rationale
from .types import ReadinessTuningSuggestion, TuningRationale, TuningSuggestionResult

__all__ = [
    "HEURISTICS",
    "ReadinessTuningSuggestion",
    "TuningRationale",
    "TuningSuggestionResult",
    "apply_suggestion",
    "assess_impact",
    "assess_risk",
    "bump_patch_version",
    "export_suggestions",
    "generate_patch_for_clipboard",
    "get_suggestions_summary",
    "insight_rationale",
    "suggest_readiness_tuning",
    "suggestions_by_category",
]
