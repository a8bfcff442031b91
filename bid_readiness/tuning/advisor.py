from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable

from bid_readiness.config_store import (
    BidReadinessConfig,
    DEFAULT_BID_READINESS_CONFIG,
    apply_changes,
    generate_config_patch,
)
from bid_readiness.outcomes import MIN_COMPLETE_RECORDS, OutcomeAnalysisResult

from .heuristics import HEURISTICS
from .types import ReadinessTuningSuggestion, TuningSuggestionResult

logger = logging.getLogger(__name__)

_CONFIDENCE_ORDER = {"high": 0, "medium": 1, "low": 2}
_IMPACT_ORDER = {"significant": 0, "moderate": 1, "minor": 2}
_SEMVER = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def suggest_readiness_tuning(
    analysis: OutcomeAnalysisResult,
    current_config: BidReadinessConfig | None = None,
) -> TuningSuggestionResult:
    """Propose bounded configuration adjustments backed by outcome insights.

    Returns no suggestions, with an explanatory message, when fewer than
    the minimum number of complete records exist or the analysis is not
    statistically meaningful. Suggestions are sorted by confidence, then
    by expected impact.
    """
    config = current_config or DEFAULT_BID_READINESS_CONFIG

    if analysis.complete_records < MIN_COMPLETE_RECORDS:
        return TuningSuggestionResult(
            current_config=config,
            has_enough_data=False,
            insufficient_data_message=(
                f"Need at least {MIN_COMPLETE_RECORDS} completed RFPs with outcomes. "
                f"Currently have {analysis.complete_records}."
            ),
        )
    if not analysis.is_statistically_meaningful:
        return TuningSuggestionResult(
            current_config=config,
            has_enough_data=False,
            insufficient_data_message="Not enough data for statistically meaningful analysis yet.",
        )

    suggestions: list[ReadinessTuningSuggestion] = []
    for heuristic in HEURISTICS:
        suggestion = heuristic(analysis, config)
        if suggestion is not None:
            suggestions.append(suggestion)

    suggestions.sort(
        key=lambda item: (_CONFIDENCE_ORDER[item.confidence], _IMPACT_ORDER[item.expected_impact])
    )
    logger.debug("Generated %d tuning suggestions", len(suggestions))
    return TuningSuggestionResult(
        current_config=config,
        has_enough_data=True,
        suggestions=suggestions,
    )


def apply_suggestion(
    config: BidReadinessConfig, suggestion: ReadinessTuningSuggestion
) -> BidReadinessConfig:
    """Apply a suggestion's changes and bump the patch version."""
    updated = apply_changes(config, suggestion.changes)
    return updated.model_copy(update={"version": bump_patch_version(config.version)})


def bump_patch_version(version: str) -> str:
    match = _SEMVER.match(version)
    if match is None:
        logger.warning("Config version '%s' is not semantic; keeping it unchanged", version)
        return version
    major, minor, patch = (int(part) for part in match.groups())
    return f"{major}.{minor}.{patch + 1}"


def generate_patch_for_clipboard(suggestion: ReadinessTuningSuggestion) -> str:
    return json.dumps(generate_config_patch(suggestion.changes), indent=2)


def get_suggestions_summary(result: TuningSuggestionResult) -> str:
    if not result.has_enough_data:
        return result.insufficient_data_message or "Insufficient data for tuning suggestions."

    count = len(result.suggestions)
    if count == 0:
        return "Current configuration appears well-calibrated. No changes suggested."

    high_confidence = sum(1 for item in result.suggestions if item.confidence == "high")
    noun = "suggestion" if count == 1 else "suggestions"
    if high_confidence > 0:
        return f"{count} tuning {noun} available ({high_confidence} high confidence)."
    return f"{count} tuning {noun} available."


def suggestions_by_category(
    suggestions: Iterable[ReadinessTuningSuggestion],
) -> dict[str, list[ReadinessTuningSuggestion]]:
    grouped: dict[str, list[ReadinessTuningSuggestion]] = {}
    for suggestion in suggestions:
        grouped.setdefault(suggestion.category, []).append(suggestion)
    return grouped


def export_suggestions(result: TuningSuggestionResult) -> dict[str, Any]:
    return {
        "config_version": result.current_config.version,
        "has_enough_data": result.has_enough_data,
        "summary": get_suggestions_summary(result),
        "suggestions": [suggestion.as_dict() for suggestion in result.suggestions],
    }
