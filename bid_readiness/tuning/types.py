from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from bid_readiness.config_store import BidReadinessConfig, ConfigChange

TuningRiskLevel = Literal["low", "medium", "high"]
TuningImpact = Literal["minor", "moderate", "significant"]
TuningCategory = Literal["threshold", "penalty", "weight"]


@dataclass(frozen=True)
class TuningRationale:
    """A short evidence chip backing a suggestion."""

    label: str
    type: Literal["signal", "sample_size", "confidence", "correlation"]
    value: str | int | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"label": self.label, "type": self.type, "value": self.value}


@dataclass(frozen=True)
class ReadinessTuningSuggestion:
    id: str
    title: str
    description: str
    changes: list[ConfigChange]
    expected_impact: TuningImpact
    risk: TuningRiskLevel
    confidence: Literal["low", "medium", "high"]
    rationale: list[TuningRationale]
    category: TuningCategory

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "changes": [change.as_dict() for change in self.changes],
            "expected_impact": self.expected_impact,
            "risk": self.risk,
            "confidence": self.confidence,
            "rationale": [item.as_dict() for item in self.rationale],
            "category": self.category,
        }


@dataclass(frozen=True)
class TuningSuggestionResult:
    current_config: BidReadinessConfig
    has_enough_data: bool
    suggestions: list[ReadinessTuningSuggestion] = field(default_factory=list)
    insufficient_data_message: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "suggestions": [suggestion.as_dict() for suggestion in self.suggestions],
            "current_config": self.current_config.model_dump(),
            "has_enough_data": self.has_enough_data,
            "insufficient_data_message": self.insufficient_data_message,
        }
