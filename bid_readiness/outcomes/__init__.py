from .analyzer import (
    ACKNOWLEDGED_RISKS_SIGNAL,
    CRITICAL_RISKS_SIGNAL,
    DEFAULT_SCORE_THRESHOLDS,
    NO_OUTSTANDING_RISKS_SIGNAL,
    analyze_outcomes,
    confidence_for_sample,
)
from .helpers import (
    get_analysis_summary,
    get_insights_by_category,
    get_top_insights,
    is_readiness_predictive,
)
from .snapshot import build_submission_snapshot
from .surfacing import (
    RelevantInsight,
    get_relevant_insights,
    get_submission_insights,
    has_valid_insights,
)
from .types import (
    MIN_COMPLETE_RECORDS,
    AcknowledgedRisk,
    ComponentCorrelation,
    LossReasonSummary,
    OutcomeAnalysisResult,
    OutcomeInsight,
    RfpOutcomeRecord,
    SubmissionSnapshot,
)

__all__ = [
    "ACKNOWLEDGED_RISKS_SIGNAL",
    "AcknowledgedRisk",
    "CRITICAL_RISKS_SIGNAL",
    "ComponentCorrelation",
    "DEFAULT_SCORE_THRESHOLDS",
    "LossReasonSummary",
    "MIN_COMPLETE_RECORDS",
    "NO_OUTSTANDING_RISKS_SIGNAL",
    "OutcomeAnalysisResult",
    "OutcomeInsight",
    "RelevantInsight",
    "RfpOutcomeRecord",
    "SubmissionSnapshot",
    "analyze_outcomes",
    "build_submission_snapshot",
    "confidence_for_sample",
    "get_analysis_summary",
    "get_insights_by_category",
    "get_relevant_insights",
    "get_submission_insights",
    "get_top_insights",
    "has_valid_insights",
    "is_readiness_predictive",
]
