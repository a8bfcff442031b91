from __future__ import annotations

import re

from .models import (
    BidReadinessConfig,
    BidReadinessPenalties,
    BidReadinessThresholds,
    BidReadinessWeights,
    RiskThresholds,
)

WEIGHT_SUM_TOLERANCE = 0.001
_SEMVER_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
_WEIGHT_FIELDS = ("foundational", "strategy", "coverage", "proof", "persona")


def validate_weights(weights: BidReadinessWeights) -> bool:
    return abs(weights.total() - 1.0) <= WEIGHT_SUM_TOLERANCE


def validate_thresholds(thresholds: BidReadinessThresholds) -> bool:
    return thresholds.go > thresholds.conditional_min


def validate_config(config: BidReadinessConfig) -> list[str]:
    """Return every violated invariant; an empty list means the config is usable."""
    errors: list[str] = []

    if not _SEMVER_PATTERN.match(config.version):
        errors.append(f"version must be MAJOR.MINOR.PATCH, got '{config.version}'")

    errors.extend(_weight_errors(config.weights))
    errors.extend(_threshold_errors(config.thresholds))
    errors.extend(_penalty_errors(config.penalties))
    errors.extend(_risk_threshold_errors(config.risk_thresholds))
    return errors


def _weight_errors(weights: BidReadinessWeights) -> list[str]:
    errors: list[str] = []
    for name in _WEIGHT_FIELDS:
        value = getattr(weights, name)
        if value < 0 or value > 1:
            errors.append(f"weights.{name} must be within [0, 1], got {value}")
    if not validate_weights(weights):
        errors.append(
            f"weights must sum to 1.0 (+/- {WEIGHT_SUM_TOLERANCE}), got {weights.total():.4f}"
        )
    return errors


def _threshold_errors(thresholds: BidReadinessThresholds) -> list[str]:
    errors: list[str] = []
    for name in ("go", "conditional_min"):
        value = getattr(thresholds, name)
        if value < 0 or value > 100:
            errors.append(f"thresholds.{name} must be within [0, 100], got {value}")
    if not validate_thresholds(thresholds):
        errors.append(
            "thresholds.go must be greater than thresholds.conditional_min "
            f"({thresholds.go} <= {thresholds.conditional_min})"
        )
    return errors


def _penalty_errors(penalties: BidReadinessPenalties) -> list[str]:
    errors: list[str] = []
    if penalties.critical_risk_penalty < 0:
        errors.append("penalties.critical_risk_penalty must be >= 0")
    if penalties.proof_gap_penalty < 0:
        errors.append("penalties.proof_gap_penalty must be >= 0")
    multiplier = penalties.persona_mismatch_multiplier
    if multiplier <= 0 or multiplier > 1:
        errors.append(
            f"penalties.persona_mismatch_multiplier must be within (0, 1], got {multiplier}"
        )
    return errors


def _risk_threshold_errors(risk_thresholds: RiskThresholds) -> list[str]:
    if risk_thresholds.critical < risk_thresholds.high < risk_thresholds.medium <= 100:
        return []
    return [
        "risk_thresholds must satisfy critical < high < medium <= 100 "
        f"(got {risk_thresholds.critical}/{risk_thresholds.high}/{risk_thresholds.medium})"
    ]
