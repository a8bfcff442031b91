from __future__ import annotations

import logging

from bid_readiness.config_store import (
    DEFAULT_BID_READINESS_CONFIG,
    BidReadinessConfig,
    ConfigChange,
    apply_changes,
    diff_configs,
    generate_config_patch,
)


def _tuned_config() -> BidReadinessConfig:
    return BidReadinessConfig.model_validate(
        {
            "version": "1.1.0",
            "weights": {
                "foundational": 0.3,
                "strategy": 0.15,
                "coverage": 0.25,
                "proof": 0.15,
                "persona": 0.15,
            },
            "thresholds": {"go": 75, "conditional_min": 55},
            "penalties": {"critical_risk_penalty": 15, "proof_gap_penalty": 3},
        }
    )


def test_diff_configs_lists_changed_leaves_without_version():
    changes = diff_configs(DEFAULT_BID_READINESS_CONFIG, _tuned_config())

    paths = {change.path for change in changes}
    assert paths == {
        "weights.foundational",
        "weights.strategy",
        "thresholds.go",
        "thresholds.conditional_min",
        "penalties.critical_risk_penalty",
        "penalties.proof_gap_penalty",
    }
    penalty = next(item for item in changes if item.path == "penalties.critical_risk_penalty")
    assert penalty.from_value == 10
    assert penalty.to_value == 15
    assert penalty.description == "Penalties critical risk penalty: 10 -> 15"


def test_diff_of_identical_configs_is_empty():
    assert diff_configs(DEFAULT_BID_READINESS_CONFIG, BidReadinessConfig()) == []


def test_apply_changes_reproduces_target_config():
    target = _tuned_config()

    applied = apply_changes(
        DEFAULT_BID_READINESS_CONFIG, diff_configs(DEFAULT_BID_READINESS_CONFIG, target)
    )

    assert applied.weights == target.weights
    assert applied.thresholds == target.thresholds
    assert applied.penalties == target.penalties
    assert applied.version == DEFAULT_BID_READINESS_CONFIG.version
    assert DEFAULT_BID_READINESS_CONFIG.thresholds.go == 70


def test_apply_changes_skips_unknown_paths(caplog):
    changes = [
        ConfigChange(path="thresholds.go", from_value=70, to_value=72),
        ConfigChange(path="thresholds.unknown", from_value=None, to_value=1),
        ConfigChange(path="weights", from_value=None, to_value=1),
    ]

    with caplog.at_level(logging.WARNING):
        applied = apply_changes(DEFAULT_BID_READINESS_CONFIG, changes)

    assert applied.thresholds.go == 72
    assert "thresholds.unknown" in caplog.text
    assert "'weights'" in caplog.text


def test_generate_config_patch_maps_path_to_value():
    changes = [
        ConfigChange(path="thresholds.go", from_value=70, to_value=75),
        ConfigChange(path="penalties.proof_gap_penalty", from_value=2, to_value=3),
    ]

    assert generate_config_patch(changes) == {
        "thresholds.go": 75,
        "penalties.proof_gap_penalty": 3,
    }


def test_config_change_as_dict_uses_from_and_to_keys():
    change = ConfigChange(path="thresholds.go", from_value=70, to_value=75, description="GO")

    assert change.as_dict() == {
        "path": "thresholds.go",
        "from": 70,
        "to": 75,
        "description": "GO",
    }
