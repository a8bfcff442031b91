from .diff import apply_changes, diff_configs, generate_config_patch
from .models import (
    DEFAULT_BID_READINESS_CONFIG,
    BidReadinessConfig,
    BidReadinessPenalties,
    BidReadinessThresholds,
    BidReadinessWeights,
    ConfigChange,
    PartialDataPolicy,
    RiskThresholds,
)
from .store import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    get_bid_readiness_config,
    load_bid_readiness_config,
)
from .validation import validate_config, validate_thresholds, validate_weights

__all__ = [
    "BidReadinessConfig",
    "BidReadinessPenalties",
    "BidReadinessThresholds",
    "BidReadinessWeights",
    "ConfigChange",
    "ConfigLoadError",
    "DEFAULT_BID_READINESS_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "PartialDataPolicy",
    "RiskThresholds",
    "apply_changes",
    "diff_configs",
    "generate_config_patch",
    "get_bid_readiness_config",
    "load_bid_readiness_config",
    "validate_config",
    "validate_thresholds",
    "validate_weights",
]
