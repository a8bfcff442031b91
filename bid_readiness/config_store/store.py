from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bid_readiness.config import load_settings

from .models import DEFAULT_BID_READINESS_CONFIG, BidReadinessConfig
from .validation import validate_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "bid_readiness.yaml"


class ConfigLoadError(ValueError):
    """Raised when a bid readiness config file is missing or invalid."""


def load_bid_readiness_config(path: str | Path) -> BidReadinessConfig:
    """Strictly load and validate a config file, raising ``ConfigLoadError``."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigLoadError(f"bid readiness config not found: {config_path}")
    try:
        payload = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"invalid YAML in bid readiness config: {config_path}") from exc

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigLoadError(f"bid readiness config root must be object: {config_path}")

    config = _parse_config(payload, config_path)
    errors = validate_config(config)
    if errors:
        raise ConfigLoadError(f"invalid bid readiness config {config_path}: " + "; ".join(errors))
    return config


def get_bid_readiness_config(config_path: str | Path | None = None) -> BidReadinessConfig:
    """Return the active config, falling back to the baseline on any problem.

    Resolution order is the explicit path, then ``BID_READINESS_CONFIG_PATH``,
    then the bundled ``config/bid_readiness.yaml``.
    """
    selected_path, explicit = _resolve_config_path(config_path)
    if selected_path is None:
        return DEFAULT_BID_READINESS_CONFIG
    if not selected_path.exists():
        if explicit:
            logger.warning("Bid readiness config missing at %s, use defaults", selected_path)
        else:
            logger.debug("No bundled bid readiness config at %s, use defaults", selected_path)
        return DEFAULT_BID_READINESS_CONFIG

    try:
        return load_bid_readiness_config(selected_path)
    except ConfigLoadError as exc:
        logger.warning("%s, use defaults", exc)
        return DEFAULT_BID_READINESS_CONFIG


def _resolve_config_path(config_path: str | Path | None) -> tuple[Path | None, bool]:
    if config_path is not None:
        return Path(config_path), True
    env_path = load_settings().get("BID_READINESS_CONFIG_PATH")
    if env_path:
        return Path(env_path), True
    return DEFAULT_CONFIG_PATH, False


def _parse_config(payload: dict[str, Any], path: Path) -> BidReadinessConfig:
    try:
        return BidReadinessConfig.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ConfigLoadError(f"invalid bid readiness config fields in {path}: {fields}") from exc
