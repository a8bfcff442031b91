from __future__ import annotations

import logging
from typing import Any, Iterable

from .models import BidReadinessConfig, ConfigChange

logger = logging.getLogger(__name__)

_SKIPPED_PATHS = {"version"}


def diff_configs(base: BidReadinessConfig, target: BidReadinessConfig) -> list[ConfigChange]:
    """List every leaf value that differs between two configurations."""
    changes: list[ConfigChange] = []
    base_leaves = _flatten(base.model_dump())
    target_leaves = _flatten(target.model_dump())
    for path, from_value in base_leaves.items():
        if path in _SKIPPED_PATHS:
            continue
        to_value = target_leaves.get(path)
        if from_value == to_value:
            continue
        changes.append(
            ConfigChange(
                path=path,
                from_value=from_value,
                to_value=to_value,
                description=(
                    f"{_describe_path(path)}: {_format_value(from_value)} -> "
                    f"{_format_value(to_value)}"
                ),
            )
        )
    return changes


def apply_changes(
    base: BidReadinessConfig, changes: Iterable[ConfigChange]
) -> BidReadinessConfig:
    """Return a new configuration with ``changes`` applied by path.

    Unknown paths are logged and skipped; ``base`` is never modified.
    """
    payload = base.model_dump()
    for change in changes:
        if not _set_path(payload, change.path, change.to_value):
            logger.warning("Skip config change for unknown path '%s'", change.path)
    return BidReadinessConfig.model_validate(payload)


def generate_config_patch(changes: Iterable[ConfigChange]) -> dict[str, Any]:
    return {change.path: change.to_value for change in changes}


def _flatten(payload: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    leaves: dict[str, Any] = {}
    for key, value in payload.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            leaves.update(_flatten(value, path))
        else:
            leaves[path] = value
    return leaves


def _set_path(payload: dict[str, Any], path: str, value: Any) -> bool:
    parts = path.split(".")
    node = payload
    for part in parts[:-1]:
        child = node.get(part)
        if not isinstance(child, dict):
            return False
        node = child
    leaf = parts[-1]
    if leaf not in node or isinstance(node[leaf], dict):
        return False
    node[leaf] = value
    return True


def _describe_path(path: str) -> str:
    return " ".join(part.replace("_", " ") for part in path.split(".")).capitalize()


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
