"""Configuration management utilities."""

from __future__ import annotations

import json
from numbers import Real
from pathlib import Path
from typing import Any

import structlog
import yaml

DEFAULT_WEIGHTS_PATH = Path("data") / "role_skill_weights.json"

RoleWeightTable = dict[str, dict[str, float]]


def load_settings(path: str | Path) -> dict[str, Any]:
    """Load a YAML settings file; an empty file yields an empty mapping."""
    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_role_weights(path: str | Path = DEFAULT_WEIGHTS_PATH) -> RoleWeightTable:
    """Load the role -> {skill: weight} table.

    A missing or unreadable file leaves every role unweighted instead of
    failing, so the caller always gets a table back.
    """
    logger = structlog.get_logger(__name__)
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("weights.load_failed", path=str(path), error=str(exc))
        return {}
    return parse_role_weights(raw)


def parse_role_weights(raw: Any) -> RoleWeightTable:
    """Convert ``{role: {"skills": {skill: number}}}`` into a flat weight table."""
    logger = structlog.get_logger(__name__)
    if not isinstance(raw, dict):
        logger.warning("weights.invalid_shape", found=type(raw).__name__)
        return {}

    table: RoleWeightTable = {}
    for role, entry in raw.items():
        skills = entry.get("skills") if isinstance(entry, dict) else None
        if not isinstance(skills, dict) or not all(
            _is_number(weight) for weight in skills.values()
        ):
            logger.warning("weights.role_skipped", role=role)
            continue
        table[str(role)] = {str(skill): float(weight) for skill, weight in skills.items()}
    return table


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


__all__ = [
    "DEFAULT_WEIGHTS_PATH",
    "RoleWeightTable",
    "load_role_weights",
    "load_settings",
    "parse_role_weights",
]
