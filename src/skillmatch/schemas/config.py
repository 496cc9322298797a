"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SimilaritySettings(BaseModel):
    skill_weight: float | None = None
    score_weight: float | None = None


class PathSettings(BaseModel):
    path: str | None = None


class AppConfig(BaseModel):
    similarity: SimilaritySettings = Field(default_factory=SimilaritySettings)
    storage: PathSettings = Field(default_factory=PathSettings)
    weights: PathSettings = Field(default_factory=PathSettings)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        for section, values in self.model_dump(exclude_none=True).items():
            if values:
                settings[section] = values
        return settings


def load_config(raw: Any) -> AppConfig:
    return AppConfig.model_validate(raw)
