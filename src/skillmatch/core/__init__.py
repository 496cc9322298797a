"""Core scoring and qualification components."""

from __future__ import annotations

from .qualification import (
    MatchedApplicant,
    OverallVerdict,
    PopulationResolver,
    QualificationEvaluator,
    RoleAnalysisResult,
    RoleStatus,
)
from .scoring import SimilarityConfig, SimilarityEngine, SkillScorer, basic_similarity

__all__ = [
    "SkillScorer",
    "SimilarityEngine",
    "SimilarityConfig",
    "basic_similarity",
    "QualificationEvaluator",
    "PopulationResolver",
    "RoleStatus",
    "RoleAnalysisResult",
    "MatchedApplicant",
    "OverallVerdict",
]
