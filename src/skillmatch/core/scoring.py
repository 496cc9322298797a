"""Weighted skill scoring and applicant similarity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

RoleWeights = Mapping[str, float]


class SkillScorer:
    """Score an applicant's coverage of a role's weighted skills."""

    def score(self, applicant_skills: Iterable[str], role_weights: RoleWeights) -> float:
        """Return the share of total role weight the applicant holds, as a percentage.

        Weights are used verbatim; an empty or zero-sum table scores 0.
        """
        owned = set(applicant_skills)
        total_weight = 0.0
        held_weight = 0.0
        for skill, weight in role_weights.items():
            total_weight += weight
            if skill in owned:
                held_weight += weight
        return (held_weight / total_weight) * 100 if total_weight > 0 else 0.0


@dataclass
class SimilarityConfig:
    """Blend between shared-skill overlap and skill-score closeness."""

    skill_weight: float = 0.6
    score_weight: float = 0.4


class SimilarityEngine:
    """Compare two applicants against the same role weight table."""

    def __init__(
        self,
        *,
        scorer: SkillScorer | None = None,
        config: SimilarityConfig | None = None,
    ) -> None:
        self._scorer = scorer or SkillScorer()
        self._config = config or SimilarityConfig()

    def similarity(
        self,
        skills_a: Iterable[str],
        skills_b: Iterable[str],
        role_weights: RoleWeights,
    ) -> float:
        skills_a = set(skills_a)
        skills_b = set(skills_b)
        score_a = self._scorer.score(skills_a, role_weights)
        score_b = self._scorer.score(skills_b, role_weights)

        # only role skills held by both applicants count towards overlap
        skill_similarity = self._scorer.score(skills_a & skills_b, role_weights)
        score_component = max(0.0, 100 - abs(score_a - score_b))

        return (
            skill_similarity * self._config.skill_weight
            + score_component * self._config.score_weight
        )


def basic_similarity(skills_a: Iterable[str], skills_b: Iterable[str]) -> float:
    """Unweighted overlap: shared skills over the larger skill set, as a percentage."""
    skills_a = set(skills_a)
    skills_b = set(skills_b)
    largest = max(len(skills_a), len(skills_b))
    if largest == 0:
        return 0.0
    return (len(skills_a & skills_b) / largest) * 100
