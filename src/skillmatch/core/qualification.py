"""Per-role admission decisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence

from ..schemas import ApplicantRecord
from .scoring import RoleWeights, SimilarityEngine, SkillScorer, basic_similarity

PopulationResolver = Callable[[str], Sequence[ApplicantRecord]]


class RoleStatus(str, Enum):
    PIONEER = "PIONEER ROLE (Direct Submission)"
    BASIC_MATCH = "BASIC MATCH (≥60% Similarity)"
    BASIC_FAILED = "FAILED (Need ≥60% Similarity for Basic Match)"
    QUALIFIED = "QUALIFIED (Skill Score ≥80% OR Similarity ≥80%)"
    FAILED = "FAILED (Need Skill Score ≥80% OR Similarity ≥80%)"


_ADMITTING_STATUSES = frozenset(
    {RoleStatus.PIONEER, RoleStatus.BASIC_MATCH, RoleStatus.QUALIFIED}
)


@dataclass(slots=True)
class MatchedApplicant:
    """Display view of the closest existing applicant."""

    name: str
    email: str
    skills: list[str]

    @classmethod
    def from_record(cls, record: ApplicantRecord) -> "MatchedApplicant":
        return cls(name=record.full_name, email=record.email, skills=list(record.skills))


@dataclass(slots=True)
class RoleAnalysisResult:
    """Outcome of evaluating one desired role."""

    role_name: str
    is_new_role: bool
    skill_score: float
    similarity_score: float
    status: RoleStatus
    matched_user: MatchedApplicant | None = None

    @property
    def can_submit(self) -> bool:
        return self.status in _ADMITTING_STATUSES

    def to_dict(self) -> dict[str, Any]:
        return {
            "role_name": self.role_name,
            "is_new_role": self.is_new_role,
            "skill_score": self.skill_score,
            "similarity_score": self.similarity_score,
            "status": self.status.value,
            "matched_user": _matched_dict(self.matched_user),
        }


@dataclass(slots=True)
class OverallVerdict:
    """Aggregate admission decision across all desired roles."""

    can_submit: bool
    role_analysis: list[RoleAnalysisResult] = field(default_factory=list)
    matched_user: MatchedApplicant | None = None


class QualificationEvaluator:
    """Decides per role whether an applicant may submit.

    New roles (no existing applicants) are admitted outright. Roles without a
    weight table fall back to unweighted skill overlap. Weighted roles admit on
    either the applicant's own skill score or similarity to an existing
    applicant.
    """

    WEIGHTED_THRESHOLD = 80.0
    BASIC_THRESHOLD = 60.0

    def __init__(
        self,
        *,
        scorer: SkillScorer | None = None,
        similarity: SimilarityEngine | None = None,
    ) -> None:
        self._scorer = scorer or SkillScorer()
        self._similarity = similarity or SimilarityEngine(scorer=self._scorer)

    def evaluate(
        self,
        *,
        skills: Iterable[str],
        desired_roles: Sequence[str],
        role_weights: Mapping[str, RoleWeights],
        resolve_population: PopulationResolver,
    ) -> OverallVerdict:
        skills = list(skills)
        role_analysis = [
            self.analyze_role(
                skills=skills,
                role=role,
                role_weights=role_weights,
                population=resolve_population(role),
            )
            for role in desired_roles
        ]
        # first match in request order, not the best-qualifying role
        matched_user = next(
            (result.matched_user for result in role_analysis if result.matched_user),
            None,
        )
        return OverallVerdict(
            can_submit=any(result.can_submit for result in role_analysis),
            role_analysis=role_analysis,
            matched_user=matched_user,
        )

    def analyze_role(
        self,
        *,
        skills: Iterable[str],
        role: str,
        role_weights: Mapping[str, RoleWeights],
        population: Sequence[ApplicantRecord],
    ) -> RoleAnalysisResult:
        if not population:
            return RoleAnalysisResult(
                role_name=role,
                is_new_role=True,
                skill_score=0.0,
                similarity_score=0.0,
                status=RoleStatus.PIONEER,
            )

        skills = set(skills)
        weights = role_weights.get(role)
        if weights is None:
            best_score, best_match = _best_match(
                population, lambda other: basic_similarity(skills, other)
            )
            status = (
                RoleStatus.BASIC_MATCH
                if best_score >= self.BASIC_THRESHOLD
                else RoleStatus.BASIC_FAILED
            )
            return RoleAnalysisResult(
                role_name=role,
                is_new_role=False,
                skill_score=0.0,
                similarity_score=best_score,
                status=status,
                matched_user=best_match,
            )

        skill_score = self._scorer.score(skills, weights)
        best_score, best_match = _best_match(
            population, lambda other: self._similarity.similarity(skills, other, weights)
        )
        qualifies = (
            skill_score >= self.WEIGHTED_THRESHOLD
            or best_score >= self.WEIGHTED_THRESHOLD
        )
        return RoleAnalysisResult(
            role_name=role,
            is_new_role=False,
            skill_score=skill_score,
            similarity_score=best_score,
            status=RoleStatus.QUALIFIED if qualifies else RoleStatus.FAILED,
            matched_user=best_match,
        )


def _best_match(
    population: Sequence[ApplicantRecord],
    measure: Callable[[list[str]], float],
) -> tuple[float, MatchedApplicant | None]:
    # strictly greater: the earliest applicant keeps a tie, and zero never matches
    best_score = 0.0
    best_record: ApplicantRecord | None = None
    for record in population:
        current = measure(record.skills)
        if current > best_score:
            best_score = current
            best_record = record
    if best_record is None:
        return best_score, None
    return best_score, MatchedApplicant.from_record(best_record)


def _matched_dict(matched: MatchedApplicant | None) -> dict[str, Any] | None:
    if matched is None:
        return None
    return {"name": matched.name, "email": matched.email, "skills": list(matched.skills)}
