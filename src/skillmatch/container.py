"""Dependency injection container for the matching service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .config import DEFAULT_WEIGHTS_PATH, load_role_weights
from .core import QualificationEvaluator, SimilarityConfig, SimilarityEngine, SkillScorer
from .service import MatchingService
from .storage import DEFAULT_STORE_PATH, ApplicantStore, ExportWriter


class MatchingContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    skill_scorer = providers.Singleton(SkillScorer)

    similarity_config = providers.Singleton(SimilarityConfig)

    similarity_engine = providers.Singleton(
        SimilarityEngine,
        scorer=skill_scorer,
        config=similarity_config,
    )

    evaluator = providers.Singleton(
        QualificationEvaluator,
        scorer=skill_scorer,
        similarity=similarity_engine,
    )

    role_weights = providers.Singleton(load_role_weights, path=config.weights.path)

    store = providers.Singleton(ApplicantStore, path=config.storage.path)

    writer = providers.Singleton(ExportWriter)

    service = providers.Factory(
        MatchingService,
        evaluator=evaluator,
        store=store,
        role_weights=role_weights,
        writer=writer,
    )


def create_container(*, settings: dict | None = None) -> MatchingContainer:
    """Instantiate container with optional overrides."""

    container = MatchingContainer()
    container.config.from_dict(
        {
            "storage": {"path": str(DEFAULT_STORE_PATH)},
            "weights": {"path": str(DEFAULT_WEIGHTS_PATH)},
        }
    )

    if not settings:
        return container

    for section in ("storage", "weights"):
        path = (settings.get(section) or {}).get("path")
        if path:
            container.config.from_dict({section: {"path": str(path)}})

    similarity_settings = settings.get("similarity") or {}
    if similarity_settings:
        container.similarity_config.override(
            providers.Singleton(SimilarityConfig, **similarity_settings)
        )

    return container
