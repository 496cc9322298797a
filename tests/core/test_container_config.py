from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from skillmatch.container import create_container
from skillmatch.schemas.config import AppConfig, load_config
from skillmatch.service import MatchingService


def test_create_container_with_overrides(tmp_path: Path):
    weights_path = tmp_path / "weights.json"
    weights_path.write_text(json.dumps({"frontend": {"skills": {"js": 1}}}), encoding="utf-8")
    store_path = tmp_path / "applicants.jsonl"

    container = create_container(
        settings={
            "similarity": {"skill_weight": 0.7, "score_weight": 0.3},
            "storage": {"path": str(store_path)},
            "weights": {"path": str(weights_path)},
        }
    )

    engine = container.similarity_engine()
    store = container.store()

    assert engine._config.skill_weight == 0.7
    assert engine._config.score_weight == 0.3
    assert store.path == store_path
    assert container.role_weights() == {"frontend": {"js": 1.0}}
    assert isinstance(container.service(), MatchingService)
    assert container.evaluator()._similarity is engine


def test_create_container_defaults():
    container = create_container()

    engine = container.similarity_engine()

    assert engine._config.skill_weight == 0.6
    assert engine._config.score_weight == 0.4
    assert container.store().path == Path("data") / "applicants.jsonl"


def test_load_config_validation():
    data = {
        "similarity": {"skill_weight": 0.5},
        "storage": {"path": "var/applicants.jsonl"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings == {
        "similarity": {"skill_weight": 0.5},
        "storage": {"path": "var/applicants.jsonl"},
    }


def test_load_config_rejects_bad_types():
    with pytest.raises(ValidationError):
        load_config({"similarity": {"skill_weight": "heavy"}})
