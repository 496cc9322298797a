from __future__ import annotations

import pytest

from skillmatch.core import SimilarityConfig, SimilarityEngine, basic_similarity


def test_identical_applicants_fully_match():
    engine = SimilarityEngine()
    skills = {"python", "sql"}

    result = engine.similarity(skills, skills, {"python": 50, "sql": 50})

    assert result == pytest.approx(100.0)


@pytest.mark.parametrize(
    ("skills_a", "skills_b", "weights"),
    [
        ({"js", "react"}, {"js"}, {"js": 60, "react": 40}),
        ({"go"}, {"python", "sql"}, {"python": 2, "sql": 1, "go": 5}),
        (set(), {"python"}, {"python": 1}),
        ({"a", "b", "c"}, {"c", "d"}, {}),
    ],
)
def test_similarity_is_symmetric(skills_a, skills_b, weights):
    engine = SimilarityEngine()

    assert engine.similarity(skills_a, skills_b, weights) == engine.similarity(
        skills_b, skills_a, weights
    )


def test_similarity_blends_overlap_and_score_closeness():
    engine = SimilarityEngine()

    # overlap on js only (60), scores 100 vs 60 -> closeness 60
    result = engine.similarity({"js", "react"}, {"js"}, {"js": 60, "react": 40})

    assert result == pytest.approx(0.6 * 60 + 0.4 * 60)


def test_shared_skills_outside_role_do_not_count():
    engine = SimilarityEngine()

    result = engine.similarity({"excel", "python"}, {"excel"}, {"python": 1})

    # no weighted overlap; scores 100 vs 0 -> closeness 0
    assert result == pytest.approx(0.0)


def test_empty_weight_table_only_counts_score_closeness():
    engine = SimilarityEngine()

    result = engine.similarity({"a"}, {"b"}, {})

    assert result == pytest.approx(40.0)


def test_similarity_blend_is_configurable():
    engine = SimilarityEngine(config=SimilarityConfig(skill_weight=1.0, score_weight=0.0))

    result = engine.similarity({"js", "react"}, {"js"}, {"js": 60, "react": 40})

    assert result == pytest.approx(60.0)


def test_basic_similarity_divides_by_larger_set():
    assert basic_similarity({"a", "b", "c"}, {"a", "b"}) == pytest.approx(200 / 3)


def test_basic_similarity_of_empty_sets_is_zero():
    assert basic_similarity(set(), set()) == 0.0
