from __future__ import annotations

import json
from pathlib import Path

from skillmatch.config import load_role_weights, load_settings, parse_role_weights


def test_load_role_weights_flattens_skill_tables(tmp_path: Path):
    path = tmp_path / "weights.json"
    path.write_text(
        json.dumps(
            {
                "frontend": {"skills": {"js": 60, "react": 40}},
                "data": {"skills": {"python": 2.5, "sql": 1}},
            }
        ),
        encoding="utf-8",
    )

    table = load_role_weights(path)

    assert table == {
        "frontend": {"js": 60.0, "react": 40.0},
        "data": {"python": 2.5, "sql": 1.0},
    }


def test_missing_weights_file_yields_empty_table(tmp_path: Path):
    assert load_role_weights(tmp_path / "missing.json") == {}


def test_invalid_json_yields_empty_table(tmp_path: Path):
    path = tmp_path / "weights.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_role_weights(path) == {}


def test_non_mapping_document_yields_empty_table():
    assert parse_role_weights(["frontend"]) == {}


def test_malformed_role_entries_are_skipped():
    table = parse_role_weights(
        {
            "frontend": {"skills": {"js": 1}},
            "backend": {"weights": {"go": 1}},
            "data": {"skills": {"python": "high"}},
            "ops": {"skills": {"bash": True}},
            "design": "figma",
        }
    )

    assert table == {"frontend": {"js": 1.0}}


def test_negative_and_zero_weights_are_accepted_verbatim():
    table = parse_role_weights({"qa": {"skills": {"selenium": -5, "pytest": 0}}})

    assert table == {"qa": {"selenium": -5.0, "pytest": 0.0}}


def test_load_settings_reads_yaml(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("similarity:\n  skill_weight: 0.7\n", encoding="utf-8")

    assert load_settings(path) == {"similarity": {"skill_weight": 0.7}}


def test_load_settings_empty_file(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(path) == {}


def test_undecodable_weights_file_yields_empty_table(tmp_path: Path):
    path = tmp_path / "weights.json"
    path.write_bytes(b'{"r": {"skills": {"\xff": 1}}}')

    assert load_role_weights(path) == {}
