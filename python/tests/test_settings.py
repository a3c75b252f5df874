"""Settings file loading."""

from __future__ import annotations

import json
import logging

import pytest

from backend.engine.gameservice import PuzzleService
from backend.settings import ENV_VAR, Settings, load_settings, save_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.algorithm == "astar"
    assert settings.shuffle_steps == 100
    assert settings.dfs_max_depth == 60
    assert settings.log_level == "WARNING"


def test_missing_file_gives_defaults(isolated_config) -> None:
    assert load_settings() == Settings()
    assert load_settings(isolated_config / "nope.json") == Settings()


def test_file_overrides_defaults(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"algorithm": "bfs", "shuffle_steps": 12}))

    settings = load_settings(path)

    assert settings.algorithm == "bfs"
    assert settings.shuffle_steps == 12
    assert settings.dfs_max_depth == 60


def test_unknown_keys_are_ignored_with_warning(tmp_path, caplog) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"algorithm": "dfs", "colour": "blue"}))

    with caplog.at_level(logging.WARNING, logger="backend.settings"):
        settings = load_settings(path)

    assert settings.algorithm == "dfs"
    assert "colour" in caplog.text


def test_invalid_json_falls_back(tmp_path, caplog) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    with caplog.at_level(logging.WARNING, logger="backend.settings"):
        assert load_settings(path) == Settings()
    assert "Failed to load settings" in caplog.text


def test_non_object_falls_back(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[1, 2, 3]")
    assert load_settings(path) == Settings()


def test_env_var_names_the_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"dfs_max_depth": 20}))
    monkeypatch.setenv(ENV_VAR, str(path))

    assert load_settings().dfs_max_depth == 20


def test_config_json_in_working_directory(isolated_config) -> None:
    (isolated_config / "config.json").write_text(json.dumps({"log_level": "INFO"}))
    assert load_settings().log_level == "INFO"


def test_save_then_load(tmp_path) -> None:
    path = tmp_path / "saved.json"
    original = Settings(algorithm="bfs", shuffle_steps=5, playback_delay=0.0)

    save_settings(original, path)

    assert load_settings(path) == original


@pytest.mark.parametrize(
    "key, value",
    [
        ("dfs_max_depth", "10"),
        ("dfs_max_depth", -1),
        ("shuffle_steps", "80"),
        ("shuffle_steps", True),
        ("log_level", "LOUD"),
        ("log_level", 10),
        ("algorithm", "greedy"),
        ("playback_delay", -0.5),
    ],
)
def test_bad_values_keep_their_default(tmp_path, caplog, key: str, value) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({key: value}))

    with caplog.at_level(logging.WARNING, logger="backend.settings"):
        settings = load_settings(path)

    assert getattr(settings, key) == getattr(Settings(), key)
    assert f"Invalid value for setting {key}" in caplog.text


def test_values_are_normalised(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"algorithm": " BFS ", "log_level": "debug", "playback_delay": 1}))

    settings = load_settings(path)

    assert settings.algorithm == "bfs"
    assert settings.log_level == "DEBUG"
    assert settings.playback_delay == 1.0


def test_string_depth_from_file_cannot_break_dfs(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"dfs_max_depth": "10"}))

    report = PuzzleService(load_settings(path)).solve([1, 2, 3, 4, 5, 6, 7, 0, 8], "dfs")

    assert report.moves == ["R"]


def test_one_bad_value_does_not_discard_the_rest(tmp_path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"dfs_max_depth": "deep", "shuffle_steps": 12}))

    settings = load_settings(path)

    assert settings.dfs_max_depth == 60
    assert settings.shuffle_steps == 12
