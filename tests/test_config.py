"""Tests for configuration loading."""

import pytest

from graphql_query_normalizer import config


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load(str(tmp_path / "missing.yaml"))
    assert cfg == config.Config()
    assert cfg.max_depth == config.DEFAULT_MAX_DEPTH
    assert cfg.max_tokens is None
    assert not cfg.no_location
    assert not cfg.legacy_mutation_check


def test_values_override_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("max_depth: 5\nlegacy_mutation_check: true\nlog_level: debug\n")
    cfg = config.load(str(path))
    assert cfg.max_depth == 5
    assert cfg.legacy_mutation_check
    assert cfg.log_level == "DEBUG"
    assert cfg.max_tokens is None


def test_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert config.load(str(path)) == config.Config()


def test_example_config_loads(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    written = config.create_example_config(str(path))
    assert written == str(path)
    cfg = config.load(written)
    assert cfg.max_tokens == 10000
    assert cfg.max_depth == config.DEFAULT_MAX_DEPTH


def test_unknown_log_level(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_level: loud\n")
    with pytest.raises(ValueError, match="Unknown log_level 'LOUD'"):
        config.load(str(path))
