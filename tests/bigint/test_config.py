"""Tests for src/bigint/config.py — YAML defaults and environment overrides."""

import logging

import pytest

from src.bigint.config import (
    ENV_KARATSUBA_THRESHOLD,
    ENV_MAX_TEXT_LENGTH,
    EngineConfig,
    default_config_path,
    get_config,
    load_config,
    reset_config_cache,
)
from src.bigint.errors import ConfigError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv(ENV_KARATSUBA_THRESHOLD, raising=False)
    monkeypatch.delenv(ENV_MAX_TEXT_LENGTH, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


class TestShippedDefaults:
    def test_yaml_exists(self):
        assert default_config_path().is_file()

    def test_values(self):
        cfg = load_config()
        assert cfg == EngineConfig(karatsuba_threshold=48, max_text_length=1_000_000)

    def test_get_config_is_cached(self):
        assert get_config() is get_config()


class TestEnvOverrides:
    def test_threshold_override(self, monkeypatch):
        monkeypatch.setenv(ENV_KARATSUBA_THRESHOLD, "16")
        assert load_config().karatsuba_threshold == 16

    def test_threshold_clamped_low(self, monkeypatch, caplog):
        monkeypatch.setenv(ENV_KARATSUBA_THRESHOLD, "1")
        with caplog.at_level(logging.WARNING, logger="src.bigint.config"):
            assert load_config().karatsuba_threshold == 2
        assert "clamped" in caplog.text

    def test_threshold_clamped_high(self, monkeypatch):
        monkeypatch.setenv(ENV_KARATSUBA_THRESHOLD, "999999")
        assert load_config().karatsuba_threshold == 4096

    def test_garbage_ignored(self, monkeypatch, caplog):
        monkeypatch.setenv(ENV_KARATSUBA_THRESHOLD, "lots")
        with caplog.at_level(logging.WARNING, logger="src.bigint.config"):
            assert load_config().karatsuba_threshold == 48
        assert "not an integer" in caplog.text

    def test_blank_ignored(self, monkeypatch):
        monkeypatch.setenv(ENV_MAX_TEXT_LENGTH, "   ")
        assert load_config().max_text_length == 1_000_000

    def test_max_text_length_override(self, monkeypatch):
        monkeypatch.setenv(ENV_MAX_TEXT_LENGTH, "64")
        assert load_config().max_text_length == 64


class TestMalformedFiles:
    def test_unknown_key(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("karatsuba_threshold: 32\nradix: 16\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="unknown keys: radix"):
            load_config(p)

    def test_non_int_value(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("karatsuba_threshold: fast\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be an int"):
            load_config(p)

    def test_out_of_bounds_value(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("karatsuba_threshold: 1\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="karatsuba_threshold"):
            load_config(p)

    def test_not_a_mapping(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(p)

    def test_invalid_yaml(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("karatsuba_threshold: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(p)

    def test_empty_file_uses_dataclass_defaults(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("", encoding="utf-8")
        assert load_config(p) == EngineConfig()

    def test_partial_file(self, tmp_path):
        p = tmp_path / "engine.yaml"
        p.write_text("karatsuba_threshold: 20\n", encoding="utf-8")
        assert load_config(p) == EngineConfig(karatsuba_threshold=20)
