"""Tests for jjnamer.config module."""

import logging

import pytest
import yaml

from jjnamer import global_config
from jjnamer.config import (
    DEFAULT_MODEL,
    DEFAULT_REVISION,
    NamerConfig,
    config_keys,
    load_config,
    validate_value,
)
from jjnamer.global_config import GlobalConfigError


def _write_config(values):
    global_config.save_global_config(values)


class TestNamerConfig:
    """Tests for the NamerConfig model."""

    def test_defaults(self):
        """Test built-in defaults."""
        config = NamerConfig()

        assert config.model == "llama3.2"
        assert config.host == "http://localhost:11434"
        assert config.timeout == 120.0
        assert config.top_k == 10
        assert config.revision == "trunk()..@"
        assert config.prefix is None
        assert config.remote is None
        assert config.allow_new is True
        assert config.full_descriptions is False
        assert config.jj_executable == "jj"

    def test_timeout_must_be_positive(self):
        """Test that a zero timeout is rejected."""
        with pytest.raises(ValueError):
            NamerConfig(timeout=0)

    def test_blank_model_rejected(self):
        """Test that an empty model name is rejected."""
        with pytest.raises(ValueError):
            NamerConfig(model="  ")

    def test_blank_prefix_is_none(self):
        """Test that an empty prefix means no prefix."""
        assert NamerConfig(prefix="").prefix is None

    def test_string_values_are_coerced(self):
        """Test values as they arrive from the environment."""
        config = NamerConfig(timeout="30", allow_new="false")

        assert config.timeout == 30.0
        assert config.allow_new is False


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_sources(self):
        """Test that defaults apply with no file, env or overrides."""
        config = load_config()

        assert config.model == DEFAULT_MODEL
        assert config.revision == DEFAULT_REVISION

    def test_file_values(self):
        """Test values from ~/.jjnamer/config.yaml."""
        _write_config({"model": "qwen2.5", "prefix": "alice", "timeout": 30})

        config = load_config()

        assert config.model == "qwen2.5"
        assert config.prefix == "alice"
        assert config.timeout == 30.0

    def test_env_overrides_file(self, monkeypatch):
        """Test that environment variables win over the file."""
        _write_config({"model": "qwen2.5", "host": "http://file:11434"})
        monkeypatch.setenv("JJNAMER_MODEL", "mistral")
        monkeypatch.setenv("OLLAMA_HOST", "env-host:11434")
        monkeypatch.setenv("JJNAMER_TIMEOUT", "15")

        config = load_config()

        assert config.model == "mistral"
        assert config.host == "env-host:11434"
        assert config.timeout == 15.0

    def test_overrides_win(self, monkeypatch):
        """Test that CLI overrides beat env and file."""
        _write_config({"prefix": "file-prefix"})
        monkeypatch.setenv("JJNAMER_PREFIX", "env-prefix")

        config = load_config(prefix="cli-prefix", revision="@-")

        assert config.prefix == "cli-prefix"
        assert config.revision == "@-"

    def test_none_overrides_are_ignored(self):
        """Test that options not given on the command line keep lower values."""
        _write_config({"model": "qwen2.5"})

        config = load_config(model=None, timeout=None)

        assert config.model == "qwen2.5"

    def test_unknown_file_keys_are_ignored(self, caplog, monkeypatch):
        """Test that stray keys only produce a warning."""
        _write_config({"model": "qwen2.5", "provider": "google"})
        monkeypatch.setattr(logging.getLogger("jjnamer"), "propagate", True)

        with caplog.at_level(logging.WARNING, logger="jjnamer"):
            config = load_config()

        assert config.model == "qwen2.5"
        assert "provider" in caplog.text

    def test_invalid_value_raises(self):
        """Test that an invalid file value is a configuration error."""
        _write_config({"timeout": "soon"})

        with pytest.raises(GlobalConfigError) as exc_info:
            load_config()

        assert "Invalid configuration" in str(exc_info.value)

    def test_loads_dotenv(self, mocker):
        """Test that .env files are honoured."""
        load_dotenv = mocker.patch("jjnamer.config.load_dotenv")

        load_config()

        load_dotenv.assert_called_once()


class TestValidateValue:
    """Tests for validate_value function."""

    def test_coerces(self):
        """Test coercion of CLI strings."""
        assert validate_value("timeout", "45") == 45.0
        assert validate_value("full_descriptions", "yes") is True
        assert validate_value("model", "qwen2.5") == "qwen2.5"

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(GlobalConfigError) as exc_info:
            validate_value("provider", "google")

        assert "Unknown config key" in str(exc_info.value)

    def test_invalid_value(self):
        """Test that bad values are rejected."""
        with pytest.raises(GlobalConfigError):
            validate_value("top_k", "zero")

    def test_config_keys(self):
        """Test the list of settable keys."""
        keys = config_keys()

        assert "model" in keys
        assert "prefix" in keys
        assert "revision" in keys


class TestConfigFileRoundTrip:
    """Tests that saved values are plain YAML."""

    def test_yaml_contents(self, isolated_config):
        """Test the file written by save_global_config."""
        _write_config({"model": "qwen2.5", "timeout": 30.0})

        with open(isolated_config / "config.yaml") as f:
            assert yaml.safe_load(f) == {"model": "qwen2.5", "timeout": 30.0}
