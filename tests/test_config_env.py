"""
Unit tests for configuration environment variable support - Imperative style.

Tests pydantic-settings integration for environment variables.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from ccfont_extractor.core.config import ExtractorConfig


class TestEnvironmentVariableSupport:
    """Test environment variable support for the extractor config."""

    def test_extractor_config_from_env_vars(self, monkeypatch):
        """Test config loading from environment variables."""
        monkeypatch.setenv("CCFONTS_DRY_RUN", "true")
        monkeypatch.setenv("CCFONTS_VERBOSE", "1")
        monkeypatch.setenv("CCFONTS_ADOBE_DIR", "/data/Adobe/CoreSync")
        monkeypatch.setenv("CCFONTS_OUTPUT_DIR", "/data/fonts")
        monkeypatch.setenv("CCFONTS_FAIL_FAST", "yes")

        config = ExtractorConfig()

        assert config.dry_run is True
        assert config.verbose is True
        assert config.adobe_dir == Path("/data/Adobe/CoreSync")
        assert config.output_dir == Path("/data/fonts")
        assert config.fail_fast is True

    def test_env_vars_are_case_insensitive(self, monkeypatch):
        """Test lower-case variable names are accepted."""
        monkeypatch.setenv("ccfonts_cache_dir_name", "fonts")

        config = ExtractorConfig()

        assert config.cache_dir_name == "fonts"

    def test_init_arguments_override_env_vars(self, monkeypatch):
        """Test explicit arguments win over the environment."""
        monkeypatch.setenv("CCFONTS_CACHE_DIR_NAME", "c")

        config = ExtractorConfig(cache_dir_name="r")

        assert config.cache_dir_name == "r"

    def test_unrelated_env_vars_are_ignored(self, monkeypatch):
        """Test variables without the prefix do not leak in."""
        monkeypatch.setenv("DRY_RUN", "true")
        monkeypatch.setenv("CCFONTS_UNKNOWN_SETTING", "value")

        config = ExtractorConfig()

        assert config.dry_run is False

    def test_invalid_env_value(self, monkeypatch):
        """Test an unparseable boolean is a validation error."""
        monkeypatch.setenv("CCFONTS_DRY_RUN", "sometimes")

        with pytest.raises(ValidationError):
            ExtractorConfig()
