"""Configuration management for the Creative Cloud font extractor."""

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)

if TYPE_CHECKING:
    from ..fonts.paths import DefaultPathProvider

DEFAULT_CACHE_DIR_NAME = "r"
# Part of the printed mapping line, so not configurable
DEFAULT_TARGET_EXTENSION = ".otf"


class ExtractorConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CCFONTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )
    """Font extraction configuration."""

    dry_run: bool = Field(False, description="Skip directory creation and file copies")
    verbose: bool = Field(False, description="Enable diagnostic output")
    adobe_dir: Path | None = Field(None, description="Root searched for the font cache")
    output_dir: Path | None = Field(None, description="Destination for renamed fonts")
    cache_dir_name: str = Field(
        DEFAULT_CACHE_DIR_NAME, min_length=1, description="Name of the font cache directory"
    )
    fail_fast: bool = Field(False, description="Abort the run on the first per-file failure")

    @field_validator("cache_dir_name")
    @classmethod
    def validate_cache_dir_name(cls, v):
        """The cache directory is matched by name, not by path."""
        if any(sep in v for sep in ("/", "\\")):
            raise ValueError("cache_dir_name must be a single directory name")
        return v

    def with_defaults(self, provider: "DefaultPathProvider | None" = None) -> "ExtractorConfig":
        """Return a copy with unset directories filled from the path provider."""
        from ..fonts.paths import DefaultPathProvider

        provider = provider or DefaultPathProvider()
        updates = {}
        if self.adobe_dir is None:
            updates["adobe_dir"] = provider.adobe_dir()
        if self.output_dir is None:
            updates["output_dir"] = provider.output_dir()
        if not updates:
            return self
        return self.model_copy(update=updates)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "ExtractorConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "ExtractorConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path:
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(config_path)

    try:
        with config_path.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise InvalidYamlError(config_path, str(e)) from e

    if config_data is None:
        raise EmptyConfigFileError(config_path)
    if not isinstance(config_data, dict):
        raise InvalidYamlError(config_path, "top level must be a mapping")

    try:
        return config_class(**config_data)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
