"""Custom exceptions for the Creative Cloud font extractor."""

from pathlib import Path
from typing import Any


class ExtractorError(Exception):
    """Base exception for all extractor errors."""

    def __init__(self, message: str, details: Any | None = None):
        super().__init__(message)
        self.details = details


class ConfigurationError(ExtractorError):
    """Exception raised for configuration errors."""


class CacheDirectoryNotFoundError(ExtractorError):
    """Exception raised when the font cache directory cannot be located."""

    def __init__(self, root: str | Path, name: str):
        super().__init__(
            f"No '{name}' font cache directory found under {root}",
            details={"root": str(root), "name": name},
        )
        self.root = Path(root)
        self.name = name


class OutputDirectoryCreateError(ExtractorError):
    """Exception raised when the output directory cannot be prepared."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Cannot create output directory {path}: {reason}")
        self.path = Path(path)


class FontFileError(ExtractorError):
    """Base exception for errors scoped to a single font file."""

    def __init__(self, message: str, path: str | Path):
        super().__init__(message, details={"path": str(path)})
        self.path = Path(path)


class FontParseError(FontFileError):
    """Exception raised when a file cannot be read as a font."""

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"Cannot read font {Path(path).name}: {reason}", path)
        self.reason = reason


class FileCopyError(FontFileError):
    """Exception raised when a font cannot be written to its destination."""

    def __init__(self, source: str | Path, destination: str | Path, reason: str):
        super().__init__(f"Cannot copy {Path(source).name} to {destination}: {reason}", source)
        self.destination = Path(destination)
        self.reason = reason


class InvalidStateTransitionError(ExtractorError):
    """Exception raised when a font record moves to a state it cannot reach."""

    def __init__(self, current: str, target: str):
        super().__init__(f"Invalid font record transition: {current} -> {target}")


class ConfigFileNotFoundError(ConfigurationError):
    """Exception raised when configuration file is not found."""

    def __init__(self, config_path: str | Path):
        super().__init__(f"Configuration file not found: {config_path}")


class EmptyConfigFileError(ConfigurationError):
    """Exception raised when configuration file is empty."""

    def __init__(self, config_path: str | Path):
        super().__init__(f"Empty configuration file: {config_path}")


class InvalidYamlError(ConfigurationError):
    """Exception raised for invalid YAML in configuration file."""

    def __init__(self, config_path: str | Path, error: str):
        super().__init__(f"Invalid YAML in {config_path}: {error}")


class ConfigLoadError(ConfigurationError):
    """Exception raised when configuration loading fails."""

    def __init__(self, error: str):
        super().__init__(f"Failed to load configuration: {error}")
