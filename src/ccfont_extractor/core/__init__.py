"""Core components for Creative Cloud font extraction."""

from .config import ExtractorConfig
from .exceptions import (
    CacheDirectoryNotFoundError,
    ConfigurationError,
    ExtractorError,
    FileCopyError,
    FontFileError,
    FontParseError,
    OutputDirectoryCreateError,
)
from .models import ExtractionResult, FontFileRecord, FontFileStatus

__all__ = [
    "CacheDirectoryNotFoundError",
    "ConfigurationError",
    "ExtractionResult",
    "ExtractorConfig",
    "ExtractorError",
    "FileCopyError",
    "FontFileError",
    "FontFileRecord",
    "FontFileStatus",
    "FontParseError",
    "OutputDirectoryCreateError",
]
