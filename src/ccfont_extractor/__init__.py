"""Creative Cloud Font Extractor
=============================

Copies fonts synced by Adobe Creative Cloud out of their obfuscated cache and
names each file after the family declared inside the font, so the fonts can be
used in other programs.
"""

__version__ = "1.0.0"

from .core.config import ExtractorConfig
from .core.exceptions import (
    CacheDirectoryNotFoundError,
    ExtractorError,
    FileCopyError,
    FontParseError,
    OutputDirectoryCreateError,
)
from .core.models import ExtractionResult, FontFileRecord, FontFileStatus
from .fonts import DefaultPathProvider, FontExtractor, read_family_name

__all__ = [
    "CacheDirectoryNotFoundError",
    "DefaultPathProvider",
    "ExtractionResult",
    "ExtractorConfig",
    "ExtractorError",
    "FileCopyError",
    "FontExtractor",
    "FontFileRecord",
    "FontFileStatus",
    "FontParseError",
    "OutputDirectoryCreateError",
    "read_family_name",
]
