"""Font Extraction Module
=======================

This module locates the Creative Cloud font cache and copies its fonts out
under their real family names.
"""

from .extractor import (
    ConsoleMappingCallback,
    ExtractionCallback,
    FontExtractor,
    copy_font,
    destination_for,
    list_font_files,
    prepare_output_directory,
)
from .locator import find_cache_directories, find_cache_directory
from .paths import DefaultPathProvider
from .utils import read_family_name, sanitize_file_stem, validate_font_file

__all__ = [
    "ConsoleMappingCallback",
    "DefaultPathProvider",
    "ExtractionCallback",
    "FontExtractor",
    "copy_font",
    "destination_for",
    "find_cache_directories",
    "find_cache_directory",
    "list_font_files",
    "prepare_output_directory",
    "read_family_name",
    "sanitize_file_stem",
    "validate_font_file",
]
