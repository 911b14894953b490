"""
Font Utilities
==============

Utility functions for reading font identity from cached font files.
"""

import logging
import re
from pathlib import Path

from fontTools.ttLib import TTFont

from ..core.exceptions import FontParseError

logger = logging.getLogger(__name__)

FAMILY_NAME_ID = 1
TYPOGRAPHIC_FAMILY_NAME_ID = 16
WWS_FAMILY_NAME_ID = 21

# Windows platform, Unicode BMP encoding, US English
_WINDOWS_ENGLISH = (3, 1, 0x409)

_UNSAFE_FILENAME_CHARS = re.compile(r'[\x00-\x1f<>:"/\\|?*]')


def read_family_name(font_path: str | Path) -> str:
    """
    Read the first declared family name of a font file.

    The font is opened lazily and closed before returning, so scanning many
    files never keeps more than one parser open.

    Args:
        font_path: Path to font file (TrueType, OpenType, WOFF or a collection)

    Returns:
        Family name from the ``name`` table

    Raises:
        FontParseError: If the file is not a readable font or has no family name
    """
    font_path = Path(font_path)

    try:
        # fontNumber=0 picks the first face of a collection and is ignored otherwise
        with TTFont(font_path, lazy=True, fontNumber=0) as font:
            if "name" not in font:
                raise FontParseError(font_path, "font has no 'name' table")
            family_name = _get_family_name(font["name"])
    except FontParseError:
        raise
    except Exception as e:
        raise FontParseError(font_path, str(e) or type(e).__name__) from e

    if not family_name:
        raise FontParseError(font_path, "font declares no family name")

    logger.debug(f"Read family name '{family_name}' from {font_path.name}")
    return family_name


def _get_family_name(name_table) -> str | None:
    """Extract the family name from a name table."""
    record = name_table.getName(FAMILY_NAME_ID, *_WINDOWS_ENGLISH)
    if record is not None:
        name = record.toUnicode().strip()
        if name:
            return name

    name = name_table.getDebugName(FAMILY_NAME_ID)
    if name and name.strip():
        return name.strip()

    # Fonts that only carry typographic names
    for name_id in (TYPOGRAPHIC_FAMILY_NAME_ID, WWS_FAMILY_NAME_ID):
        name = name_table.getDebugName(name_id)
        if name and name.strip():
            return name.strip()

    return None


def sanitize_file_stem(name: str) -> str:
    """
    Make a font name safe to use as a file name.

    Characters that are not allowed in file names on common platforms are
    replaced with ``_``. Trailing dots and spaces are kept: the extension is
    always appended after the stem, so they never end the file name.
    """
    return _UNSAFE_FILENAME_CHARS.sub("_", name) or "_"


def validate_font_file(font_path: str | Path) -> bool:
    """
    Check whether a file can be read as a font with a family name.

    Args:
        font_path: Path to font file

    Returns:
        True if the family name can be read, False otherwise
    """
    try:
        read_family_name(font_path)
    except FontParseError as e:
        logger.debug(f"Font validation failed for {font_path}: {e}")
        return False
    return True
