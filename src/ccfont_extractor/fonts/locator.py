"""
Cache Directory Locator
=======================

Finds the Creative Cloud font cache directory below a CoreSync root.
"""

import logging
from pathlib import Path

from ..core.config import DEFAULT_CACHE_DIR_NAME
from ..core.exceptions import CacheDirectoryNotFoundError

logger = logging.getLogger(__name__)


def find_cache_directories(root: str | Path, name: str = DEFAULT_CACHE_DIR_NAME) -> list[Path]:
    """
    List every directory named ``name`` below ``root``, in lexical path order.

    The root itself is never a candidate. Unreadable subdirectories are
    skipped by the glob, so matches elsewhere in the tree are still returned.
    """
    root = Path(root)
    if not root.is_dir():
        return []

    return sorted(path for path in root.rglob(name) if path.is_dir() and path.name == name)


def find_cache_directory(root: str | Path, name: str = DEFAULT_CACHE_DIR_NAME) -> Path:
    """
    Find the font cache directory.

    Args:
        root: Directory searched recursively (normally the CoreSync directory)
        name: Name of the cache directory

    Returns:
        First matching directory in lexical path order

    Raises:
        CacheDirectoryNotFoundError: If no directory matches
    """
    matches = find_cache_directories(root, name)
    if not matches:
        raise CacheDirectoryNotFoundError(root, name)

    if len(matches) > 1:
        logger.debug(f"Found {len(matches)} '{name}' directories, using the first")

    cache_dir = matches[0]
    logger.info(f"Found CoreSync folder at {cache_dir}.")
    return cache_dir
