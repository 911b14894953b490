"""
Font Extractor
==============

Copies fonts out of the Creative Cloud cache, renaming each obfuscated file
after the family name stored in the font itself.
"""

import logging
import shutil
from pathlib import Path

from ..core.config import DEFAULT_TARGET_EXTENSION, ExtractorConfig
from ..core.exceptions import (
    FileCopyError,
    FontFileError,
    OutputDirectoryCreateError,
)
from ..core.models import ExtractionResult, FontFileRecord, FontFileStatus
from .locator import find_cache_directory
from .paths import DefaultPathProvider
from .utils import read_family_name, sanitize_file_stem

logger = logging.getLogger(__name__)


class ExtractionCallback:
    """Base class for extraction progress callbacks."""

    def on_start(self, total_files: int) -> None:
        """Called once the cache directory has been enumerated."""

    def on_file_start(self, record: FontFileRecord, index: int) -> None:
        """Called before a file is processed."""

    def on_file_complete(self, record: FontFileRecord) -> None:
        """Called when a file has been resolved and copied (or skipped in a dry run)."""

    def on_error(self, record: FontFileRecord, error: FontFileError) -> None:
        """Called when a file fails."""

    def on_complete(self, result: ExtractionResult) -> None:
        """Called when the run completes."""


class ConsoleMappingCallback(ExtractionCallback):
    """Prints one ``<cache name>\\t->\\t<font name>`` line per extracted font."""

    def on_file_complete(self, record: FontFileRecord) -> None:
        print(record.mapping_line(), flush=True)


def prepare_output_directory(output_dir: Path, dry_run: bool = False) -> bool:
    """
    Make sure the output directory exists.

    Args:
        output_dir: Destination directory
        dry_run: Leave the filesystem untouched

    Returns:
        True if the directory was missing (and created unless dry-running)

    Raises:
        OutputDirectoryCreateError: If the path is not a directory or cannot be created
    """
    if output_dir.exists():
        if not output_dir.is_dir():
            raise OutputDirectoryCreateError(output_dir, "path exists and is not a directory")
        logger.info(f"Found output directory at {output_dir}")
        return False

    if not dry_run:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputDirectoryCreateError(output_dir, str(e)) from e

    logger.info(f"Created output directory at {output_dir}")
    return True


def list_font_files(cache_dir: Path) -> list[Path]:
    """List the regular files directly inside the cache directory, sorted by name."""
    font_files = sorted(path for path in cache_dir.iterdir() if path.is_file())
    logger.info(f"Found {len(font_files)} fonts.")
    return font_files


def destination_for(
    output_dir: Path, family_name: str, extension: str = DEFAULT_TARGET_EXTENSION
) -> Path:
    """
    Build the destination path for a font.

    The extension is appended rather than substituted, so a family name such
    as ``Font 1.5`` keeps its dot and the file name always matches the
    reported name.
    """
    return output_dir / f"{sanitize_file_stem(family_name)}{extension}"


def copy_font(
    record: FontFileRecord,
    output_dir: Path,
    dry_run: bool = False,
    extension: str = DEFAULT_TARGET_EXTENSION,
) -> FontFileRecord:
    """
    Copy a resolved font to the output directory, overwriting any existing file.

    Raises:
        FileCopyError: If the destination cannot be written
    """
    destination = destination_for(output_dir, record.family_name, extension)
    record.destination_path = destination

    if dry_run:
        record.transition(FontFileStatus.SKIPPED_DRY_RUN)
        return record

    try:
        shutil.copy2(record.source_path, destination)
    except OSError as e:
        raise FileCopyError(record.source_path, destination, str(e)) from e

    record.copied = True
    record.transition(FontFileStatus.COPIED)
    logger.info(f"Copied font {record.family_name} to {destination}.")
    return record


class FontExtractor:
    """
    Extracts Creative Cloud fonts into a readable output directory.

    Files are processed one at a time in enumeration order. A file that cannot
    be parsed or copied is skipped with a warning unless ``fail_fast`` is set,
    in which case the error propagates and the run stops.
    """

    def __init__(
        self,
        config: ExtractorConfig,
        callback: ExtractionCallback | None = None,
        path_provider: DefaultPathProvider | None = None,
    ):
        """
        Initialize font extractor.

        Args:
            config: Extraction settings; unset directories take the OS defaults
            callback: Progress callback, prints mapping lines by default
            path_provider: Source of the default directories
        """
        self.config = config.with_defaults(path_provider)
        self.callback = callback if callback is not None else ConsoleMappingCallback()

    def run(self) -> ExtractionResult:
        """
        Run the extraction.

        Returns:
            Extraction result with one record per cached file

        Raises:
            CacheDirectoryNotFoundError: If the cache directory does not exist
            OutputDirectoryCreateError: If the output directory cannot be created
            FontFileError: On the first per-file failure when ``fail_fast`` is set
        """
        config = self.config
        cache_dir = find_cache_directory(config.adobe_dir, config.cache_dir_name)
        created = prepare_output_directory(config.output_dir, config.dry_run)

        result = ExtractionResult(
            cache_directory=cache_dir,
            output_directory=config.output_dir,
            dry_run=config.dry_run,
            output_directory_created=created,
        )

        font_files = list_font_files(cache_dir)
        self.callback.on_start(len(font_files))

        written: set[Path] = set()
        for index, font_file in enumerate(font_files):
            record = FontFileRecord(source_path=font_file)
            result.records.append(record)
            self.callback.on_file_start(record, index)

            try:
                self._process_file(record, written)
            except FontFileError as e:
                record.fail(e)
                self.callback.on_error(record, e)
                if config.fail_fast:
                    raise
                logger.warning(f"Skipping {record.source_name}: {e}")
                continue

            self.callback.on_file_complete(record)
            record.transition(FontFileStatus.REPORTED)

        logger.debug(
            f"Processed {result.total_files} files: "
            f"{result.successful_files} extracted, {result.failed_files} failed"
        )
        self.callback.on_complete(result)
        return result

    def _process_file(self, record: FontFileRecord, written: set[Path]) -> None:
        """Resolve and copy a single cached font."""
        config = self.config
        logger.info(f"Processing file {record.source_path}.")

        record.family_name = read_family_name(record.source_path)
        record.transition(FontFileStatus.NAME_RESOLVED)
        logger.info(f"Found font {record.family_name}.")

        destination = destination_for(config.output_dir, record.family_name)
        if destination in written:
            logger.info(f"{destination.name} was already extracted in this run, overwriting")

        copy_font(record, config.output_dir, config.dry_run)
        written.add(destination)
