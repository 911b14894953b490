"""
Command Line Interface
======================

``ccfont-extractor copy`` copies the fonts synced by Creative Cloud into an
output directory and prints one ``<cache name>\\t->\\t<font name>`` line per
font.
"""

import logging
import os
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from . import __version__
from .core.config import ExtractorConfig
from .core.exceptions import ExtractorError
from .fonts.extractor import FontExtractor
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _discard_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail again."""
    try:
        stdout_fd = sys.stdout.fileno()
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, stdout_fd)
        os.close(devnull)
    except OSError as e:
        # Streams without a file descriptor have nothing left to flush
        logger.debug(f"Could not redirect stdout: {e}")


@click.group()
@click.version_option(__version__, prog_name="ccfont-extractor")
def cli():
    """Extracts Adobe Creative Cloud fonts to be used in other programs."""


@cli.command(name="copy")
@click.option(
    "--dry",
    "-d",
    "dry_run",
    is_flag=True,
    help="Perform a dry run and don't copy files. Useful for troubleshooting.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--adobe-dir",
    type=click.Path(file_okay=False, path_type=Path),
    metavar="PATH",
    help='Path to the Adobe "CoreSync" directory. '
    "[default: <application data>/Adobe/CoreSync]",
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    metavar="PATH",
    help="Path to the output directory. Will create a new directory if it doesn't "
    "already exist. [default: <documents>/Adobe/Fonts]",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration YAML file (optional)",
)
@click.option(
    "--fail-fast",
    is_flag=True,
    help="Stop at the first font that cannot be read or copied.",
)
@click.pass_obj
def copy_fonts(obj, dry_run, verbose, adobe_dir, output_dir, config, fail_fast):
    """Copy files from Creative Cloud directory."""
    setup_logging(verbose)

    try:
        settings = ExtractorConfig.from_env_and_yaml(yaml_path=config)
    except (ValidationError, ExtractorError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    # Command line flags win over YAML and environment settings
    overrides = {
        "dry_run": dry_run,
        "verbose": verbose,
        "adobe_dir": adobe_dir,
        "output_dir": output_dir,
        "fail_fast": fail_fast,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v})
    if settings.verbose and not verbose:
        setup_logging(True)

    path_provider = (obj or {}).get("path_provider")

    try:
        result = FontExtractor(settings, path_provider=path_provider).run()
    except ExtractorError as e:
        logger.error(f"Font extraction failed: {e}")
        sys.exit(1)
    except BrokenPipeError:
        # Reader closed stdout early, e.g. `ccfont-extractor copy | head -1`
        _discard_stdout()
        sys.exit(1)

    if result.has_failures:
        logger.warning(
            f"{result.failed_files} of {result.total_files} fonts could not be extracted:"
        )
        for record in result.failed_records():
            logger.warning(f"  - {record.source_name}: {record.error}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
