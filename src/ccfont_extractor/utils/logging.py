"""Console logging configuration."""

import logging
import sys

PACKAGE_LOGGER = "ccfont_extractor"


class MaxLevelFilter(logging.Filter):
    """Let through only records below ``max_level``."""

    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def setup_logging(verbose: bool = False) -> None:
    """
    Setup logging configuration.

    Diagnostics go to stdout next to the mapping lines; warnings and errors go
    to stderr. Handlers bind to the streams current at call time.
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.addFilter(MaxLevelFilter(logging.WARNING))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
