#!/usr/bin/env python3
"""
Main CLI for the Creative Cloud Font Extractor
==============================================

Run ``python main.py copy --help`` from a checkout, or use the installed
``ccfont-extractor`` command.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from ccfont_extractor.cli import cli  # noqa: E402

if __name__ == "__main__":
    cli()
