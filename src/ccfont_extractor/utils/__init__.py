"""Utility functions for the font extractor."""

from .logging import setup_logging

__all__ = ["setup_logging"]
