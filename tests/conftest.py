"""
Pytest configuration and fixtures for font extractor tests.
"""

import io
import logging
import os
import tempfile
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

# Cache file name -> embedded family name
SAMPLE_FONTS = {
    "ABCDEF01.otf": "Helvetica Neue Bold",
    "20417": "Minion Pro",
    "9f3c2a7e": "Source Serif 4",
}


def _triangle_glyph():
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((250, 700))
    pen.lineTo((450, 0))
    pen.closePath()
    return pen.glyph()


def build_font_bytes(
    family_name: str, style_name: str = "Regular", units_per_em: int = 1000
) -> bytes:
    """Build a minimal but valid TrueType font declaring ``family_name``."""
    fb = FontBuilder(units_per_em, isTTF=True)
    fb.setupGlyphOrder([".notdef", "A"])
    fb.setupCharacterMap({0x41: "A"})
    fb.setupGlyf({".notdef": _triangle_glyph(), "A": _triangle_glyph()})
    fb.setupHorizontalMetrics({".notdef": (500, 50), "A": (500, 50)})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family_name, "styleName": style_name})
    fb.setupOS2(sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buffer = io.BytesIO()
    fb.save(buffer)
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep real CCFONTS_* variables and .env files out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("CCFONTS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    package_logger = logging.getLogger("ccfont_extractor")
    handlers = root.handlers[:]
    root_level = root.level
    package_level = package_logger.level
    yield
    root.handlers[:] = handlers
    root.setLevel(root_level)
    package_logger.setLevel(package_level)


@pytest.fixture
def temp_dir():
    """Create temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def font_factory():
    """Build font bytes for a family name."""
    return build_font_bytes


@pytest.fixture
def write_font(font_factory):
    """Write a font declaring ``family_name`` to ``path``."""

    def _write(path: Path, family_name: str, style_name: str = "Regular") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(font_factory(family_name, style_name))
        return path

    return _write


@pytest.fixture
def adobe_dir(temp_dir):
    """Create a CoreSync tree with an empty font cache directory."""
    root = temp_dir / "Adobe" / "CoreSync"
    (root / "plugins" / "livetype" / "r").mkdir(parents=True)
    (root / "plugins" / "livetype" / "c").mkdir(parents=True)
    return root


@pytest.fixture
def cache_dir(adobe_dir):
    """Font cache directory inside the CoreSync tree."""
    return adobe_dir / "plugins" / "livetype" / "r"


@pytest.fixture
def output_dir(temp_dir):
    """Output directory path (not created)."""
    return temp_dir / "Documents" / "Adobe" / "Fonts"


@pytest.fixture
def populated_cache(cache_dir, write_font):
    """Font cache holding the sample fonts."""
    for file_name, family_name in SAMPLE_FONTS.items():
        write_font(cache_dir / file_name, family_name)
    return cache_dir


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "integration" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
