"""Pytest configuration and shared fixtures for text2svg tests.

Fonts are synthesised with fontTools' FontBuilder so that every metric is
known exactly:

- unitsPerEm 1000, ascender 800, descender -200
- ``A`` and ``V``: triangles, advance 600
- ``B``: quadratic bowl, advance 500
- ``space``: empty, advance 250
- ``acutecomb`` (U+0301): zero advance
- ``.notdef``: box, advance 500
- GPOS ``kern`` feature with ``A V -50``
"""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from text2svg import TextToSVG

UNITS_PER_EM = 1000
ASCENDER = 800
DESCENDER = -200

GLYPH_ORDER = [".notdef", "space", "A", "B", "V", "acutecomb"]
CHARACTER_MAP = {0x20: "space", 0x41: "A", 0x42: "B", 0x56: "V", 0x0301: "acutecomb"}
ADVANCES = {".notdef": 500, "space": 250, "A": 600, "B": 500, "V": 600, "acutecomb": 0}

DEFAULT_FEATURES = "feature kern { pos A V -50; } kern;"


def _draw_glyph(name: str):
    pen = TTGlyphPen(None)
    if name == ".notdef":
        pen.moveTo((0, 0))
        pen.lineTo((0, 700))
        pen.lineTo((400, 700))
        pen.lineTo((400, 0))
        pen.closePath()
    elif name == "A":
        pen.moveTo((0, 0))
        pen.lineTo((300, 700))
        pen.lineTo((600, 0))
        pen.closePath()
    elif name == "V":
        pen.moveTo((0, 700))
        pen.lineTo((300, 0))
        pen.lineTo((600, 700))
        pen.closePath()
    elif name == "B":
        pen.moveTo((0, 0))
        pen.lineTo((0, 700))
        pen.qCurveTo((400, 700), (400, 350))
        pen.qCurveTo((400, 0), (0, 0))
        pen.closePath()
    elif name == "acutecomb":
        pen.moveTo((0, 750))
        pen.lineTo((100, 900))
        pen.lineTo((200, 750))
        pen.closePath()
    return pen.glyph()


def build_font(
    features: str | None = DEFAULT_FEATURES,
    kern_pairs: dict[tuple[str, str], int] | None = None,
    kern_coverage: int = 1,
) -> TTFont:
    """Build the test font in memory.

    Args:
        features: Feature file source compiled into GPOS, or None for none.
        kern_pairs: Pairs for a legacy ``kern`` table, or None for none.
        kern_coverage: Coverage bits of the legacy ``kern`` subtable.
    """
    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CHARACTER_MAP)
    fb.setupGlyf({name: _draw_glyph(name) for name in GLYPH_ORDER})
    fb.setupHorizontalMetrics({name: (ADVANCES[name], 0) for name in GLYPH_ORDER})
    fb.setupHorizontalHeader(ascent=ASCENDER, descent=DESCENDER)
    fb.setupNameTable({"familyName": "Text2SVG Test", "styleName": "Regular"})
    fb.setupOS2(
        sTypoAscender=ASCENDER,
        sTypoDescender=DESCENDER,
        usWinAscent=ASCENDER,
        usWinDescent=-DESCENDER,
    )
    fb.setupMaxp()
    fb.setupPost()
    if features:
        fb.addOpenTypeFeatures(features)
    if kern_pairs is not None:
        kern = newTable("kern")
        kern.version = 0
        subtable = KernTable_format_0()
        subtable.coverage = kern_coverage
        subtable.kernTable = dict(kern_pairs)
        kern.kernTables = [subtable]
        fb.font["kern"] = kern
    return fb.font


def font_to_bytes(font: TTFont) -> bytes:
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def font_bytes() -> bytes:
    """Return the compiled default test font."""
    return font_to_bytes(build_font())


@pytest.fixture(scope="session")
def font_path(tmp_path_factory: pytest.TempPathFactory, font_bytes: bytes) -> Path:
    """Write the default test font to disk and return its path."""
    path = tmp_path_factory.mktemp("fonts") / "Text2SVGTest-Regular.ttf"
    path.write_bytes(font_bytes)
    return path


@pytest.fixture
def engine(font_bytes: bytes) -> TextToSVG:
    """Return an engine over the default test font."""
    return TextToSVG.parse(font_bytes)


@pytest.fixture
def make_font() -> Callable[..., TTFont]:
    """Return the in-memory font factory."""
    return build_font
