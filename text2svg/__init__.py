"""text2svg: Convert text to SVG path outlines.

This library measures and renders text with fontTools-loaded fonts:
- Advance width with kerning, tracking and letter spacing
- Font-wide height, ascender and descender in pixels
- Anchor-based placement (left/center/right x baseline/top/middle/bottom)
- Path data, ``<path>`` elements and standalone SVG documents

Example:
    >>> from text2svg import TextToSVG
    >>> engine = TextToSVG.load_sync("Roboto-Regular.ttf")
    >>> engine.get_d("Hello", {"font_size": 24, "anchor": "center middle"})
"""

from text2svg.anchor import HorizontalAnchor, VerticalAnchor, parse_anchor
from text2svg.api import Metrics, TextToSVG
from text2svg.config import Config, RenderOptions
from text2svg.exceptions import (
    FontError,
    FontFetchError,
    FontLoadError,
    FontParseError,
    InvalidAnchorError,
    Text2SVGError,
)
from text2svg.fonts import FontHandle, TTFontHandle

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TextToSVG",
    "Metrics",
    "RenderOptions",
    "Config",
    # Anchors
    "HorizontalAnchor",
    "VerticalAnchor",
    "parse_anchor",
    # Font handling
    "FontHandle",
    "TTFontHandle",
    # Exceptions
    "Text2SVGError",
    "FontError",
    "FontLoadError",
    "FontFetchError",
    "FontParseError",
    "InvalidAnchorError",
    # Metadata
    "__version__",
]
