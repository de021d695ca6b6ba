"""Font handling for text2svg.

This subpackage provides:
- The FontHandle protocol consumed by the engine
- A fontTools-backed handle with cmap, hmtx and kerning lookups
- File, URL and in-memory font loaders
"""

from text2svg.fonts.handle import FontHandle, Glyph, ShapingOptions
from text2svg.fonts.loader import load_font_file, load_font_url, parse_font_bytes
from text2svg.fonts.remote import RemoteFontFetcher
from text2svg.fonts.ttfont import TTFontHandle

__all__ = [
    "FontHandle",
    "Glyph",
    "ShapingOptions",
    "TTFontHandle",
    "RemoteFontFetcher",
    "load_font_file",
    "load_font_url",
    "parse_font_bytes",
]
