"""High-level API for text2svg.

Example:
    >>> from text2svg import TextToSVG
    >>> engine = TextToSVG.load_sync("fonts/Roboto-Regular.ttf")
    >>> engine.get_svg("Hello", {"font_size": 48, "anchor": "top"})
    '<svg xmlns="http://www.w3.org/2000/svg" ...'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike

from text2svg.anchor import HorizontalAnchor, VerticalAnchor, parse_anchor
from text2svg.config import DEFAULT_FONT_SIZE, Config, OptionsLike, RenderOptions
from text2svg.exceptions import InvalidAnchorError
from text2svg.fonts.handle import FontHandle, ShapingOptions
from text2svg.fonts.loader import load_font_file, load_font_url, parse_font_bytes
from text2svg.svg.markup import format_length, path_element, svg_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Metrics:
    """Pixel-space placement of a run of text.

    Attributes:
        x: Left edge after anchoring.
        y: Top edge (ascender line) after anchoring.
        baseline: Baseline y, always ``y + ascender``.
        width: Advance width of the run.
        height: ``ascender - descender``; font-wide, not the glyph bounds.
        ascender: Font ascender.
        descender: Font descender, usually negative.
    """

    x: float
    y: float
    baseline: float
    width: float
    height: float
    ascender: float
    descender: float


class TextToSVG:
    """Measure text and render it as SVG path data.

    The engine holds a read-only font handle and no other state, so one
    instance can serve concurrent callers.

    Args:
        font: Loaded font handle.
        config: Engine settings.
    """

    def __init__(self, font: FontHandle, config: Config | None = None) -> None:
        self.font = font
        self.config = config or Config()

    @classmethod
    def load_sync(cls, path: str | PathLike[str], config: Config | None = None) -> TextToSVG:
        """Load a font file from disk.

        Raises:
            FontLoadError: If the file is missing, unreadable or not a font.
        """
        return cls(load_font_file(path, config), config)

    @classmethod
    async def load(cls, url: str, config: Config | None = None) -> TextToSVG:
        """Fetch a font from a URL or path without blocking the event loop.

        Raises:
            FontFetchError: If the font cannot be fetched or parsed, or the
                fetch yields no data.
        """
        return cls(await load_font_url(url, config), config)

    @classmethod
    def parse(cls, data: bytes | bytearray | memoryview, config: Config | None = None) -> TextToSVG:
        """Parse a font from raw bytes.

        Raises:
            FontParseError: If the buffer is not a font.
        """
        return cls(parse_font_bytes(data, config), config)

    def get_font(self) -> FontHandle:
        return self.font

    def _scale(self, font_size: float) -> float:
        return font_size / self.font.units_per_em

    def get_width(self, text: str, options: OptionsLike = None) -> float:
        """Return the advance width of ``text`` in pixels.

        Sums glyph advances, kerning between adjacent glyphs (unless
        ``kerning`` is explicitly False) and per-glyph letter spacing or
        tracking. Letter spacing and tracking are added after every glyph,
        the last one included; letter spacing wins when both are set.
        """
        options = RenderOptions.coerce(options)
        font_size = options.resolved_font_size
        kerning = options.resolved_kerning
        scale = self._scale(font_size)

        width = 0.0
        glyphs = self.font.glyphs_for(text)
        for i, glyph in enumerate(glyphs):
            if glyph.advance_width:
                width += glyph.advance_width * scale

            if kerning and i < len(glyphs) - 1:
                width += self.font.kerning_value(glyph, glyphs[i + 1]) * scale

            if options.letter_spacing:
                width += options.letter_spacing * font_size
            elif options.tracking:
                width += (options.tracking / 1000) * font_size
        return width

    def get_height(self, font_size: float | None = None) -> float:
        """Return the font-wide line height (ascender to descender) in pixels."""
        if font_size is None:
            font_size = DEFAULT_FONT_SIZE
        scale = self._scale(font_size)
        return (self.font.ascender - self.font.descender) * scale

    def get_metrics(self, text: str, options: OptionsLike = None) -> Metrics:
        """Measure ``text`` and place it relative to the requested anchor.

        The anchor picks which point of the text box lands on ``(x, y)``:
        ``left``/``center``/``right`` horizontally and
        ``baseline``/``top``/``middle``/``bottom`` vertically.

        Raises:
            InvalidAnchorError: If an anchor resolves to an unknown value.
        """
        options = RenderOptions.coerce(options)
        font_size = options.resolved_font_size
        horizontal, vertical = parse_anchor(options.anchor)

        width = self.get_width(text, options)
        height = self.get_height(font_size)

        scale = self._scale(font_size)
        ascender = self.font.ascender * scale
        descender = self.font.descender * scale

        x = options.x or 0
        if horizontal is HorizontalAnchor.LEFT:
            pass
        elif horizontal is HorizontalAnchor.CENTER:
            x -= width / 2
        elif horizontal is HorizontalAnchor.RIGHT:
            x -= width
        else:
            raise InvalidAnchorError(str(horizontal))

        y = options.y or 0
        if vertical is VerticalAnchor.BASELINE:
            y -= ascender
        elif vertical is VerticalAnchor.TOP:
            pass
        elif vertical is VerticalAnchor.MIDDLE:
            y -= height / 2
        elif vertical is VerticalAnchor.BOTTOM:
            y -= height
        else:
            raise InvalidAnchorError(str(vertical))

        logger.debug("Metrics for %r: anchor=%s/%s x=%s y=%s", text, horizontal.value, vertical.value, x, y)
        return Metrics(
            x=x,
            y=y,
            baseline=y + ascender,
            width=width,
            height=height,
            ascender=ascender,
            descender=descender,
        )

    def get_d(self, text: str, options: OptionsLike = None) -> str:
        """Return SVG path data for ``text`` placed per its metrics."""
        options = RenderOptions.coerce(options)
        metrics = self.get_metrics(text, options)
        shaping = ShapingOptions(
            kerning=options.kerning,
            letter_spacing=options.letter_spacing,
            tracking=options.tracking,
        )
        return self.font.outline_path(
            text,
            metrics.x,
            metrics.baseline,
            options.resolved_font_size,
            shaping,
        )

    def get_path(self, text: str, options: OptionsLike = None) -> str:
        """Return a ``<path>`` element for ``text``.

        ``options.attributes`` are written before ``d`` without XML escaping.
        """
        options = RenderOptions.coerce(options)
        return path_element(self.get_d(text, options), options.attributes)

    def get_svg(self, text: str, options: OptionsLike = None) -> str:
        """Return a standalone SVG document sized to the text box."""
        options = RenderOptions.coerce(options)
        metrics = self.get_metrics(text, options)
        return svg_document(metrics.width, metrics.height, self.get_path(text, options))

    def get_debug_svg(self, text: str, options: OptionsLike = None) -> str:
        """Return an SVG with red guide lines crossing at the anchor origin.

        The document grows to contain both the origin and the text, then the
        text is shifted so the origin sits at the guides' crossing point.
        The caller's options are left untouched.
        """
        options = RenderOptions.coerce(options)
        options = options.replace(x=options.x or 0, y=options.y or 0)
        metrics = self.get_metrics(text, options)

        box_width = max(metrics.x + metrics.width, 0) - min(metrics.x, 0)
        box_height = max(metrics.y + metrics.height, 0) - min(metrics.y, 0)
        origin_x = box_width - max(metrics.x + metrics.width, 0)
        origin_y = box_height - max(metrics.y + metrics.height, 0)

        options = options.replace(x=options.x + origin_x, y=options.y + origin_y)

        guide = {"fill": "none", "stroke": "red", "stroke-width": "1"}
        ox, oy = format_length(origin_x), format_length(origin_y)
        x_axis = path_element(f"M0,{oy}L{format_length(box_width)},{oy}", guide)
        y_axis = path_element(f"M{ox},0L{ox},{format_length(box_height)}", guide)
        return svg_document(box_width, box_height, x_axis, y_axis, self.get_path(text, options))
