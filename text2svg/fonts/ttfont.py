"""fontTools-backed font handle.

:class:`TTFontHandle` adapts a :class:`fontTools.ttLib.TTFont` to the
:class:`~text2svg.fonts.handle.FontHandle` protocol. All tables are
decompiled and kerning pairs are indexed at construction, so measuring and
drawing only read from the handle afterwards.
"""

from __future__ import annotations

import logging
from typing import Any

from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from text2svg.fonts.handle import Glyph, ShapingOptions
from text2svg.svg.path_data import PathDataPen

logger = logging.getLogger(__name__)

NOTDEF = ".notdef"


def _build_kern_pairs(font: TTFont) -> dict[tuple[str, str], int]:
    """Collect horizontal pairs from the legacy ``kern`` table.

    When a pair appears in several subtables the first occurrence wins.
    """
    if "kern" not in font:
        return {}
    pairs: dict[tuple[str, str], int] = {}
    for subtable in reversed(getattr(font["kern"], "kernTables", None) or []):
        coverage = getattr(subtable, "coverage", 1)
        if getattr(subtable, "apple", False):
            horizontal = not coverage & 0x80
        else:
            horizontal = bool(coverage & 1)
        if not horizontal:
            continue
        for (left, right), value in (getattr(subtable, "kernTable", None) or {}).items():
            pairs[(str(left), str(right))] = value
    return pairs


def _x_advance(value_record: Any) -> int:
    if value_record is None:
        return 0
    return getattr(value_record, "XAdvance", 0) or 0


def _kern_pair_subtables(font: TTFont) -> list[Any]:
    """Return the PairPos subtables reachable from the ``kern`` feature, in lookup order."""
    if "GPOS" not in font:
        return []
    gpos = font["GPOS"].table
    if gpos.LookupList is None or gpos.FeatureList is None:
        return []

    lookup_indices: set[int] = set()
    for record in gpos.FeatureList.FeatureRecord:
        if record.FeatureTag == "kern":
            lookup_indices.update(record.Feature.LookupListIndex)

    subtables = []
    for index in sorted(lookup_indices):
        lookup = gpos.LookupList.Lookup[index]
        for subtable in lookup.SubTable:
            if lookup.LookupType == 9:
                if subtable.ExtensionLookupType != 2:
                    continue
                subtable = subtable.ExtSubTable
            elif lookup.LookupType != 2:
                continue
            subtables.append(subtable)
    return subtables


class _PairAdjustments:
    """Read-only index over GPOS pair-positioning subtables.

    Format 1 (glyph pairs) is flattened into dicts; format 2 (class pairs)
    keeps its class definitions and resolves on lookup. As in OpenType
    layout, the first subtable whose coverage includes the left glyph and
    that matches the pair decides the value.
    """

    def __init__(self, subtables: list[Any]) -> None:
        self._resolvers: list[tuple[int, Any]] = []
        for subtable in subtables:
            if subtable.Format == 1:
                pairs: dict[str, dict[str, int]] = {}
                for left, pair_set in zip(subtable.Coverage.glyphs, subtable.PairSet):
                    pairs[left] = {
                        record.SecondGlyph: _x_advance(getattr(record, "Value1", None))
                        for record in pair_set.PairValueRecord
                    }
                self._resolvers.append((1, pairs))
            elif subtable.Format == 2:
                self._resolvers.append(
                    (
                        2,
                        (
                            frozenset(subtable.Coverage.glyphs),
                            dict(subtable.ClassDef1.classDefs),
                            dict(subtable.ClassDef2.classDefs),
                            subtable.Class1Record,
                        ),
                    )
                )

    def __len__(self) -> int:
        return len(self._resolvers)

    def lookup(self, left: str, right: str) -> int | None:
        for fmt, data in self._resolvers:
            if fmt == 1:
                seconds = data.get(left)
                if seconds is not None and right in seconds:
                    return seconds[right]
            else:
                coverage, class_defs1, class_defs2, class1_records = data
                if left not in coverage:
                    continue
                class1 = class_defs1.get(left, 0)
                class2 = class_defs2.get(right, 0)
                if class1 >= len(class1_records):
                    continue
                class2_records = class1_records[class1].Class2Record
                if class2 >= len(class2_records):
                    continue
                return _x_advance(getattr(class2_records[class2], "Value1", None))
        return None


class TTFontHandle:
    """:class:`~text2svg.fonts.handle.FontHandle` backed by fontTools.

    Glyphs are mapped one per code point through the best Unicode cmap;
    unmapped characters use ``.notdef``. Kerning comes from GPOS ``kern``
    feature lookups, falling back to the legacy ``kern`` table.

    Args:
        ttfont: Loaded font.
        precision: Decimal places kept in generated path data.

    Raises:
        ValueError: If the font lacks the tables needed for layout or has a
            non-positive units-per-em.
    """

    def __init__(self, ttfont: TTFont, precision: int = 2) -> None:
        for tag in ("head", "hhea", "hmtx"):
            if tag not in ttfont:
                raise ValueError(f"Font has no '{tag}' table")
        ttfont.ensureDecompiled()

        units_per_em = int(ttfont["head"].unitsPerEm)
        if units_per_em <= 0:
            raise ValueError(f"Invalid unitsPerEm: {units_per_em}")

        self.ttfont = ttfont
        self.precision = precision
        self._units_per_em = units_per_em
        self._ascender = ttfont["hhea"].ascent
        self._descender = ttfont["hhea"].descent
        self._cmap = ttfont.getBestCmap() or {}
        self._advances = {name: metric[0] for name, metric in ttfont["hmtx"].metrics.items()}
        glyph_order = ttfont.getGlyphOrder()
        self._notdef = NOTDEF if NOTDEF in self._advances or not glyph_order else glyph_order[0]
        self._glyph_set = ttfont.getGlyphSet()
        self._kern_pairs = _build_kern_pairs(ttfont)
        self._pair_adjustments = _PairAdjustments(_kern_pair_subtables(ttfont))

        logger.debug(
            "Indexed %d kern pairs and %d GPOS pair subtables",
            len(self._kern_pairs),
            len(self._pair_adjustments),
        )

    @property
    def units_per_em(self) -> int:
        return self._units_per_em

    @property
    def ascender(self) -> float:
        return self._ascender

    @property
    def descender(self) -> float:
        return self._descender

    @property
    def num_glyphs(self) -> int:
        return len(self._advances)

    def glyphs_for(self, text: str) -> list[Glyph]:
        glyphs = []
        for char in text:
            name = self._cmap.get(ord(char), self._notdef)
            glyphs.append(Glyph(name, self._advances.get(name, 0)))
        return glyphs

    def kerning_value(self, left: Glyph, right: Glyph) -> float:
        value = self._pair_adjustments.lookup(left.name, right.name)
        if value is None:
            value = self._kern_pairs.get((left.name, right.name), 0)
        return value

    def outline_path(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float,
        shaping: ShapingOptions | None = None,
    ) -> str:
        """Draw ``text`` with its first glyph origin at ``(x, y)``.

        The pen cursor advances exactly as the engine measures width, so the
        drawn run and the measured width agree. Glyph outlines are flipped
        from the font's y-up space into SVG's y-down space.

        Args:
            text: Text to draw.
            x: Left edge of the first glyph's advance box, in pixels.
            y: Baseline, in pixels.
            font_size: Font size in pixels.
            shaping: Kerning and spacing flags; unset flags use the defaults.

        Returns:
            SVG path data, empty for empty text.
        """
        shaping = shaping or ShapingOptions()
        kerning = True if shaping.kerning is None else shaping.kerning
        scale = font_size / self._units_per_em

        glyphs = self.glyphs_for(text)
        pen = PathDataPen(self._glyph_set, precision=self.precision)
        cursor = x
        for i, glyph in enumerate(glyphs):
            self._glyph_set[glyph.name].draw(TransformPen(pen, (scale, 0, 0, -scale, cursor, y)))

            if glyph.advance_width:
                cursor += glyph.advance_width * scale
            if kerning and i < len(glyphs) - 1:
                cursor += self.kerning_value(glyph, glyphs[i + 1]) * scale
            if shaping.letter_spacing:
                cursor += shaping.letter_spacing * font_size
            elif shaping.tracking:
                cursor += (shaping.tracking / 1000) * font_size
        return pen.getCommands()
