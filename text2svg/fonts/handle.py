"""The font capability consumed by the engine.

The engine only needs a handful of font-wide metrics, a per-glyph advance,
a kerning lookup and an outline drawer. Anything providing those satisfies
:class:`FontHandle`; :class:`text2svg.fonts.ttfont.TTFontHandle` is the
fontTools-backed implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Glyph:
    """A glyph as seen by the width calculator.

    Attributes:
        name: Glyph name in the font.
        advance_width: Advance in design units. 0 or None for zero-width glyphs.
    """

    name: str
    advance_width: float | None = None


@dataclass(frozen=True)
class ShapingOptions:
    """Layout flags forwarded to :meth:`FontHandle.outline_path`.

    ``None`` means the caller left the flag unset and the handle applies its
    default: kerning on, no extra spacing.
    """

    kerning: bool | None = None
    letter_spacing: float | None = None
    tracking: float | None = None


@runtime_checkable
class FontHandle(Protocol):
    """Read-only font capability."""

    @property
    def units_per_em(self) -> int: ...

    @property
    def ascender(self) -> float: ...

    @property
    def descender(self) -> float: ...

    def glyphs_for(self, text: str) -> Sequence[Glyph]:
        """Return the glyphs for ``text``, in order."""
        ...

    def kerning_value(self, left: Glyph, right: Glyph) -> float:
        """Return the kerning between two adjacent glyphs in design units."""
        ...

    def outline_path(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float,
        shaping: ShapingOptions | None = None,
    ) -> str:
        """Return SVG path data for ``text`` with its baseline origin at (x, y)."""
        ...
