"""Configuration for text2svg.

Two layers:

- :class:`RenderOptions`: per-call options (font size, spacing, anchor,
  origin, extra path attributes).
- :class:`Config`: per-engine settings (path precision, fetch limits).
"""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

DEFAULT_FONT_SIZE = 72.0


@dataclass(frozen=True)
class RenderOptions:
    """Options for a single measurement or rendering call.

    ``None`` means "not given". This matters for ``kerning``: an absent value
    turns kerning on, while an explicit ``False`` turns it off.

    Attributes:
        font_size: Font size in pixels. Absent or zero means 72.
        letter_spacing: Extra space per glyph, as a fraction of the font size.
            Takes priority over ``tracking``.
        tracking: Extra space per glyph in thousandths of an em.
        kerning: Apply kerning pairs. ``None`` resolves to ``True``.
        anchor: Free-form anchor string, see :mod:`text2svg.anchor`.
        x: Horizontal origin in pixels.
        y: Vertical origin in pixels.
        attributes: Extra attributes written on the ``<path>`` element.
            Values are not XML-escaped.
    """

    font_size: float | None = None
    letter_spacing: float | None = None
    tracking: float | None = None
    kerning: bool | None = None
    anchor: str = ""
    x: float | None = None
    y: float | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> RenderOptions:
        """Build options from a plain mapping.

        The mapping is deep-copied so later changes on either side do not
        leak across.

        Raises:
            TypeError: If the mapping has keys that are not option names.
        """
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(options) - names)
        if unknown:
            raise TypeError(f"Unknown render options: {', '.join(unknown)}")
        values = copy.deepcopy(dict(options))
        if values.get("anchor") is None:
            values.pop("anchor", None)
        if values.get("attributes") is None:
            values.pop("attributes", None)
        return cls(**values)

    @classmethod
    def coerce(cls, options: OptionsLike) -> RenderOptions:
        """Return ``options`` as a :class:`RenderOptions` instance."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)

    @property
    def resolved_font_size(self) -> float:
        return self.font_size or DEFAULT_FONT_SIZE

    @property
    def resolved_kerning(self) -> bool:
        return True if self.kerning is None else bool(self.kerning)

    def replace(self, **changes: Any) -> RenderOptions:
        """Return a copy with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


OptionsLike = Union[RenderOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class Config:
    """Engine and loader settings.

    Attributes:
        path_precision: Decimal places kept in path data coordinates.
        fetch_timeout: Timeout in seconds for remote font fetches.
        max_download_size: Largest font payload accepted from a URL, in bytes.
        user_agent: ``User-Agent`` header sent with remote fetches.
    """

    path_precision: int = 2
    fetch_timeout: float = 30
    max_download_size: int = 32 * 1024 * 1024
    user_agent: str = "text2svg/0.1.0"
