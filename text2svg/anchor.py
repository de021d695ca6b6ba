"""Anchor keyword parsing.

An anchor is a free-form string such as ``"center middle"``. It is searched
(case-insensitively, by substring) for one horizontal and one vertical
keyword; the first match of each wins and missing keywords fall back to
``left`` and ``baseline``. Because matching is by substring,
``"rightmiddle"`` resolves the same as ``"right middle"``.
"""

from __future__ import annotations

import re
from enum import Enum

from text2svg.exceptions import InvalidAnchorError

_HORIZONTAL_RE = re.compile(r"left|center|right", re.IGNORECASE)
_VERTICAL_RE = re.compile(r"baseline|top|bottom|middle", re.IGNORECASE)


class HorizontalAnchor(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, keyword: str) -> HorizontalAnchor:
        """Return the anchor named by ``keyword`` (case-insensitive).

        Raises:
            InvalidAnchorError: If ``keyword`` is not a horizontal anchor.
        """
        try:
            return cls(keyword.lower())
        except ValueError as e:
            raise InvalidAnchorError(keyword) from e


class VerticalAnchor(str, Enum):
    BASELINE = "baseline"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, keyword: str) -> VerticalAnchor:
        """Return the anchor named by ``keyword`` (case-insensitive).

        Raises:
            InvalidAnchorError: If ``keyword`` is not a vertical anchor.
        """
        try:
            return cls(keyword.lower())
        except ValueError as e:
            raise InvalidAnchorError(keyword) from e


def parse_anchor(anchor: str | None) -> tuple[HorizontalAnchor, VerticalAnchor]:
    """Split a free-form anchor string into its two keywords.

    Args:
        anchor: Anchor string, e.g. ``"right bottom"``. ``None`` or an empty
            string selects the defaults.

    Returns:
        ``(horizontal, vertical)`` anchors.
    """
    anchor = anchor or ""

    match_h = _HORIZONTAL_RE.search(anchor)
    horizontal = HorizontalAnchor.parse(match_h.group(0)) if match_h else HorizontalAnchor.LEFT

    match_v = _VERTICAL_RE.search(anchor)
    vertical = VerticalAnchor.parse(match_v.group(0)) if match_v else VerticalAnchor.BASELINE

    return horizontal, vertical
