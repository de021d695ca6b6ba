"""Pen-based SVG path data serialisation.

Glyph outlines are drawn into :class:`PathDataPen`, which writes compact path
data: absolute ``M``, ``L``, ``Q``, ``C`` and ``Z`` commands, numbers rounded
to a fixed number of decimals with integral values written bare, and a
separating space only in front of non-negative values. For example
``M10 20L30.50-4Q1 2 3 4Z``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from fontTools.pens.basePen import BasePen


def format_number(value: float, precision: int = 2) -> str:
    """Format a coordinate: bare integer when integral, else fixed decimals."""
    if round(value) == value:
        return str(int(round(value)))
    return f"{value:.{precision}f}"


def pack_values(values: Iterable[float], precision: int = 2) -> str:
    """Join coordinates, separating with a space unless the value is negative."""
    out = []
    for i, value in enumerate(values):
        if value >= 0 and i > 0:
            out.append(" ")
        out.append(format_number(value, precision))
    return "".join(out)


class PathDataPen(BasePen):
    """Pen that accumulates SVG path data.

    Multi-point quadratic segments and TrueType contours without on-curve
    points are split by :class:`~fontTools.pens.basePen.BasePen` before they
    reach the ``_qCurveToOne`` hook, so every ``Q`` written has exactly one
    control point.
    """

    def __init__(self, glyphSet: Any = None, precision: int = 2) -> None:
        super().__init__(glyphSet)
        self.precision = precision
        self._commands: list[str] = []

    def _pack(self, *points: tuple[float, float]) -> str:
        return pack_values((c for pt in points for c in pt), self.precision)

    def _moveTo(self, pt):
        self._commands.append("M" + self._pack(pt))

    def _lineTo(self, pt):
        self._commands.append("L" + self._pack(pt))

    def _qCurveToOne(self, pt1, pt2):
        self._commands.append("Q" + self._pack(pt1, pt2))

    def _curveToOne(self, pt1, pt2, pt3):
        self._commands.append("C" + self._pack(pt1, pt2, pt3))

    def _closePath(self):
        self._commands.append("Z")

    def getCommands(self) -> str:
        return "".join(self._commands)

