"""SVG output for text2svg.

This subpackage provides:
- Pen-based path data serialisation from font outlines
- ``<path>`` and ``<svg>`` markup builders
"""

from text2svg.svg.markup import (
    SVG_NS,
    XLINK_NS,
    format_length,
    path_element,
    svg_document,
)
from text2svg.svg.path_data import PathDataPen, format_number

__all__ = [
    "SVG_NS",
    "XLINK_NS",
    "format_length",
    "path_element",
    "svg_document",
    "PathDataPen",
    "format_number",
]
