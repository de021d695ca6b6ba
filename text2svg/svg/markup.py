"""String builders for ``<path>`` and ``<svg>`` markup.

Attribute values are interpolated as given. Nothing is XML-escaped, so a
value containing ``"`` or ``<`` produces malformed markup; callers that pass
untrusted values must escape them first.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def format_length(value: float) -> str:
    """Format a finite number the way JavaScript string interpolation does.

    Shortest round-trip digits, positional for magnitudes in ``[1e-6, 1e21)``
    and exponent form (``1e-7``, ``1e+21``) outside it.
    """
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"


def path_element(d: str, attributes: Mapping[str, Any] | None = None) -> str:
    """Return a ``<path>`` element with ``attributes`` written before ``d``."""
    attrs = " ".join(f'{key}="{value}"' for key, value in (attributes or {}).items())
    if attrs:
        return f'<path {attrs} d="{d}"/>'
    return f'<path d="{d}"/>'


def svg_document(width: float, height: float, *children: str) -> str:
    """Return a standalone ``<svg>`` document wrapping ``children``."""
    return (
        f'<svg xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}" '
        f'width="{format_length(width)}" height="{format_length(height)}">'
        + "".join(children)
        + "</svg>"
    )
