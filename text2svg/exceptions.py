"""Exception hierarchy for text2svg.

Every error raised by the library derives from :class:`Text2SVGError` and
carries a ``details`` dict with structured context (path, url, status code,
underlying error message).
"""

from __future__ import annotations

from typing import Any


class Text2SVGError(Exception):
    """Base class for all text2svg errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class FontError(Text2SVGError):
    """Base class for font acquisition failures."""


class FontLoadError(FontError):
    """A font file could not be read or is not a font."""

    def __init__(self, path: str, details: dict[str, Any] | None = None) -> None:
        self.path = path
        super().__init__(f"Failed to load font file: {path}", details)


class FontFetchError(FontError):
    """A font could not be fetched from a URL.

    Also raised when the fetch succeeds but yields no font at all.
    """

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.url = url
        self.status_code = status_code
        merged = dict(details or {})
        if status_code is not None:
            merged.setdefault("status_code", status_code)
        super().__init__(f"Failed to fetch font: {url}", merged)


class FontParseError(FontError):
    """A byte buffer could not be parsed as a font."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Failed to parse font data", details)


class InvalidAnchorError(Text2SVGError, ValueError):
    """An anchor keyword is not one of the recognised values."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"Unknown anchor option: {keyword}", {"keyword": keyword})
