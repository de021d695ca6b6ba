"""Font acquisition.

Three ways to get a :class:`~text2svg.fonts.ttfont.TTFontHandle`:

- :func:`load_font_file`: synchronous read of a local file.
- :func:`load_font_url`: coroutine fetching a URL (or path) on a worker thread.
- :func:`parse_font_bytes`: synchronous parse of an in-memory buffer.

Failures are raised immediately as :class:`~text2svg.exceptions.FontLoadError`,
:class:`~text2svg.exceptions.FontFetchError` or
:class:`~text2svg.exceptions.FontParseError`. Nothing is retried.
"""

from __future__ import annotations

import asyncio
import logging
from io import BytesIO
from os import PathLike
from pathlib import Path

from fontTools.ttLib import TTFont

from text2svg.config import Config
from text2svg.exceptions import FontFetchError, FontLoadError, FontParseError
from text2svg.fonts.remote import RemoteFontFetcher
from text2svg.fonts.ttfont import TTFontHandle

logger = logging.getLogger(__name__)

_COLLECTION_SUFFIXES = (".ttc", ".otc")


def _log_loaded(source: str, handle: TTFontHandle) -> None:
    logger.info(
        "Loaded font %s (unitsPerEm=%d, %d glyphs)",
        source,
        handle.units_per_em,
        handle.num_glyphs,
    )


def load_font_file(
    path: str | PathLike[str],
    config: Config | None = None,
    font_number: int = 0,
) -> TTFontHandle:
    """Load a font file from disk.

    Args:
        path: Path to a TrueType/OpenType/WOFF file.
        config: Engine settings; defaults to :class:`Config()`.
        font_number: Face index, used for ``.ttc``/``.otc`` collections only.

    Returns:
        Loaded font handle.

    Raises:
        FontLoadError: If the file is missing, unreadable or not a font.
    """
    config = config or Config()
    font_path = Path(path)
    try:
        if font_path.suffix.lower() in _COLLECTION_SUFFIXES:
            ttfont = TTFont(font_path, fontNumber=font_number)
        else:
            ttfont = TTFont(font_path)
        handle = TTFontHandle(ttfont, precision=config.path_precision)
    except Exception as e:
        logger.warning("Failed to load %s: %s", font_path, e)
        raise FontLoadError(str(font_path), details={"error": str(e)}) from e

    _log_loaded(str(font_path), handle)
    return handle


def parse_font_bytes(data: bytes | bytearray | memoryview, config: Config | None = None) -> TTFontHandle:
    """Parse a font from an in-memory buffer.

    Raises:
        FontParseError: If the buffer is empty or not a font.
    """
    config = config or Config()
    if not data:
        raise FontParseError(details={"error": "empty buffer"})
    try:
        handle = TTFontHandle(TTFont(BytesIO(bytes(data))), precision=config.path_precision)
    except Exception as e:
        logger.warning("Failed to parse font data (%d bytes): %s", len(data), e)
        raise FontParseError(details={"error": str(e), "size": len(data)}) from e

    _log_loaded(f"<{len(data)} bytes>", handle)
    return handle


async def load_font_url(
    url: str,
    config: Config | None = None,
    fetcher: RemoteFontFetcher | None = None,
) -> TTFontHandle:
    """Fetch and parse a font.

    The blocking fetch runs in a worker thread. Dropping the awaitable
    abandons the load.

    Args:
        url: HTTP(S) URL, ``file://`` URL or filesystem path.
        config: Engine settings; defaults to :class:`Config()`.
        fetcher: Fetcher to use; built from ``config`` when omitted.

    Returns:
        Loaded font handle.

    Raises:
        FontFetchError: If the fetch fails, yields nothing ("Font not found")
            or yields something that is not a font.
    """
    config = config or Config()
    if fetcher is None:
        fetcher = RemoteFontFetcher(
            timeout=config.fetch_timeout,
            max_size=config.max_download_size,
            user_agent=config.user_agent,
        )

    try:
        data = await asyncio.to_thread(fetcher.fetch, url)
    except FontFetchError as e:
        logger.warning("%s", e)
        raise

    if not data:
        logger.warning("No font data at %s", url)
        raise FontFetchError(url, details={"error": "Font not found"})

    try:
        handle = TTFontHandle(TTFont(BytesIO(data)), precision=config.path_precision)
    except Exception as e:
        logger.warning("Failed to parse font from %s: %s", url, e)
        raise FontFetchError(url, details={"error": str(e)}) from e

    _log_loaded(url, handle)
    return handle
