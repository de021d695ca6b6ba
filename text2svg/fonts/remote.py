"""Remote font fetching.

Fetches font bytes from HTTP(S) URLs, ``file://`` URLs or plain local paths.
Fetching is blocking; :func:`text2svg.fonts.loader.load_font_url` runs it on
a worker thread.
"""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from pathlib import Path
from urllib.parse import unquote, urlparse

from text2svg.exceptions import FontFetchError

logger = logging.getLogger(__name__)


class RemoteFontFetcher:
    """Fetch raw font data from a URL or path.

    Args:
        timeout: Request timeout in seconds.
        max_size: Maximum payload size in bytes.
        user_agent: ``User-Agent`` header for HTTP requests.
    """

    DEFAULT_TIMEOUT = 30

    MAX_SIZE = 32 * 1024 * 1024

    ACCEPT = "font/ttf, font/otf, font/woff, application/font-sfnt, application/octet-stream, */*"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        max_size: int = MAX_SIZE,
        user_agent: str = "text2svg/0.1.0",
    ) -> None:
        self.timeout = timeout
        self.max_size = max_size
        self.user_agent = user_agent

    @staticmethod
    def is_remote(source: str) -> bool:
        """Return True when ``source`` is an HTTP(S) URL."""
        scheme = urlparse(source.strip()).scheme.lower()
        return scheme in ("http", "https")

    def fetch(self, source: str) -> bytes:
        """Return the bytes at ``source``.

        Args:
            source: HTTP(S) URL, ``file://`` URL or filesystem path.

        Returns:
            Raw payload, possibly empty.

        Raises:
            FontFetchError: If the resource cannot be read or is too large.
        """
        if self.is_remote(source):
            return self._fetch_http(source)
        return self._fetch_local(source)

    def _fetch_http(self, url: str) -> bytes:
        logger.debug("Fetching font from %s", url)
        try:
            req = urllib.request.Request(
                url,
                headers={"User-Agent": self.user_agent, "Accept": self.ACCEPT},
            )

            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                content_length = response.headers.get("Content-Length")
                if content_length and int(content_length) > self.max_size:
                    raise FontFetchError(
                        url,
                        details={"error": f"File too large: {content_length} bytes"},
                    )

                content = response.read(self.max_size + 1)
                if len(content) > self.max_size:
                    raise FontFetchError(
                        url,
                        details={"error": f"File too large: >{self.max_size} bytes"},
                    )
                return content

        except FontFetchError:
            raise
        except urllib.error.HTTPError as e:
            raise FontFetchError(url, status_code=e.code) from e
        except urllib.error.URLError as e:
            raise FontFetchError(url, details={"error": str(e.reason)}) from e
        except Exception as e:
            raise FontFetchError(url, details={"error": str(e)}) from e

    def _fetch_local(self, source: str) -> bytes:
        parsed = urlparse(source)
        path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(source)
        logger.debug("Reading font from %s", path)
        try:
            size = path.stat().st_size
            if size > self.max_size:
                raise FontFetchError(source, details={"error": f"File too large: {size} bytes"})
            return path.read_bytes()
        except FontFetchError:
            raise
        except OSError as e:
            raise FontFetchError(source, details={"error": str(e)}) from e
