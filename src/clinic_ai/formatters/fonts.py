"""Font cache for the PDF formatter.

The Devanagari TTF is fetched once per ``FontCache`` and reused by every
subsequent render.  The fetcher is injectable so tests and offline
deployments never touch the network.
"""

from __future__ import annotations

import logging
import threading
import urllib.request
from io import BytesIO
from typing import Callable

from clinic_ai.exceptions import FontLoadError

log = logging.getLogger(__name__)

FontFetcher = Callable[[str, float], bytes]


def fetch_url(url: str, timeout: float) -> bytes:
    """Download *url* and return the body; non-200 responses raise."""
    with urllib.request.urlopen(url, timeout=timeout) as resp:
        if resp.status != 200:
            raise FontLoadError(f"Font download returned HTTP {resp.status}", url=url)
        return resp.read()


class FontCache:
    """Get-or-load cache around a single font resource.

    Thread-safe via ``threading.Lock``: concurrent callers trigger at most
    one fetch.  A failed fetch leaves the cache empty so the next call retries.
    """

    def __init__(
        self,
        url: str,
        fetcher: FontFetcher | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._url = url
        self._fetcher = fetcher or fetch_url
        self._timeout = timeout
        self._data: bytes | None = None
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return self._url

    @property
    def loaded(self) -> bool:
        return self._data is not None

    def get_or_load(self) -> bytes:
        with self._lock:
            if self._data is not None:
                return self._data
            try:
                data = self._fetcher(self._url, self._timeout)
            except FontLoadError:
                raise
            except Exception as exc:
                raise FontLoadError(f"Failed to fetch font: {exc}", url=self._url) from exc
            if not data:
                raise FontLoadError("Font download returned no data", url=self._url)
            log.info(f"Loaded font from {self._url} ({len(data)} bytes)")
            self._data = data
            return data

    def clear(self) -> None:
        with self._lock:
            self._data = None


_registered: set[tuple[str, str]] = set()
_register_lock = threading.Lock()


def register_reportlab_font(cache: FontCache, name: str) -> str:
    """Register the cached TTF with reportlab under *name* and return it.

    Bold and italic map to the same face so ``<b>`` markup keeps working.
    """
    from reportlab.lib.fonts import addMapping
    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    data = cache.get_or_load()
    key = (name, cache.url)
    with _register_lock:
        if key in _registered:
            return name
        try:
            pdfmetrics.registerFont(TTFont(name, BytesIO(data)))
        except Exception as exc:
            raise FontLoadError(f"Font from {cache.url} is not a usable TTF: {exc}", url=cache.url) from exc
        for bold in (0, 1):
            for italic in (0, 1):
                addMapping(name, bold, italic, name)
        _registered.difference_update({k for k in _registered if k[0] == name})
        _registered.add(key)
        return name
