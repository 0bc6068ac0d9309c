from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable
from urllib.parse import urlsplit

import requests

from ..config import SETTINGS, EngineSettings
from .bitmap import Bitmap, load_bitmap

log = logging.getLogger(__name__)

SessionFactory = Callable[[], requests.Session]


def is_remote(location: str) -> bool:
    return urlsplit(str(location)).scheme in ("http", "https")


class SourceLoader:
    """Load the input bitmap from a local path or an http(s) URL."""

    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        settings: EngineSettings = SETTINGS,
    ) -> None:
        self._session_factory = session_factory or requests.Session
        self._session: requests.Session | None = None
        self._settings = settings

    def _get_session(self) -> requests.Session:
        if self._session is None:
            session = self._session_factory()
            session.headers.update({"User-Agent": "graybmp/1.0"})
            self._session = session
        return self._session

    def fetch_bytes(self, url: str) -> bytes:
        session = self._get_session()
        last_exception: Exception | None = None
        for attempt in range(1, self._settings.source_retries + 2):
            try:
                response = session.get(url, timeout=self._settings.source_timeout)
                response.raise_for_status()
                return response.content
            except requests.RequestException as exc:
                log.warning("Fetching %s failed (attempt %d): %s", url, attempt, exc)
                last_exception = exc
                time.sleep(0.4 * attempt)
        raise RuntimeError(f"Could not fetch {url}: {last_exception}")

    def load(self, location: str | Path) -> Bitmap:
        if is_remote(str(location)):
            return load_bitmap(self.fetch_bytes(str(location)))
        return load_bitmap(Path(location))


LOADER = SourceLoader()
