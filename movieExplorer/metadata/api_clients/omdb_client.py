# movieExplorer/metadata/api_clients/omdb_client.py
from __future__ import annotations

from typing import Optional

import requests

from movieExplorer.utils import log_debug
from movieExplorer.settings import OMDB_API_KEY, OMDB_URL, OMDB_TIMEOUT
from movieExplorer.metadata.core.models import FetchResult, FetchStatus, MovieRecord


class OMDBClient:
    """
    Wrapper around OMDb's title lookup.

    Every call opens its own ``requests.Session`` and closes it on the way
    out, success or not. Nothing here raises on a failed lookup: the view
    gets either a ``MovieRecord`` or ``None``.
    """

    # ────────────────────────────────────────────────────────────────
    # Construction
    # ────────────────────────────────────────────────────────────────
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = OMDB_URL,
        timeout: float | None = OMDB_TIMEOUT,
    ):
        self.api_key = api_key or OMDB_API_KEY
        if not self.api_key:
            raise RuntimeError("OMDB_API_KEY not set and no api_key passed")
        self.base_url = base_url
        self.timeout = timeout

    # ────────────────────────────────────────────────────────────────
    # Title lookup
    # ────────────────────────────────────────────────────────────────
    def lookup(self, title: str) -> FetchResult:
        """One GET for *title*, classified into a FetchResult."""
        params = {"apikey": self.api_key, "t": title}

        try:
            with requests.Session() as session:
                resp = session.get(self.base_url, params=params, timeout=self.timeout)
                resp.raise_for_status()
        except (requests.RequestException, UnicodeError) as exc:   # bad URL, DNS, refused, timeout, 4xx/5xx
            return self._failed(FetchStatus.TRANSPORT_ERROR, title, exc)

        try:
            data = resp.json()
        except ValueError as exc:                     # body isn't JSON
            return self._failed(FetchStatus.DECODE_ERROR, title, exc)

        if not isinstance(data, dict):
            return self._failed(FetchStatus.DECODE_ERROR, title, "payload is not an object")

        if data.get("Response") == "False":
            return self._failed(FetchStatus.NOT_FOUND, title, data.get("Error", "no match"))

        try:
            record = MovieRecord.from_payload(data)
        except (KeyError, TypeError) as exc:
            return self._failed(FetchStatus.DECODE_ERROR, title, f"bad field {exc}")

        return FetchResult(FetchStatus.FOUND, record=record)

    def fetch_movie(self, title: str) -> Optional[MovieRecord]:
        """Record for *title*, or None for every kind of failure."""
        return self.lookup(title).record

    # ────────────────────────────────────────────────────────────────
    # Poster
    # ────────────────────────────────────────────────────────────────
    def fetch_poster(self, url: str | None) -> Optional[bytes]:
        if not url or not url.strip() or url == "N/A":
            return None
        try:
            with requests.Session() as session:
                resp = session.get(url, timeout=self.timeout)
                resp.raise_for_status()
                return resp.content
        except (requests.RequestException, UnicodeError) as exc:
            log_debug(f"OMDb poster error for {url}: {exc}")
            return None

    # ────────────────────────────────────────────────────────────────
    # Helpers
    # ────────────────────────────────────────────────────────────────
    @staticmethod
    def _failed(status: FetchStatus, title: str, err) -> FetchResult:
        log_debug(f"OMDb {status.value} for “{title}”: {err}")
        return FetchResult(status, error=str(err))


def fetch_movie(title: str, api_key: str | None = None) -> Optional[MovieRecord]:
    """One-shot lookup with a throwaway client; None when no key is configured."""
    try:
        client = OMDBClient(api_key=api_key)
    except RuntimeError as exc:
        log_debug(f"OMDb client unavailable: {exc}")
        return None
    return client.fetch_movie(title)
