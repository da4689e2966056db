"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – MovieRecord + the tagged FetchResult
* api_clients – OMDb title lookup
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieExplorer.metadata.core.models import MovieRecord, FetchResult, FetchStatus

# ── API client ────────────────────────────────────────────────────────────
from movieExplorer.metadata.api_clients.omdb_client import OMDBClient, fetch_movie

__all__ = [
    "MovieRecord",
    "FetchResult",
    "FetchStatus",
    "OMDBClient",
    "fetch_movie",
]
