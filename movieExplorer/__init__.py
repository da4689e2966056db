"""
movieExplorer
~~~~~~~~~~~~~

Top-level package for the Movie Explorer application.

Exports:
  - OMDb lookup: OMDBClient, fetch_movie, MovieRecord, FetchResult, FetchStatus
  - GUI: MainWindow, SearchController
"""

# metadata
from movieExplorer.metadata import (
    MovieRecord,
    FetchResult,
    FetchStatus,
    OMDBClient,
    fetch_movie,
)

# GUI entrypoint
from movieExplorer.gui import MainWindow, SearchController

__all__ = [
    # metadata
    "MovieRecord",
    "FetchResult",
    "FetchStatus",
    "OMDBClient",
    "fetch_movie",
    # GUI
    "MainWindow",
    "SearchController",
]
