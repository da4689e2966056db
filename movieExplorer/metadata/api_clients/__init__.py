"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around external REST APIs.
"""

from movieExplorer.metadata.api_clients.omdb_client import OMDBClient, fetch_movie

__all__ = ["OMDBClient", "fetch_movie"]
