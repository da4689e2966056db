from movieExplorer.metadata.core.models import MovieRecord, FetchResult, FetchStatus

__all__ = ["MovieRecord", "FetchResult", "FetchStatus"]
