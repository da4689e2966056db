# MovieRecord dataclass + the tagged result the OMDb client hands back
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

_FIELDS = {
    "title":    "Title",
    "year":     "Year",
    "director": "Director",
    "plot":     "Plot",
    "poster":   "Poster",
}


@dataclass(slots=True)
class MovieRecord:
    title: str
    year: str
    director: str
    plot: str
    poster: str

    @classmethod
    def from_payload(cls, payload: dict) -> MovieRecord:
        """
        Build from an OMDb JSON object. Extra keys are ignored.

        Raises KeyError for a missing key and TypeError for a value
        that is not a string.
        """
        values = {}
        for attr, key in _FIELDS.items():
            value = payload[key]
            if not isinstance(value, str):
                raise TypeError(f"{key} is {type(value).__name__}, expected str")
            values[attr] = value
        return cls(**values)

    @property
    def has_poster(self) -> bool:
        return bool(self.poster.strip()) and self.poster != "N/A"


class FetchStatus(Enum):
    FOUND           = "found"
    NOT_FOUND       = "not_found"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR    = "decode_error"


@dataclass(slots=True)
class FetchResult:
    """Outcome of one OMDb lookup."""
    status: FetchStatus
    record: MovieRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.FOUND
