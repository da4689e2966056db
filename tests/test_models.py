"""Unit tests for MovieRecord decoding."""

import pytest

from movieExplorer.metadata.core.models import FetchResult, FetchStatus, MovieRecord


class TestFromPayload:
    def test_fields_copied_verbatim(self, inception_payload):
        record = MovieRecord.from_payload(inception_payload)

        assert record.title == "Inception"
        assert record.year == "2010"
        assert record.director == "Christopher Nolan"
        assert record.plot == inception_payload["Plot"]
        assert record.poster == "http://img.example.com/inception.jpg"

    def test_unknown_keys_ignored(self, inception_payload):
        inception_payload["Ratings"] = [{"Source": "Internet Movie Database", "Value": "8.8/10"}]
        record = MovieRecord.from_payload(inception_payload)
        assert not hasattr(record, "Ratings")

    def test_empty_strings_allowed(self, inception_payload):
        inception_payload["Director"] = ""
        assert MovieRecord.from_payload(inception_payload).director == ""

    @pytest.mark.parametrize("missing", ["Title", "Year", "Director", "Plot", "Poster"])
    def test_missing_key_raises(self, inception_payload, missing):
        del inception_payload[missing]
        with pytest.raises(KeyError):
            MovieRecord.from_payload(inception_payload)

    def test_non_string_value_raises(self, inception_payload):
        inception_payload["Year"] = 2010
        with pytest.raises(TypeError):
            MovieRecord.from_payload(inception_payload)


class TestHasPoster:
    @pytest.mark.parametrize(
        "poster,expected",
        [
            ("http://img.example.com/p.jpg", True),
            ("N/A", False),
            ("", False),
            ("   ", False),
        ],
    )
    def test_has_poster(self, inception, poster, expected):
        inception.poster = poster
        assert inception.has_poster is expected


def test_fetch_result_ok_only_when_found(inception):
    assert FetchResult(FetchStatus.FOUND, record=inception).ok
    assert not FetchResult(FetchStatus.NOT_FOUND, error="Movie not found!").ok
    assert FetchResult(FetchStatus.TRANSPORT_ERROR).record is None
