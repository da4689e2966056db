"""Shared pytest fixtures for Movie Explorer tests."""

import json
import os

# widgets need a platform plugin; offscreen works headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
import requests
from PySide6.QtWidgets import QApplication

from movieExplorer import utils
from movieExplorer.metadata.core.models import MovieRecord


INCEPTION_PAYLOAD = {
    "Title": "Inception",
    "Year": "2010",
    "Rated": "PG-13",
    "Director": "Christopher Nolan",
    "Plot": "A thief who steals corporate secrets through the use of dream-sharing technology...",
    "Poster": "http://img.example.com/inception.jpg",
    "imdbID": "tt1375666",
    "Response": "True",
}


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole session."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def temp_log(tmp_path, monkeypatch):
    """Keep log_debug output out of the package directory."""
    path = tmp_path / "debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", path)
    return path


@pytest.fixture
def unwritable_log(temp_log, tmp_path, monkeypatch):
    """LOG_PATH whose parent is a regular file, so every write fails."""
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    path = blocker / "debug.log"
    monkeypatch.setattr(utils, "LOG_PATH", path)
    return path


@pytest.fixture
def inception_payload():
    return dict(INCEPTION_PAYLOAD)


@pytest.fixture
def inception():
    return MovieRecord.from_payload(INCEPTION_PAYLOAD)


def make_response(status=200, body=None, content=None, url="https://www.omdbapi.com/"):
    """Real requests.Response with a canned body."""
    resp = requests.Response()
    resp.status_code = status
    resp.url = url
    resp.reason = "OK" if status < 400 else "Error"
    if content is None:
        content = json.dumps(body).encode() if not isinstance(body, str) else body.encode()
    resp._content = content
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def response_factory():
    return make_response


class FakeSession:
    """Stand-in for requests.Session that records calls and closes."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture
def fake_session(monkeypatch):
    """
    Patch requests.Session inside the OMDb client.

    Call the returned function with ``response=`` or ``error=``; it returns
    the list that collects every session the client opens.
    """
    from movieExplorer.metadata.api_clients import omdb_client

    opened = []

    def install(response=None, error=None):
        def factory():
            session = FakeSession(response=response, error=error)
            opened.append(session)
            return session

        monkeypatch.setattr(omdb_client.requests, "Session", factory)
        return opened

    return install
