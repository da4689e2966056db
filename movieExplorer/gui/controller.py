from __future__ import annotations
from typing import Callable

from PySide6.QtCore import Qt, QObject, QThread, Signal, Slot

from movieExplorer.utils import log_debug
from movieExplorer.metadata.core.models import MovieRecord
from movieExplorer.gui.workers import _SearchWorker, _PosterWorker

# (thread, worker) pairs kept alive until Qt destroys the thread
_live: set[tuple[QThread, QObject]] = set()


def _start_worker(worker: QObject, on_finished: Callable) -> None:
    """Move *worker* onto a fresh QThread and run it; results come back queued."""
    thr = QThread()
    worker.moveToThread(thr)

    pair = (thr, worker)
    _live.add(pair)

    worker.finished.connect(on_finished)
    worker.finished.connect(thr.quit, Qt.DirectConnection)
    worker.finished.connect(worker.deleteLater)
    thr.finished.connect(thr.deleteLater)
    thr.destroyed.connect(lambda: _live.discard(pair))

    thr.started.connect(worker.run)
    thr.start()


def stop_workers() -> None:
    """
    Let every running worker finish and join its thread.
    Hooked to QApplication.aboutToQuit: Qt aborts if a QThread is
    destroyed while still running.
    """
    for thr, _worker in list(_live):
        thr.quit()
        thr.wait()           # bounded by the client's request timeout


class SearchController(QObject):
    """
    View state for the search screen: query text, current record,
    in-flight flag.

    Every submit gets a sequence number; a response that comes back for an
    older number is dropped, so the newest search always wins.
    """
    query_changed   = Signal(str)
    loading_changed = Signal(bool)
    movie_changed   = Signal(object)       # MovieRecord | None
    poster_changed  = Signal(object)       # bytes | None

    def __init__(self, client, start_worker: Callable = _start_worker, parent=None):
        super().__init__(parent)
        self._client       = client
        self._start_worker = start_worker
        self._query        = ""
        self._movie: MovieRecord | None = None
        self._loading      = False
        self._seq          = 0

    # ----- read-only state ---------------------------------------------------
    @property
    def query(self) -> str:
        return self._query

    @property
    def movie(self) -> MovieRecord | None:
        return self._movie

    @property
    def is_loading(self) -> bool:
        return self._loading

    # ----- user actions ------------------------------------------------------
    @Slot(str)
    def set_query(self, text: str) -> None:
        if text == self._query:
            return
        self._query = text
        self.query_changed.emit(text)

    def can_submit(self) -> bool:
        return bool(self._query.strip())

    @Slot()
    def submit(self) -> bool:
        """Start a lookup for the current query. False (and no fetch) if blank."""
        if not self.can_submit():
            return False

        self._seq += 1
        self._set_loading(True)
        self._set_movie(None)
        worker = _SearchWorker(self._client, self._query.strip(), self._seq)
        self._start_worker(worker, self._on_search_finished)
        return True

    # ----- worker callbacks (GUI thread) ------------------------------------
    @Slot(int, object)
    def _on_search_finished(self, seq: int, record) -> None:
        if seq != self._seq:
            log_debug(f"dropping stale search result #{seq} (current #{self._seq})")
            return

        self._set_movie(record)
        self._set_loading(False)

        if record is not None and record.has_poster:
            self._start_worker(
                _PosterWorker(self._client, record.poster, seq),
                self._on_poster_finished,
            )

    @Slot(int, object)
    def _on_poster_finished(self, seq: int, data) -> None:
        if seq != self._seq or self._movie is None:
            return
        self.poster_changed.emit(data)

    # ----- setters that notify -----------------------------------------------
    def _set_loading(self, value: bool) -> None:
        if value == self._loading:
            return
        self._loading = value
        self.loading_changed.emit(value)

    def _set_movie(self, record: MovieRecord | None) -> None:
        if record is None and self._movie is None:
            return
        self._movie = record
        self.movie_changed.emit(record)
