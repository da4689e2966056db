from PySide6.QtCore import QObject, Signal, Slot

from movieExplorer.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _SearchWorker(QObject):
    """Runs one OMDb title lookup off the GUI thread."""
    finished = Signal(int, object)          # (request seq, MovieRecord | None)

    def __init__(self, client, title: str, seq: int):
        super().__init__()
        self.client = client
        self.title  = title
        self.seq    = seq

    @Slot()
    def run(self):
        record = None
        try:
            record = self.client.fetch_movie(self.title)
        except Exception as e:
            log_debug(f"search-worker error: {e}")
        finally:
            # always settle, or the spinner never clears
            self.finished.emit(self.seq, record)


class _PosterWorker(QObject):
    finished = Signal(int, object)          # (request seq, bytes | None)

    def __init__(self, client, url: str, seq: int):
        super().__init__()
        self.client = client
        self.url    = url
        self.seq    = seq

    @Slot()
    def run(self):
        data = None
        try:
            data = self.client.fetch_poster(self.url)
        except Exception as e:
            log_debug(f"poster-worker error: {e}")
        finally:
            self.finished.emit(self.seq, data)
