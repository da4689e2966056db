from __future__ import annotations
from PySide6.QtCore    import Qt, Slot # type: ignore
from PySide6.QtWidgets import QFrame, QLabel, QVBoxLayout # type: ignore

from ..settings import ACCENT_COLOR, TEXT_COLOR, POSTER_HEIGHT
from ..utils    import pixmap_from_bytes
from ..metadata.core.models import MovieRecord


class MovieCard(QFrame):
    """Detail block: title, year, director, poster, plot."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.NoFrame)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 8, 0, 8)
        root.setSpacing(6)

        # ── title ───────────────────────────────────────────────────────
        self.title_label = QLabel(alignment=Qt.AlignCenter)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(
            f"color:{ACCENT_COLOR}; font-size:20pt; font-weight:bold;"
        )
        root.addWidget(self.title_label)
        root.addSpacing(10)

        # ── year / director lines ───────────────────────────────────────
        self.year_label     = QLabel()
        self.director_label = QLabel()
        for lbl in (self.year_label, self.director_label):
            lbl.setStyleSheet(f"color:{TEXT_COLOR}; font-size:13pt;")
            root.addWidget(lbl)

        # ── poster (hidden until bytes arrive) ──────────────────────────
        self.poster_label = QLabel(alignment=Qt.AlignCenter)
        self.poster_label.setMinimumHeight(POSTER_HEIGHT)
        self.poster_label.setContentsMargins(0, 12, 0, 12)
        self.poster_label.hide()
        root.addWidget(self.poster_label)
        root.addSpacing(10)

        # ── plot ────────────────────────────────────────────────────────
        self.plot_label = QLabel(alignment=Qt.AlignJustify)
        self.plot_label.setWordWrap(True)
        self.plot_label.setStyleSheet(
            f"color:{TEXT_COLOR}; font-size:13pt; font-family:serif;"
        )
        root.addWidget(self.plot_label)
        root.addStretch()

        self.hide()

    # ------------------------------------------------------------------
    @Slot(object)
    def show_movie(self, movie: MovieRecord | None) -> None:
        """Fill the card from *movie*, or hide it when there is none."""
        self.poster_label.clear()
        self.poster_label.hide()

        if movie is None:
            self.hide()
            return

        self.title_label.setText(movie.title)
        self.year_label.setText(f"Año: {movie.year}")
        self.director_label.setText(f"Director: {movie.director}")
        self.plot_label.setText(movie.plot)
        self.show()

    @Slot(object)
    def set_poster(self, data: bytes | None) -> None:
        pix = pixmap_from_bytes(data, POSTER_HEIGHT)
        if pix is None:
            self.poster_label.clear()
            self.poster_label.hide()
            return
        self.poster_label.setPixmap(pix)
        self.poster_label.show()
