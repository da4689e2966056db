# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Qt, Slot
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QLineEdit,
    QPushButton, QProgressBar, QScrollArea
)

from movieExplorer.settings        import (
    WINDOW_TITLE, ACCENT_COLOR, TEXT_COLOR, INPUT_BACKGROUND, BACKGROUND_COLOR
)
from movieExplorer.gui.controller  import SearchController
from movieExplorer.gui.movie_card  import MovieCard


class MainWindow(QMainWindow):
    """The single search screen."""

    def __init__(self, controller: SearchController):
        super().__init__()
        self.controller = controller
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(480, 860)

        self._build_ui()
        self._connect()
        self._sync_button()

    def _build_ui(self) -> None:
        content = QWidget()
        content.setStyleSheet(f"background:{BACKGROUND_COLOR};")
        root = QVBoxLayout(content)
        root.setContentsMargins(20, 20, 20, 20)
        root.setAlignment(Qt.AlignTop | Qt.AlignHCenter)

        # ── header ──────────────────────────────────────────────────────
        header = QLabel(WINDOW_TITLE, alignment=Qt.AlignCenter)
        header.setStyleSheet(
            f"color:{ACCENT_COLOR}; font-size:24pt; font-weight:bold; font-family:serif;"
        )
        root.addWidget(header)
        root.addSpacing(20)

        # ── query input ─────────────────────────────────────────────────
        self.query_edit = QLineEdit()
        self.query_edit.setPlaceholderText("Buscar película")
        self.query_edit.setStyleSheet(
            f"background:{INPUT_BACKGROUND}; color:{TEXT_COLOR};"
            f" border:1px solid gray; border-radius:6px; padding:8px;"
            f" selection-background-color:{ACCENT_COLOR};"
        )
        root.addWidget(self.query_edit)
        root.addSpacing(12)

        # ── submit ──────────────────────────────────────────────────────
        self.search_button = QPushButton("Buscar")
        self.search_button.setMinimumWidth(120)
        self.search_button.setStyleSheet(
            f"QPushButton {{ background:{ACCENT_COLOR}; color:#000000;"
            f" border-radius:16px; padding:8px 20px; }}"
            "QPushButton:disabled { background:#3a4654; color:#8a8f96; }"
        )
        root.addWidget(self.search_button, 0, Qt.AlignHCenter)
        root.addSpacing(24)

        # ── busy indicator ──────────────────────────────────────────────
        self.spinner = QProgressBar()
        self.spinner.setRange(0, 0)            # indeterminate
        self.spinner.setTextVisible(False)
        self.spinner.setFixedWidth(160)
        self.spinner.setVisible(False)
        root.addWidget(self.spinner, 0, Qt.AlignHCenter)

        # ── result ──────────────────────────────────────────────────────
        self.card = MovieCard()
        root.addWidget(self.card)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

    def _connect(self) -> None:
        c = self.controller
        self.query_edit.textChanged.connect(c.set_query)
        self.query_edit.returnPressed.connect(self._on_submit)
        self.search_button.clicked.connect(self._on_submit)

        c.query_changed.connect(self._sync_button)
        c.loading_changed.connect(self.spinner.setVisible)
        c.movie_changed.connect(self.card.show_movie)
        c.poster_changed.connect(self.card.set_poster)

    # ───────────────────────────────────────────────────────────────────
    @Slot()
    def _sync_button(self) -> None:
        self.search_button.setEnabled(self.controller.can_submit())

    @Slot()
    def _on_submit(self) -> None:
        """Button click or Enter in the input."""
        if self.search_button.isEnabled():
            self.controller.submit()
