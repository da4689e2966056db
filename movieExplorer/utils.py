import sys
from datetime import datetime

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QPixmap, QColor, QPalette # type: ignore
from PySide6.QtWidgets import QApplication # type: ignore

from movieExplorer.settings import (
    LOG_PATH, ACCENT_COLOR, BACKGROUND_COLOR, TEXT_COLOR, INPUT_BACKGROUND
)


def log_debug(message: str) -> None:
    """
    Append timestamped message to the log file.
    Falls back to stderr when the log can't be written (read-only install).
    """
    ts = datetime.now().isoformat(timespec="seconds")
    entry = f"[{ts}] {message}\n"
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(entry)
    except OSError as e:
        print(f"log write failed ({e}): {entry}", end="", file=sys.stderr)


def pixmap_from_bytes(data: bytes | None, height: int) -> QPixmap | None:
    """
    Decode raw image bytes and scale to *height* px.
    Returns None when there is nothing to show or Qt can't decode it.
    """
    if not data:
        return None
    pix = QPixmap()
    if not pix.loadFromData(data):
        return None
    return pix.scaledToHeight(height, Qt.SmoothTransformation)


def apply_dark_palette(app: QApplication) -> None:
    """Apply the dark Fusion palette used by the explorer window."""
    palette = QPalette()
    palette.setColor(QPalette.Window,        QColor(BACKGROUND_COLOR))
    palette.setColor(QPalette.WindowText,    QColor(TEXT_COLOR))
    palette.setColor(QPalette.Base,          QColor(INPUT_BACKGROUND))
    palette.setColor(QPalette.AlternateBase, QColor(INPUT_BACKGROUND))
    palette.setColor(QPalette.Button,        QColor(ACCENT_COLOR))
    palette.setColor(QPalette.ButtonText,    Qt.black)
    palette.setColor(QPalette.Text,          QColor(TEXT_COLOR))
    palette.setColor(QPalette.Link,          QColor(ACCENT_COLOR))
    palette.setColor(QPalette.Highlight,     QColor(ACCENT_COLOR))
    palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setStyle("Fusion")
    app.setPalette(palette)
