import sys
from PySide6.QtWidgets import QApplication, QMessageBox

from movieExplorer.utils                         import apply_dark_palette, log_debug
from movieExplorer.settings                      import WINDOW_TITLE, SETTINGS_WARNINGS
from movieExplorer.metadata.api_clients.omdb_client import OMDBClient
from movieExplorer.gui.controller                import SearchController, stop_workers
from movieExplorer.gui.main_window               import MainWindow
from movieExplorer.gui.window_center             import center_when_shown


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)
    for msg in SETTINGS_WARNINGS:
        log_debug(f"settings: {msg}")

    # -------- credential comes from env / secret.env -----------------
    try:
        client = OMDBClient()
    except RuntimeError as e:
        log_debug(f"startup aborted: {e}")
        QMessageBox.critical(
            None,
            WINDOW_TITLE,
            "OMDB_API_KEY is not set.\n"
            "Export it or add it to movieExplorer/secret.env.",
        )
        sys.exit(1)

    # -------- one controller, one window ------------------------------
    app.aboutToQuit.connect(stop_workers)      # join in-flight lookups before teardown
    controller = SearchController(client)
    window     = MainWindow(controller)
    center_when_shown(window)
    window.show()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
