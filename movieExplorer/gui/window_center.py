"""
window_center
~~~~~~~~~~~~~
Centre the explorer window on the screen it first appears on.
Call ``center_when_shown(widget)`` **before** ``show()``.
"""

from PySide6.QtCore import QObject, QEvent, QTimer
from PySide6.QtGui  import QGuiApplication
from PySide6.QtWidgets import QWidget


class _CenterOnceFilter(QObject):
    """Event filter that centres its widget on the first Show, then detaches."""
    def __init__(self, widget: QWidget) -> None:
        super().__init__(widget)
        self._widget = widget
        widget.installEventFilter(self)

    def eventFilter(self, obj, ev):
        if obj is self._widget and ev.type() == QEvent.Type.Show:
            # native geometry isn't final until the event loop runs once
            QTimer.singleShot(0, self._center_and_remove)
        return False

    def _center_and_remove(self) -> None:
        screen = self._widget.screen() or QGuiApplication.primaryScreen()
        if screen is not None:
            frame = self._widget.frameGeometry()
            frame.moveCenter(screen.availableGeometry().center())
            self._widget.move(frame.topLeft())
        self._widget.removeEventFilter(self)
        self.deleteLater()


def center_when_shown(widget: QWidget) -> None:
    _CenterOnceFilter(widget)
