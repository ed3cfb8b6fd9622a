from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QWidget, QFrame, QLabel, QHBoxLayout

from ui import theme


@dataclass(frozen=True)
class ToastData:
    message: str
    notify_type: str = "info"  # "info" | "success" | "warning" | "error"
    timeout_ms: int = 3000


def _colors(kind: str) -> tuple[str, str]:
    """
    Returns (bg, border).
    """
    kind = (kind or "info").lower()
    if kind == "success":
        return "#0b2a17", theme.ACCENT
    if kind == "warning":
        return "#2a1a05", "#f59e0b"
    if kind == "error":
        return "#2a0a0a", "#ef4444"
    return "#181818", "#535353"


class ToastWidget(QFrame):
    def __init__(self, data: ToastData, parent: QWidget):
        super().__init__(parent)
        self.data = data
        bg, border = _colors(data.notify_type)

        self.setObjectName("Toast")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet(f"""
        QFrame#Toast {{
            background: {bg};
            border: 1px solid {border};
            border-radius: 12px;
        }}
        QLabel {{
            color: {theme.TEXT};
            font-size: 12px;
        }}
        """)

        root = QHBoxLayout(self)
        root.setContentsMargins(12, 8, 12, 8)
        self.lbl = QLabel(data.message)
        self.lbl.setWordWrap(True)
        root.addWidget(self.lbl)


class ToastManager(QWidget):
    """
    Overlay that stacks toasts above the bottom edge of its host, newest last.
    """
    def __init__(self, host: QWidget, bottom_margin: int = theme.NAV_HEIGHT + 12):
        super().__init__(host)
        self.host = host
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WidgetAttribute.WA_NoSystemBackground, True)

        self._toasts: list[ToastWidget] = []
        self._bottom_margin = bottom_margin
        self._spacing = 8
        self._max_visible = 3

    def toasts(self) -> list[ToastWidget]:
        return list(self._toasts)

    def show_toast(self, message: str, notify_type: str = "info", timeout_ms: int = 3000):
        self.setGeometry(self.host.rect())
        self.raise_()
        self.show()

        toast = ToastWidget(ToastData(message, notify_type, timeout_ms), parent=self)
        toast.setFixedWidth(min(360, max(220, self.width() - 32)))
        self._toasts.append(toast)

        while len(self._toasts) > self._max_visible:
            old = self._toasts.pop(0)
            old.hide()
            old.deleteLater()

        toast.show()
        self._layout_toasts()
        QTimer.singleShot(max(500, int(timeout_ms)), lambda: self._dismiss_toast(toast))

    def _dismiss_toast(self, toast: ToastWidget):
        if toast not in self._toasts:
            return
        self._toasts.remove(toast)
        toast.hide()
        toast.deleteLater()
        self._layout_toasts()

    def _layout_toasts(self):
        y = self.height() - self._bottom_margin
        for toast in reversed(self._toasts):
            toast.adjustSize()
            y -= toast.height()
            toast.move((self.width() - toast.width()) // 2, y)
            y -= self._spacing

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self._layout_toasts()
