# ui/widgets/cover_slot.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QImage, QPixmap
from PySide6.QtWidgets import QLabel, QSizePolicy

from artwork.loader import CoverRequest, PENDING, READY, FAILED
from ui import theme


def _crop_to(image: QImage, w: int, h: int) -> QPixmap:
    scaled = image.scaled(w, h, Qt.AspectRatioMode.KeepAspectRatioByExpanding,
                          Qt.TransformationMode.SmoothTransformation)
    x = max(0, (scaled.width() - w) // 2)
    y = max(0, (scaled.height() - h) // 2)
    return QPixmap.fromImage(scaled.copy(x, y, w, h))


class CoverSlot(QLabel):
    """
    Shows one cover-art request: a flat placeholder while pending, the cropped
    bitmap once ready, and a failure placeholder if the load failed.
    """

    def __init__(self, size: int | None = None, description: str = "", parent=None):
        super().__init__(parent)
        self.state = PENDING
        self._image: QImage | None = None
        self._request: CoverRequest | None = None

        self.setAccessibleName(description)
        self.setToolTip(description)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        if size is not None:
            self.setFixedSize(size, size)
        else:
            self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            self.setMinimumSize(1, 1)
        self._show_placeholder(theme.PLACEHOLDER)

    def bind(self, request: CoverRequest):
        if self._request is not None:
            self._request.ready.disconnect(self._on_ready)
            self._request.failed.disconnect(self._on_failed)
        self._request = request

        if request.state == READY:
            self._on_ready(request.image)
        elif request.state == FAILED:
            self._on_failed(request.error or "")
        else:
            self.state = PENDING
            self._show_placeholder(theme.PLACEHOLDER)
            request.ready.connect(self._on_ready)
            request.failed.connect(self._on_failed)

    def _on_ready(self, image: QImage):
        self.state = READY
        self._image = image
        self.setStyleSheet("")
        self._render()

    def _on_failed(self, _message: str):
        self.state = FAILED
        self._image = None
        self._show_placeholder(theme.PLACEHOLDER_FAILED)

    def _show_placeholder(self, color: str):
        self.clear()
        self.setStyleSheet(f"background-color: {color};")

    def _render(self):
        if self._image is None or self._image.isNull():
            return
        w, h = max(1, self.width()), max(1, self.height())
        self.setPixmap(_crop_to(self._image, w, h))

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.state == READY:
            self._render()
