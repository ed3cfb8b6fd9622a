# ui/widgets/track_row.py
from __future__ import annotations

from PySide6.QtCore import Qt, QSize, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QToolButton

from core.view_models import PLAYING_BACKGROUND, TrackRowModel
from ui import theme
from ui.icons import svg_icon
from ui.widgets.cover_slot import CoverSlot


class TrackRowWidget(QWidget):
    optionsRequested = Signal(int)  # position

    def __init__(self, model: TrackRowModel, image_loader, parent=None):
        super().__init__(parent)
        self.model = model
        self.setObjectName("TrackRow")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self._background = model.background

        root = QHBoxLayout(self)
        root.setContentsMargins(16, 8, 16, 8)
        root.setSpacing(12)

        self.cover = CoverSlot(theme.THUMB_SIZE, description=model.title)
        self.cover.bind(image_loader.load(model.cover_url))
        root.addWidget(self.cover, 0, Qt.AlignmentFlag.AlignVCenter)

        text = QVBoxLayout()
        text.setContentsMargins(0, 0, 0, 0)
        text.setSpacing(0)

        # Only created for new releases
        self.lbl_badge: QLabel | None = None
        if model.badge:
            self.lbl_badge = QLabel(model.badge)
            self.lbl_badge.setObjectName("TrackBadge")
            text.addWidget(self.lbl_badge)

        self.lbl_title = QLabel(model.title)
        self.lbl_title.setObjectName("TrackTitle")
        font = self.lbl_title.font()
        font.setPointSize(12)
        font.setBold(model.bold)
        self.lbl_title.setFont(font)

        self.lbl_artist = QLabel(model.artist)
        self.lbl_artist.setObjectName("TrackArtist")

        text.addWidget(self.lbl_title)
        text.addWidget(self.lbl_artist)
        root.addLayout(text, 1)

        self.btn_options = QToolButton()
        self.btn_options.setObjectName("TrackOptions")
        self.btn_options.setIcon(svg_icon("more", 20, theme.ICON_MUTED))
        self.btn_options.setIconSize(QSize(20, 20))
        self.btn_options.setToolTip("More options")
        self.btn_options.setAccessibleName("More options")
        self.btn_options.clicked.connect(lambda: self.optionsRequested.emit(self.model.position))
        root.addWidget(self.btn_options)

        self._apply_styles()

    def background_color(self) -> QColor:
        return QColor(self._background)

    def is_highlighted(self) -> bool:
        return self.background_color() == QColor(PLAYING_BACKGROUND)

    def has_badge(self) -> bool:
        return self.lbl_badge is not None

    def _apply_styles(self):
        self.setStyleSheet(f"""
        QWidget#TrackRow {{
            background-color: {self._background};
        }}
        QLabel#TrackBadge {{
            color: {theme.ACCENT};
            font-size: 10px;
        }}
        QLabel#TrackTitle {{
            color: {theme.TEXT};
        }}
        QLabel#TrackArtist {{
            color: {theme.TEXT_70};
            font-size: 11px;
        }}
        QToolButton#TrackOptions {{
            border: none;
            background: transparent;
            padding: 4px;
        }}
        """)
