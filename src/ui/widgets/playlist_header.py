# ui/widgets/playlist_header.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QGridLayout, QVBoxLayout, QHBoxLayout, QLabel

from core.view_models import HeaderModel
from ui import theme
from ui.icons import svg_pixmap
from ui.widgets.cover_slot import CoverSlot


class PlaylistHeaderWidget(QWidget):
    def __init__(self, model: HeaderModel, image_loader, parent=None):
        super().__init__(parent)
        self.model = model
        self.setObjectName("PlaylistHeader")
        self.setFixedHeight(theme.HEADER_HEIGHT)

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)

        # Full-bleed cover with the text column stacked in the same cell
        self.cover = CoverSlot(description=f"Cover: {model.title}")
        self.cover.bind(image_loader.load(model.cover_url))
        grid.addWidget(self.cover, 0, 0)

        overlay = QWidget()
        overlay.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        col = QVBoxLayout(overlay)
        col.setContentsMargins(16, 32, 16, 32)
        col.setSpacing(0)
        col.addStretch(1)

        self.lbl_title = QLabel(model.title)
        self.lbl_title.setObjectName("HeaderTitle")
        self.lbl_title.setWordWrap(True)

        self.lbl_subtitle = QLabel(model.subtitle)
        self.lbl_subtitle.setObjectName("HeaderSubtitle")
        self.lbl_subtitle.setWordWrap(True)

        attribution = QHBoxLayout()
        attribution.setContentsMargins(0, 4, 0, 0)
        attribution.setSpacing(4)

        self.lbl_glyph = QLabel()
        self.lbl_glyph.setPixmap(svg_pixmap("play", 16, theme.ACCENT))
        self.lbl_glyph.setAccessibleName("Spotify")

        self.lbl_attribution = QLabel(model.attribution)
        self.lbl_attribution.setObjectName("HeaderAttribution")

        attribution.addWidget(self.lbl_glyph)
        attribution.addWidget(self.lbl_attribution, 1)

        col.addWidget(self.lbl_title)
        col.addWidget(self.lbl_subtitle)
        col.addLayout(attribution)

        grid.addWidget(overlay, 0, 0)

        self._apply_styles()

    def _apply_styles(self):
        self.setStyleSheet(f"""
        QLabel#HeaderTitle {{
            color: {theme.TEXT};
            font-size: 32px;
            font-weight: bold;
        }}
        QLabel#HeaderSubtitle {{
            color: {theme.TEXT_80};
            font-size: 12px;
        }}
        QLabel#HeaderAttribution {{
            color: {theme.TEXT_70};
            font-size: 12px;
        }}
        """)
