# ui/widgets/action_row.py
from __future__ import annotations

from PySide6.QtCore import QSize, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QToolButton

from ui import theme
from ui.icons import svg_icon


class ActionRow(QWidget):
    playRequested = Signal()
    optionsRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("ActionRow")

        root = QHBoxLayout(self)
        root.setContentsMargins(16, 12, 16, 12)
        root.setSpacing(16)
        root.addStretch(1)

        self.btn_options = QToolButton()
        self.btn_options.setObjectName("BtnOptions")
        self.btn_options.setIcon(svg_icon("more", 24, theme.ICON_MUTED))
        self.btn_options.setIconSize(QSize(24, 24))
        self.btn_options.setToolTip("More options")
        self.btn_options.setAccessibleName("More options")

        self.btn_play = QToolButton()
        self.btn_play.setObjectName("BtnPlay")
        self.btn_play.setIcon(svg_icon("play", 32, "#000000"))
        self.btn_play.setIconSize(QSize(32, 32))
        self.btn_play.setFixedSize(theme.PLAY_BUTTON_SIZE, theme.PLAY_BUTTON_SIZE)
        self.btn_play.setToolTip("Play")
        self.btn_play.setAccessibleName("Play")

        root.addWidget(self.btn_options)
        root.addWidget(self.btn_play)

        self.btn_options.clicked.connect(self.optionsRequested)
        self.btn_play.clicked.connect(self.playRequested)

        self._apply_styles()

    def _apply_styles(self):
        radius = theme.PLAY_BUTTON_SIZE // 2
        self.setStyleSheet(f"""
        QToolButton#BtnOptions {{
            border: none;
            background: transparent;
            padding: 4px;
        }}
        QToolButton#BtnPlay {{
            background: {theme.ACCENT};
            border: none;
            border-radius: {radius}px;
        }}
        QToolButton#BtnPlay:hover {{
            background: #1ed760;
        }}
        QToolButton#BtnPlay:pressed {{
            background: #169c46;
        }}
        """)
