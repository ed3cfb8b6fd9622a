# ui/playlist_view.py
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QScrollArea, QFrame

from core.commands import Navigate, PlayPlaylist, ShowPlaylistOptions, ShowTrackOptions
from core.models import Playlist
from core.view_models import build_header, build_nav_items, build_track_rows
from ui import theme
from ui.widgets.action_row import ActionRow
from ui.widgets.bottom_nav import BottomNavigation
from ui.widgets.playlist_header import PlaylistHeaderWidget
from ui.widgets.track_row import TrackRowWidget

logger = logging.getLogger(__name__)


class PlaylistView(QWidget):
    """
    Playlist screen: a scrolling column (header, action row, one row per track,
    trailing spacer) above a fixed bottom navigation bar.

    Every control is turned into a command object on ``commandRequested``;
    the view itself never acts on them.
    """
    commandRequested = Signal(object)

    def __init__(self, playlist: Playlist, image_loader, parent=None):
        super().__init__(parent)
        self.image_loader = image_loader
        self.playlist: Playlist | None = None

        self.header: PlaylistHeaderWidget | None = None
        self.action_row: ActionRow | None = None
        self.rows: list[TrackRowWidget] = []
        self.spacer: QWidget | None = None

        self.setObjectName("PlaylistView")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self.scroll = QScrollArea()
        self.scroll.setObjectName("PlaylistScroll")
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        root.addWidget(self.scroll, 1)

        self.bottom_nav = BottomNavigation(build_nav_items())
        self.bottom_nav.navigateRequested.connect(self._on_navigate)
        root.addWidget(self.bottom_nav)

        self._apply_styles()
        self.set_playlist(playlist)

    # -------------------------
    # External API
    # -------------------------
    def set_playlist(self, playlist: Playlist):
        self.playlist = playlist

        content = QWidget()
        content.setObjectName("PlaylistContent")
        col = QVBoxLayout(content)
        col.setContentsMargins(0, 0, 0, 0)
        col.setSpacing(0)

        self.header = PlaylistHeaderWidget(build_header(playlist.header), self.image_loader)
        col.addWidget(self.header)

        self.action_row = ActionRow()
        self.action_row.playRequested.connect(self._on_play)
        self.action_row.optionsRequested.connect(self._on_playlist_options)
        col.addWidget(self.action_row)

        self.rows = []
        for model in build_track_rows(playlist.tracks):
            row = TrackRowWidget(model, self.image_loader)
            row.optionsRequested.connect(self._on_track_options)
            col.addWidget(row)
            self.rows.append(row)

        self.spacer = QWidget()
        self.spacer.setFixedHeight(theme.TRAILING_SPACER)
        col.addWidget(self.spacer)
        col.addStretch(1)

        # setWidget() deletes the previous content widget
        self.scroll.setWidget(content)
        logger.debug("Rendered playlist %r with %d rows", playlist.playlist_id, len(self.rows))

    def row_count(self) -> int:
        return len(self.rows)

    # -------------------------
    # UI Events
    # -------------------------
    def _on_play(self):
        self.commandRequested.emit(PlayPlaylist(self.playlist.playlist_id))

    def _on_playlist_options(self):
        self.commandRequested.emit(ShowPlaylistOptions(self.playlist.playlist_id))

    def _on_track_options(self, position: int):
        track = self.playlist.tracks[position]
        self.commandRequested.emit(ShowTrackOptions(self.playlist.playlist_id, position, track))

    def _on_navigate(self, destination):
        self.commandRequested.emit(Navigate(destination))

    def _apply_styles(self):
        self.setStyleSheet(f"""
        QWidget#PlaylistView,
        QWidget#PlaylistContent,
        QScrollArea#PlaylistScroll {{
            background-color: {theme.BACKGROUND};
            border: none;
        }}
        QScrollBar:vertical {{
            background: {theme.BACKGROUND};
            width: 8px;
        }}
        QScrollBar::handle:vertical {{
            background: #3e3e3e;
            border-radius: 4px;
            min-height: 24px;
        }}
        QScrollBar::add-line:vertical, QScrollBar::sub-line:vertical {{
            height: 0px;
        }}
        """)
