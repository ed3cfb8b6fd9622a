from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QShortcut, QKeySequence

from ui.playlist_view import PlaylistView
from ui.widgets.toast import ToastManager


class MainWindow(QMainWindow):
    def __init__(self, app_state):
        super().__init__()
        self.setWindowTitle("Playlist View")
        self.resize(420, 820)
        self.app_state = app_state

        self.playlist_view = PlaylistView(app_state.playlist, app_state.image_loader)
        self.setCentralWidget(self.playlist_view)

        # Controls only emit commands; the app state decides what they mean
        self.playlist_view.commandRequested.connect(self.app_state.dispatch)

        self.toasts = ToastManager(self)
        self.app_state.notification.connect(self._on_notify)

        QShortcut(QKeySequence("Ctrl+Q"), self, activated=self.close)

        self.show_queued_notifications()

    def show_queued_notifications(self):
        for n in self.app_state.queued_notifications:
            self.toasts.show_toast(n.message, n.notify_type)
        self.app_state.queued_notifications.clear()

    def _on_notify(self, n):
        self.toasts.show_toast(n.message, n.notify_type)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.toasts.setGeometry(self.rect())

    def closeEvent(self, event):
        if self.app_state.image_loader is not None:
            self.app_state.image_loader.shutdown()
        super().closeEvent(event)
