from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

from core.commands import CommandHandler, LoggingCommandHandler
from core.config import Settings


@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warning/error


class AppState(QObject):
    notification = Signal(object)        # emits Notify
    command_dispatched = Signal(object)  # emits the Command after handling

    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.settings = settings or Settings()
        self.playlist = None
        self.image_loader = None
        self.command_handler: CommandHandler = LoggingCommandHandler(self.notify)
        self.queued_notifications: list[Notify] = []

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    @Slot(object)
    def dispatch(self, command):
        self.command_handler.handle(command)
        self.command_dispatched.emit(command)
