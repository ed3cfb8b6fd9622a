# core/commands.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol, Union

from core.models import Track

logger = logging.getLogger(__name__)


class Destination(Enum):
    HOME = "home"
    SEARCH = "search"
    LIBRARY = "library"


@dataclass(frozen=True)
class PlayPlaylist:
    playlist_id: str


@dataclass(frozen=True)
class ShowPlaylistOptions:
    playlist_id: str


@dataclass(frozen=True)
class ShowTrackOptions:
    playlist_id: str
    position: int
    track: Track


@dataclass(frozen=True)
class Navigate:
    destination: Destination


Command = Union[PlayPlaylist, ShowPlaylistOptions, ShowTrackOptions, Navigate]


class CommandHandler(Protocol):
    def handle(self, command: Command) -> None: ...


def describe(command: Command) -> str:
    if isinstance(command, PlayPlaylist):
        return "Playback"
    if isinstance(command, ShowPlaylistOptions):
        return "Playlist options"
    if isinstance(command, ShowTrackOptions):
        return f"Options for “{command.track.title}”"
    if isinstance(command, Navigate):
        return f"{command.destination.name.title()} navigation"
    return type(command).__name__


class LoggingCommandHandler:
    """
    Default handler: there is no playback service or router behind the screen,
    so commands are logged and the user is told the action isn't available.
    """

    def __init__(self, notify: Callable[[str, str], None] | None = None):
        self._notify = notify

    def handle(self, command: Command) -> None:
        logger.info("Command: %r", command)
        if self._notify is not None:
            self._notify(f"{describe(command)} isn't available yet", "info")
