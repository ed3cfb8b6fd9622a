# core/view_models.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from core.commands import Destination
from core.formatting import attribution_line
from core.models import PlaylistHeader, Track

NEW_RELEASE_BADGE = "New release"
PLAYING_BACKGROUND = "#8B0000"
IDLE_BACKGROUND = "transparent"


@dataclass(frozen=True)
class TrackRowModel:
    position: int
    title: str
    artist: str
    cover_url: str
    badge: str | None
    bold: bool
    highlighted: bool
    background: str


@dataclass(frozen=True)
class HeaderModel:
    title: str
    subtitle: str
    attribution: str
    cover_url: str


@dataclass(frozen=True)
class NavItem:
    destination: Destination
    label: str
    icon: str       # key into ui.icons
    selected: bool


def build_track_row(position: int, track: Track) -> TrackRowModel:
    # highlight and bold are the same flag
    playing = bool(track.is_playing)
    return TrackRowModel(
        position=position,
        title=track.title,
        artist=track.artist,
        cover_url=track.cover_url,
        badge=NEW_RELEASE_BADGE if track.is_new_release else None,
        bold=playing,
        highlighted=playing,
        background=PLAYING_BACKGROUND if playing else IDLE_BACKGROUND,
    )


def build_track_rows(tracks: Iterable[Track]) -> list[TrackRowModel]:
    return [build_track_row(i, t) for i, t in enumerate(tracks)]


def build_header(header: PlaylistHeader) -> HeaderModel:
    return HeaderModel(
        title=header.title,
        subtitle=header.description,
        attribution=attribution_line(header),
        cover_url=header.cover_url,
    )


def build_nav_items() -> list[NavItem]:
    # Selection isn't routed anywhere yet: Home is always the selected entry.
    return [
        NavItem(Destination.HOME, "Home", "home", selected=True),
        NavItem(Destination.SEARCH, "Search", "search", selected=False),
        NavItem(Destination.LIBRARY, "Your Library", "library", selected=False),
    ]
