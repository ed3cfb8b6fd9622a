# core/models.py
from __future__ import annotations
from dataclasses import dataclass, field


class PlaylistError(ValueError):
    pass


@dataclass(frozen=True)
class Track:
    title: str
    artist: str
    cover_url: str
    is_new_release: bool = False
    is_playing: bool = False


@dataclass(frozen=True)
class PlaylistHeader:
    title: str
    description: str
    owner: str
    saves: int
    duration_s: int
    cover_url: str


@dataclass(frozen=True)
class Playlist:
    playlist_id: str
    header: PlaylistHeader
    tracks: tuple[Track, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept any iterable, store a tuple
        object.__setattr__(self, "tracks", tuple(self.tracks))

        playing = [i for i, t in enumerate(self.tracks) if t.is_playing]
        if len(playing) > 1:
            raise PlaylistError(
                f"Playlist {self.playlist_id!r} has {len(playing)} tracks marked as playing "
                f"(positions {playing}); at most one is allowed"
            )

    def now_playing_index(self) -> int | None:
        for i, t in enumerate(self.tracks):
            if t.is_playing:
                return i
        return None
