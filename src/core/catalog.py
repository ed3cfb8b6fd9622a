# core/catalog.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from core.models import Playlist, PlaylistError, PlaylistHeader, Track

logger = logging.getLogger(__name__)

BETTER_MISTAKES_COVER_URL = (
    "https://cdn-images.dzcdn.net/images/cover/"
    "60edd94332c8fbd8b0f48f7bfd5fe6b8/1900x1900-000000-81-0-0.jpg"
)


class CatalogError(Exception):
    pass


def demo_playlist() -> Playlist:
    cover = BETTER_MISTAKES_COVER_URL
    return Playlist(
        playlist_id="bebe-rexha-better-mistakes",
        header=PlaylistHeader(
            title="Bebe Rexha - Better Mistakes",
            description="Segundo álbum de estudio de Bebe Rexha (2021).",
            owner="Bebe Rexha",
            saves=800_000,
            duration_s=35 * 60,
            cover_url=cover,
        ),
        tracks=(
            Track("Sacrifice", "Bebe Rexha", cover),
            Track("Sabotage", "Bebe Rexha", cover),
            Track("Better Mistakes", "Bebe Rexha", cover, is_playing=True),
            Track("Die For A Man (feat. Lil Uzi Vert)", "Bebe Rexha", cover),
            Track("Baby I'm Jealous (feat. Doja Cat)", "Bebe Rexha", cover),
            Track("Empty", "Bebe Rexha", cover),
            Track("My Dear Love (feat. Ty Dolla $ign)", "Bebe Rexha", cover),
        ),
    )


def _require(data: Mapping[str, Any], key: str, kind: type, where: str):
    if key not in data:
        raise CatalogError(f"{where}: missing '{key}'")
    value = data[key]
    # bool is an int subclass; don't let True pass as a save count
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise CatalogError(f"{where}: '{key}' must be {kind.__name__}, got {type(value).__name__}")
    return value


def _flag(data: Mapping[str, Any], key: str, where: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise CatalogError(f"{where}: '{key}' must be bool, got {type(value).__name__}")
    return value


def playlist_from_dict(data: Mapping[str, Any]) -> Playlist:
    """
    Build a Playlist from the JSON snapshot shape:

        {"id": ..., "header": {title, description, owner, saves, duration_s, cover_url},
         "tracks": [{title, artist, cover_url, new_release?, playing?}, ...]}
    """
    if not isinstance(data, Mapping):
        raise CatalogError(f"snapshot must be an object, got {type(data).__name__}")

    playlist_id = _require(data, "id", str, "playlist")
    h = _require(data, "header", Mapping, "playlist")
    header = PlaylistHeader(
        title=_require(h, "title", str, "header"),
        description=_require(h, "description", str, "header"),
        owner=_require(h, "owner", str, "header"),
        saves=_require(h, "saves", int, "header"),
        duration_s=_require(h, "duration_s", int, "header"),
        cover_url=_require(h, "cover_url", str, "header"),
    )

    tracks: list[Track] = []
    for i, t in enumerate(_require(data, "tracks", list, "playlist")):
        where = f"tracks[{i}]"
        if not isinstance(t, Mapping):
            raise CatalogError(f"{where}: must be an object")
        tracks.append(
            Track(
                title=_require(t, "title", str, where),
                artist=_require(t, "artist", str, where),
                cover_url=_require(t, "cover_url", str, where),
                is_new_release=_flag(t, "new_release", where),
                is_playing=_flag(t, "playing", where),
            )
        )

    try:
        return Playlist(playlist_id=playlist_id, header=header, tracks=tracks)
    except PlaylistError as e:
        raise CatalogError(str(e)) from e


def load_playlist(path: str | Path) -> Playlist:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Cannot read playlist snapshot {path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogError(f"Invalid JSON in {path}: {e}") from e

    playlist = playlist_from_dict(data)
    logger.info("Loaded playlist %r (%d tracks) from %s", playlist.playlist_id, len(playlist.tracks), path)
    return playlist
