"""Tests for building playlist snapshots."""

import json

import pytest

from core.catalog import (
    BETTER_MISTAKES_COVER_URL,
    CatalogError,
    demo_playlist,
    load_playlist,
    playlist_from_dict,
)
from core.models import PlaylistError


def _snapshot(**overrides):
    data = {
        "id": "mix",
        "header": {
            "title": "Mix",
            "description": "A mix.",
            "owner": "Me",
            "saves": 10,
            "duration_s": 600,
            "cover_url": "https://img.example/h.jpg",
        },
        "tracks": [
            {"title": "One", "artist": "A", "cover_url": "https://img.example/1.jpg"},
            {"title": "Two", "artist": "B", "cover_url": "https://img.example/2.jpg",
             "new_release": True, "playing": True},
        ],
    }
    data.update(overrides)
    return data


class TestDemoPlaylist:
    def test_has_seven_tracks_in_order(self):
        playlist = demo_playlist()
        assert len(playlist.tracks) == 7
        assert playlist.tracks[0].title == "Sacrifice"
        assert playlist.tracks[-1].title.startswith("My Dear Love")

    def test_third_track_is_playing(self):
        playlist = demo_playlist()
        assert playlist.now_playing_index() == 2
        assert playlist.tracks[2].title == "Better Mistakes"

    def test_header(self):
        header = demo_playlist().header
        assert header.title == "Bebe Rexha - Better Mistakes"
        assert header.saves == 800_000
        assert header.duration_s == 35 * 60
        assert header.cover_url == BETTER_MISTAKES_COVER_URL


class TestPlaylistFromDict:
    def test_valid_snapshot(self):
        playlist = playlist_from_dict(_snapshot())
        assert playlist.playlist_id == "mix"
        assert [t.title for t in playlist.tracks] == ["One", "Two"]
        assert playlist.tracks[0].is_new_release is False
        assert playlist.tracks[1].is_new_release is True
        assert playlist.tracks[1].is_playing is True

    def test_missing_header_key(self):
        data = _snapshot()
        del data["header"]["owner"]
        with pytest.raises(CatalogError, match="header: missing 'owner'"):
            playlist_from_dict(data)

    def test_wrong_type(self):
        data = _snapshot()
        data["tracks"][0]["title"] = 5
        with pytest.raises(CatalogError, match=r"tracks\[0\]: 'title' must be str"):
            playlist_from_dict(data)

    def test_bool_is_not_a_save_count(self):
        data = _snapshot()
        data["header"]["saves"] = True
        with pytest.raises(CatalogError, match="'saves' must be int"):
            playlist_from_dict(data)

    def test_flag_must_be_bool(self):
        data = _snapshot()
        data["tracks"][0]["playing"] = "yes"
        with pytest.raises(CatalogError, match="'playing' must be bool"):
            playlist_from_dict(data)

    def test_two_playing_tracks(self):
        data = _snapshot()
        data["tracks"][0]["playing"] = True
        with pytest.raises(CatalogError) as exc:
            playlist_from_dict(data)
        assert isinstance(exc.value.__cause__, PlaylistError)

    def test_not_an_object(self):
        with pytest.raises(CatalogError):
            playlist_from_dict(["nope"])

    def test_empty_track_list(self):
        playlist = playlist_from_dict(_snapshot(tracks=[]))
        assert playlist.tracks == ()


class TestLoadPlaylist:
    def test_reads_json_file(self, tmp_path):
        path = tmp_path / "mix.json"
        path.write_text(json.dumps(_snapshot()), encoding="utf-8")
        playlist = load_playlist(path)
        assert playlist.playlist_id == "mix"
        assert len(playlist.tracks) == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="Cannot read"):
            load_playlist(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError, match="Invalid JSON"):
            load_playlist(path)
