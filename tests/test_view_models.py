"""Tests for the pure list-rendering pass."""

from core.commands import Destination
from core.models import Track
from core.view_models import (
    IDLE_BACKGROUND,
    NEW_RELEASE_BADGE,
    PLAYING_BACKGROUND,
    build_header,
    build_nav_items,
    build_track_rows,
)


def test_rows_follow_input_order(seven_tracks):
    rows = build_track_rows(seven_tracks)
    assert [r.title for r in rows] == [t.title for t in seven_tracks]
    assert [r.position for r in rows] == list(range(7))


def test_highlight_and_bold_follow_playing_flag(seven_tracks):
    for row, track in zip(build_track_rows(seven_tracks), seven_tracks):
        assert row.highlighted == track.is_playing
        assert row.bold == track.is_playing
        assert row.background == (PLAYING_BACKGROUND if track.is_playing else IDLE_BACKGROUND)


def test_only_third_row_highlighted(seven_tracks):
    rows = build_track_rows(seven_tracks)
    assert [i for i, r in enumerate(rows) if r.highlighted] == [2]
    assert rows[2].title == "Song 3"


def test_badge_only_for_new_releases():
    tracks = [
        Track("New", "A", "u", is_new_release=True),
        Track("Old", "A", "u"),
    ]
    rows = build_track_rows(tracks)
    assert rows[0].badge == NEW_RELEASE_BADGE
    assert rows[1].badge is None


def test_new_release_and_playing_together():
    (row,) = build_track_rows([Track("Both", "A", "u", is_new_release=True, is_playing=True)])
    assert row.badge == NEW_RELEASE_BADGE
    assert row.highlighted and row.bold


def test_empty_input():
    assert build_track_rows([]) == []


def test_header_model(header):
    model = build_header(header)
    assert model.title == "Test Mix"
    assert model.subtitle == "Songs for tests."
    assert model.attribution == "QA • 1,234 saves • 1h 5m"
    assert model.cover_url == header.cover_url


def test_nav_items():
    items = build_nav_items()
    assert [i.label for i in items] == ["Home", "Search", "Your Library"]
    assert [i.destination for i in items] == [Destination.HOME, Destination.SEARCH, Destination.LIBRARY]
    assert [i.selected for i in items] == [True, False, False]
    # every entry has its own glyph
    assert len({i.icon for i in items}) == 3
