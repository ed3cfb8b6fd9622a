"""Pytest configuration: offscreen Qt and image loaders that never touch the network."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QBuffer, QIODevice
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication

from artwork.loader import ImageLoader
from core.models import Playlist, PlaylistHeader, Track


class FakeFetcher:
    def __init__(self, payloads=None, error=None):
        self.payloads = payloads or {}
        self.error = error
        self.calls: list[str] = []

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.payloads[url]


class ManualImageLoader(ImageLoader):
    """Never starts a worker; tests resolve or fail the requests themselves."""

    def _start_worker(self, worker):
        pass


class SyncImageLoader(ImageLoader):
    """Runs the fetch worker on the calling thread."""

    def _start_worker(self, worker):
        worker.run()


def make_png(color: str = "red", size: int = 4) -> bytes:
    img = QImage(size, size, QImage.Format.Format_RGB32)
    img.fill(QColor(color))
    buf = QBuffer()
    buf.open(QIODevice.OpenModeFlag.WriteOnly)
    img.save(buf, "PNG")
    return bytes(buf.data())


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def manual_loader(qapp):
    return ManualImageLoader(fetcher=FakeFetcher())


@pytest.fixture
def png_bytes(qapp):
    return make_png()


@pytest.fixture
def header():
    return PlaylistHeader(
        title="Test Mix",
        description="Songs for tests.",
        owner="QA",
        saves=1234,
        duration_s=65 * 60,
        cover_url="https://img.example/header.jpg",
    )


@pytest.fixture
def seven_tracks():
    # only the 3rd track is playing
    return [
        Track(f"Song {i}", f"Artist {i}", f"https://img.example/{i}.jpg", is_playing=(i == 3))
        for i in range(1, 8)
    ]


@pytest.fixture
def playlist(header, seven_tracks):
    return Playlist(playlist_id="test-mix", header=header, tracks=seven_tracks)
