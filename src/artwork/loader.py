# artwork/loader.py
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QThread, Signal
from PySide6.QtGui import QImage

from artwork.fetcher import CoverFetcher

logger = logging.getLogger(__name__)

PENDING = "pending"
READY = "ready"
FAILED = "failed"


class CoverRequest(QObject):
    """
    Handle for one cover-art URL. Starts pending and resolves exactly once,
    either with a decoded QImage or with an error message.
    """
    ready = Signal(object)   # QImage
    failed = Signal(str)     # error message

    def __init__(self, url: str, parent=None):
        super().__init__(parent)
        self.url = url
        self.state = PENDING
        self.image: QImage | None = None
        self.error: str | None = None

    def is_done(self) -> bool:
        return self.state != PENDING

    def resolve(self, image: QImage):
        if self.is_done():
            return
        self.state = READY
        self.image = image
        self.ready.emit(image)

    def fail(self, message: str):
        if self.is_done():
            return
        self.state = FAILED
        self.error = message
        self.failed.emit(message)


class CoverFetchWorker(QThread):
    finished_signal = Signal(bool, str, object)  # ok, url, QImage | error message

    def __init__(self, fetcher, url: str, parent=None):
        super().__init__(parent)
        self.fetcher = fetcher
        self.url = url

    def run(self):
        try:
            data = self.fetcher.fetch(self.url)
            image = QImage.fromData(data)
            if image.isNull():
                self.finished_signal.emit(False, self.url, f"Could not decode image from {self.url}")
                return
            self.finished_signal.emit(True, self.url, image)
        except Exception as e:
            self.finished_signal.emit(False, self.url, str(e))


class ImageLoader(QObject):
    def __init__(self, fetcher=None, offline: bool = False, parent=None):
        super().__init__(parent)
        self.fetcher = fetcher if fetcher is not None else CoverFetcher()
        self.offline = offline
        self._requests: dict[str, CoverRequest] = {}
        self._workers: dict[str, CoverFetchWorker] = {}

    def load(self, url: str) -> CoverRequest:
        url = (url or "").strip()
        req = self._requests.get(url)
        if req is not None:
            return req

        req = CoverRequest(url, self)
        self._requests[url] = req

        if not url:
            req.fail("No cover art URL")
            return req
        if self.offline:
            req.fail("Offline mode")
            return req

        worker = CoverFetchWorker(self.fetcher, url)
        worker.finished_signal.connect(self._on_worker_finished)
        # keep the QThread alive until run() has fully returned
        worker.finished.connect(lambda u=url: self._retire(u))
        self._workers[url] = worker
        logger.debug("Fetching cover %s", url)
        self._start_worker(worker)
        return req

    def pending_count(self) -> int:
        return len(self._workers)

    def running_count(self) -> int:
        return sum(1 for w in self._workers.values() if w.isRunning())

    def shutdown(self):
        # unbounded wait; each fetch is bounded by the HTTP timeout
        for worker in list(self._workers.values()):
            if worker.isRunning():
                logger.debug("Waiting for cover fetch %s", worker.url)
                worker.wait()
        close = getattr(self.fetcher, "close", None)
        if close is not None:
            close()

    def _start_worker(self, worker: CoverFetchWorker):
        worker.start()

    def _retire(self, url: str):
        worker = self._workers.pop(url, None)
        if worker is not None:
            worker.deleteLater()

    def _on_worker_finished(self, ok: bool, url: str, payload):
        req = self._requests.get(url)
        if req is None:
            return

        if ok:
            req.resolve(payload)
        else:
            logger.warning("Cover art failed: %s", payload)
            req.fail(str(payload))
