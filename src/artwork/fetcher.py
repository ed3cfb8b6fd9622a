from __future__ import annotations

import threading

import requests

from core.config import DEFAULT_IMAGE_TIMEOUT_S, DEFAULT_USER_AGENT


class CoverFetchError(Exception):
    pass


class CoverFetcher:
    """
    Fetches cover art bytes. Each calling thread gets its own requests.Session,
    so concurrent workers never share one.
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout_s: float = DEFAULT_IMAGE_TIMEOUT_S):
        self.user_agent = user_agent
        self.timeout_s = timeout_s
        self._local = threading.local()
        self._lock = threading.Lock()
        self._sessions: list[requests.Session] = []

    @property
    def session(self) -> requests.Session:
        s = getattr(self._local, "session", None)
        if s is None:
            s = requests.Session()
            s.headers.update({"User-Agent": self.user_agent, "Accept": "image/*"})
            self._local.session = s
            with self._lock:
                self._sessions.append(s)
        return s

    def fetch(self, url: str) -> bytes:
        try:
            r = self.session.get(url, timeout=self.timeout_s)
            r.raise_for_status()
        except requests.RequestException as e:
            raise CoverFetchError(f"GET {url} failed: {e}") from e

        if not r.content:
            raise CoverFetchError(f"GET {url} returned an empty body")
        return r.content

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for s in sessions:
            s.close()
