"""File server hit counter shown on the admin page."""

import threading


class ServerMetrics:
    def __init__(self):
        self._hits = 0
        self._lock = threading.Lock()

    @property
    def hits(self) -> int:
        with self._lock:
            return self._hits

    def record_hit(self) -> None:
        with self._lock:
            self._hits += 1

    def reset(self) -> None:
        with self._lock:
            self._hits = 0
