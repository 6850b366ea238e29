from __future__ import annotations

import threading
from typing import Hashable


class LatestRequestGate:
    """Per-key request generation counter.

    Each search takes a new token; when its reply arrives, only the holder of
    the newest token for that key may publish results. Older replies are
    stale and get dropped, so the last search issued wins.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._latest: dict[Hashable, int] = {}

    def begin(self, key: Hashable) -> int:
        with self._lock:
            token = self._latest.get(key, 0) + 1
            self._latest[key] = token
            return token

    def is_current(self, key: Hashable, token: int) -> bool:
        with self._lock:
            return self._latest.get(key) == token
