from __future__ import annotations

import logging
import threading
import time
import urllib.request
from typing import Dict, Protocol, Tuple


logger = logging.getLogger("vite_core.heartbeat")


class HeartbeatChecker(Protocol):
    def ping(self, url: str, timeout: float) -> bool:
        ...


class HttpHeartbeatChecker:
    """Checks whether the development server answers a plain GET.

    Fails closed: a refused connection, a timeout or a non-success status all
    report the server as down. With ``cache_ttl`` > 0 the last answer for a URL
    is reused for that many seconds.
    """

    def __init__(self, cache_ttl: float = 0.0) -> None:
        self.cache_ttl = max(0.0, float(cache_ttl))
        self._cache: Dict[str, Tuple[float, bool]] = {}
        self._lock = threading.Lock()

    def ping(self, url: str, timeout: float) -> bool:
        if self.cache_ttl:
            now = time.monotonic()
            with self._lock:
                cached = self._cache.get(url)
            if cached and now - cached[0] <= self.cache_ttl:
                return cached[1]
        alive = self._probe(url, timeout)
        if self.cache_ttl:
            with self._lock:
                self._cache[url] = (time.monotonic(), alive)
        return alive

    def _probe(self, url: str, timeout: float) -> bool:
        try:
            with urllib.request.urlopen(url, timeout=timeout) as resp:  # nosec - configured dev server
                status = resp.getcode() or 200
                return 200 <= status < 400
        except Exception as exc:
            logger.debug("Development server is not reachable: %s", exc, extra={"url": url})
            return False

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()
