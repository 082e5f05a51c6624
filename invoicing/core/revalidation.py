"""
Path revalidation registry.

Write actions call :meth:`RevalidationRegistry.revalidate` for the listing
they changed; read endpoints derive their ETag from :meth:`version` so a
client holding a stale copy refetches on the next request.

Versions live in process memory. With several workers (uvicorn
``--workers N``) a write handled by one worker does not change the ETag
served by the others, which keep answering 304 with stale data; run the
listing behind a single worker or move the counters to shared storage.
"""

from __future__ import annotations

import logging
import secrets
import threading
from typing import Dict

logger = logging.getLogger(__name__)


def _normalize(path: str) -> str:
    value = (path or "").strip()
    if not value.startswith("/"):
        value = "/" + value
    return value.rstrip("/") or "/"


class RevalidationRegistry:
    def __init__(self) -> None:
        self._versions: Dict[str, int] = {}
        self._lock = threading.Lock()
        # Versions restart at zero with the process; the epoch keeps ETags unique.
        self._epoch = secrets.token_hex(4)

    def revalidate(self, path: str) -> int:
        key = _normalize(path)
        with self._lock:
            version = self._versions.get(key, 0) + 1
            self._versions[key] = version
        logger.info("Revalidated %s (version %d)", key, version)
        return version

    def version(self, path: str) -> int:
        with self._lock:
            return self._versions.get(_normalize(path), 0)

    def etag(self, path: str) -> str:
        return f'W/"{self._epoch}:{_normalize(path)}:{self.version(path)}"'
