"""HTTP transport for the joke client: a requests session with a bounded response cache."""

import logging
import threading
from collections import OrderedDict
from datetime import datetime

import requests
from cachecontrol import CacheControl
from cachecontrol.cache import BaseCache

from joker.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_CACHE_SIZE = 1024 * 1024


class BoundedMemoryCache(BaseCache):
    """In-memory CacheControl store capped at ``capacity_bytes``.

    Least recently used entries are evicted first. An entry bigger than the
    whole capacity is never stored.
    """

    def __init__(self, capacity_bytes: int = DEFAULT_CACHE_SIZE) -> None:
        if capacity_bytes <= 0:
            raise ValueError("capacity_bytes must be positive")
        self.capacity_bytes = capacity_bytes
        self._entries: OrderedDict[str, bytes] = OrderedDict()
        self._size = 0
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> bytes | None:
        with self._lock:
            value = self._entries.get(key)
            if value is not None:
                self._entries.move_to_end(key)
            return value

    def set(self, key: str, value: bytes, expires: int | datetime | None = None) -> None:
        # Freshness lives in the serialized response, so ``expires`` is not tracked here
        with self._lock:
            self._discard(key)
            if len(value) > self.capacity_bytes:
                logger.debug("Response for %s exceeds cache capacity, not stored", key)
                return
            self._entries[key] = value
            self._size += len(value)
            while self._size > self.capacity_bytes:
                evicted_key, evicted = self._entries.popitem(last=False)
                self._size -= len(evicted)
                logger.debug("Evicted %s from response cache", evicted_key)

    def delete(self, key: str) -> None:
        with self._lock:
            self._discard(key)

    def _discard(self, key: str) -> None:
        value = self._entries.pop(key, None)
        if value is not None:
            self._size -= len(value)


def build_session(settings: Settings) -> requests.Session:
    session = requests.Session()
    if not settings.cache_enabled:
        return session
    return CacheControl(session, cache=BoundedMemoryCache(settings.cache_size_bytes))
