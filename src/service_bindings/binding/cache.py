"""Memoizing wrapper for any binding.

Values are cached once they have been found. Misses are not cached, so a
key that is missing now is looked up again on the next call.
"""

from __future__ import annotations

import contextlib
import logging
import threading

from service_bindings.binding.base import Binding

logger = logging.getLogger(__name__)


class CacheBinding(Binding):
    """Caches values retrieved from a delegate binding.

    The wrapper owns its delegate. ``get_name()`` is never cached and always
    goes to the delegate.

    Args:
        delegate: The binding used to retrieve the original values.
        synchronized: Guard the cache with a lock so the wrapper can be
                      shared between threads. Pass False for a plain
                      single-threaded cache.
    """

    def __init__(self, delegate: Binding, synchronized: bool = True) -> None:
        self._delegate = delegate
        self._cache: dict[str, bytes] = {}
        self._lock: contextlib.AbstractContextManager = (
            threading.Lock() if synchronized else contextlib.nullcontext()
        )

    @property
    def delegate(self) -> Binding:
        return self._delegate

    def get_as_bytes(self, key: str) -> bytes | None:
        with self._lock:
            value = self._cache.get(key)
        if value is not None:
            logger.debug("Cache hit for %s/%s", self._delegate.get_name(), key)
            return value

        # The delegate is called without holding the lock; under contention
        # two threads may both miss, and the first stored value wins.
        value = self._delegate.get_as_bytes(key)
        if value is None:
            return None

        with self._lock:
            return self._cache.setdefault(key, value)

    def get_name(self) -> str:
        return self._delegate.get_name()
