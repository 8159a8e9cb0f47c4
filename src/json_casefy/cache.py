"""CachedStrategy: LRU-backed memoising proxy for any CaseStrategy.

Large payloads repeat the same handful of keys thousands of times (every
element of an array of records carries the same field names).  Wrapping a
strategy in ``CachedStrategy`` means each distinct key is detected and
re-cased once; repeats are served from memory.  LRU eviction happens
silently when ``max_size`` is exceeded.

Each ``CachedStrategy`` instance maintains its own pair of ``LRUCache``
objects and there is no class-level shared state, so two instances never
interfere with each other.  Lookups and inserts are serialised by a
per-instance ``threading.Lock``, so one instance (and therefore one
``CasefyService``) can be used from several threads at once.  The wrapped
strategy runs outside the lock; two threads missing on the same key may
both compute it, and the results are identical.

Example::

    from json_casefy.cache import CachedStrategy
    from json_casefy.strategies import CamelCaseStrategy

    camel = CachedStrategy(CamelCaseStrategy(), max_size=256)
    camel.transform("user_name")   # computed
    camel.transform("user_name")   # served from cache
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_casefy.protocols import CaseStrategy

__all__ = ["CachedStrategy"]

_MISSING = object()


class CachedStrategy:
    """LRU-backed caching proxy around any CaseStrategy.

    Satisfies the ``CaseStrategy`` Protocol structurally (no inheritance
    required).  Only string inputs are cached; anything else is forwarded
    to the wrapped strategy untouched.

    Args:
        strategy: Any object satisfying the ``CaseStrategy`` Protocol.
        max_size: Maximum number of distinct keys remembered per operation
            (``transform`` and ``detect`` each get their own cache).
            Defaults to 1024.
    """

    def __init__(self, strategy: CaseStrategy, max_size: int = 1024) -> None:
        # Any: only the structural surface is used.
        self._strategy: Any = strategy
        self._transformed: LRUCache[str, str] = LRUCache(maxsize=max_size)
        self._detected: LRUCache[str, bool] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def wrapped(self) -> CaseStrategy:
        """The underlying (uncached) strategy."""
        return self._strategy  # type: ignore[no-any-return]

    @property
    def style_name(self) -> str:
        return str(self._strategy.style_name)

    @property
    def description(self) -> str:
        return str(self._strategy.description)

    @property
    def max_size(self) -> int:
        """The maximum number of entries each cache can hold."""
        return int(self._transformed.maxsize)

    @property
    def curr_size(self) -> int:
        """The number of cached ``transform`` results."""
        with self._lock:
            return int(self._transformed.currsize)

    # ------------------------------------------------------------------
    # CaseStrategy Protocol surface
    # ------------------------------------------------------------------

    def transform(self, value: Any) -> Any:
        """Return ``wrapped.transform(value)``, memoised for string input."""
        if not isinstance(value, str):
            return self._strategy.transform(value)
        with self._lock:
            cached = self._transformed.get(value, _MISSING)
        if cached is not _MISSING:
            return cached
        result = self._strategy.transform(value)
        with self._lock:
            self._transformed[value] = result
        return result

    def detect(self, value: Any) -> bool:
        """Return ``wrapped.detect(value)``, memoised for string input."""
        if not isinstance(value, str):
            return bool(self._strategy.detect(value))
        with self._lock:
            cached = self._detected.get(value, _MISSING)
        if cached is not _MISSING:
            return bool(cached)
        result = bool(self._strategy.detect(value))
        with self._lock:
            self._detected[value] = result
        return result

    def clear(self) -> None:
        """Forget every cached result."""
        with self._lock:
            self._transformed.clear()
            self._detected.clear()
