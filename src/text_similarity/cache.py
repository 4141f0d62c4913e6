"""ResultCache: LRU cache of pairwise comparison results.

Repeated comparisons of the same pair (common when scoring every pair of a
corpus, or when the same candidate is checked again and again) are served
from memory.  Keys are built from the elements themselves, so a ``str`` and
an equal tuple of characters share an entry.  Pairs whose elements are not
hashable bypass the cache and are always computed.

Each ``ResultCache`` instance owns its own ``LRUCache``; there is no
class-level shared state, so two separate instances never interfere.

Example::

    from text_similarity.cache import ResultCache

    cache = ResultCache(max_size=256)
    key = cache.make_key("distance", "frog", "fog")
    cache.get_or_compute(key, lambda: 1)   # computes, stores 1
    cache.get_or_compute(key, lambda: 99)  # 1, served from memory
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from cachetools import LRUCache

from text_similarity.inputs import as_input

__all__ = ["ResultCache"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResultCache:
    """LRU-backed cache of pairwise results.

    LRU eviction is silent: the least-recently-used entry is dropped when
    ``max_size`` is exceeded.

    Args:
        max_size: Maximum number of results to hold in memory.  Defaults to 512.
    """

    def __init__(self, max_size: int = 512) -> None:
        self._cache: LRUCache[Hashable, Any] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @staticmethod
    def make_key(kind: str, left: Any, right: Any) -> Hashable | None:
        """Build a cache key for a pair, or None when it cannot be hashed.

        Args:
            kind:  Discriminator for the cached quantity (e.g. ``"distance:3"``).
            left:  First sequence.
            right: Second sequence.

        Returns:
            ``(kind, left_elements, right_elements)`` or None when any element
            is unhashable.
        """
        left_view = as_input(left)
        right_view = as_input(right)
        key = (
            kind,
            tuple(left_view.at(i) for i in range(len(left_view))),
            tuple(right_view.at(i) for i in range(len(right_view))),
        )
        try:
            hash(key)
        except TypeError:
            return None
        return key

    def get_or_compute(self, key: Hashable | None, compute: Callable[[], T]) -> T:
        """Return the cached value for ``key``, computing and storing it on a miss.

        A ``None`` key (unhashable pair) always computes and never stores.
        """
        if key is None:
            return compute()
        if key in self._cache:
            logger.debug("cache hit for %s", key[0] if isinstance(key, tuple) else key)
            value: T = self._cache[key]
            return value
        value = compute()
        self._cache[key] = value
        return value

    def clear(self) -> None:
        """Drop every cached result."""
        self._cache.clear()
