"""SequenceComparator: orchestrator that wires both engines + ResultCache.

This is the wiring layer between the raw engines and the public API.  It
binds one immutable ``DistanceConfig``, routes repeated pairs through a
per-instance LRU cache, and packs both scores into a ``ComparisonResult``
with wall-clock timing.

Caching never changes a result: the engines are pure, so a cached value is
exactly what a fresh computation would return.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from text_similarity.algorithm.config import DistanceConfig
from text_similarity.algorithm.jaro_winkler import jaro_winkler_similarity
from text_similarity.algorithm.levenshtein import LevenshteinDistance
from text_similarity.cache import ResultCache
from text_similarity.inputs import as_input
from text_similarity.result import ComparisonResult

__all__ = ["SequenceComparator"]

logger = logging.getLogger(__name__)


class SequenceComparator:
    """Orchestrator for sequence comparison.

    Two separate ``SequenceComparator`` instances never share cache state;
    each instance maintains its own ``ResultCache``.

    Example::

        from text_similarity.algorithm import DistanceConfig
        from text_similarity.comparator import SequenceComparator

        cmp = SequenceComparator(DistanceConfig(threshold=7))
        result = cmp.compare("elephant", "hippo")
        print(result.distance)     # 7
        print(result.similarity)   # ~0.44
    """

    def __init__(
        self,
        config: DistanceConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the comparator.

        Args:
            config: Distance configuration.  Defaults to ``DistanceConfig()``
                (unlimited edit distance).
            max_cache_size: Maximum number of pair results held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``DistanceConfig``.
        """
        self._config: DistanceConfig = config if config is not None else DistanceConfig()
        self._levenshtein = LevenshteinDistance(config=self._config)
        self._cache = ResultCache(max_size=max_cache_size)

    @property
    def config(self) -> DistanceConfig:
        return self._config

    @property
    def cache(self) -> ResultCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def distance(self, left: Any, right: Any) -> int:
        """Levenshtein distance under this comparator's config (may be ``EXCEEDS``)."""
        left_view = as_input(left)
        right_view = as_input(right)
        key = self._cache.make_key(
            f"distance:{self._config.threshold}", left_view, right_view
        )
        return self._cache.get_or_compute(
            key, lambda: self._levenshtein.apply(left_view, right_view)
        )

    def similarity(self, left: Any, right: Any) -> float:
        """Jaro-Winkler similarity in [0.0, 1.0]."""
        left_view = as_input(left)
        right_view = as_input(right)
        key = self._cache.make_key("similarity", left_view, right_view)
        return self._cache.get_or_compute(
            key, lambda: jaro_winkler_similarity(left_view, right_view)
        )

    def compare(self, left: Any, right: Any) -> ComparisonResult:
        """Compute both scores for a pair and return a ComparisonResult.

        Args:
            left:  First sequence (``str``, ``Sequence``, iterable or ``SequenceView``).
            right: Second sequence.

        Returns:
            A ``ComparisonResult`` with all four fields populated.

        Raises:
            InvalidArgumentError: If either input is None.
        """
        t0 = time.perf_counter()

        # Iterators would be exhausted by the first engine.
        left = as_input(left)
        right = as_input(right)

        distance = self.distance(left, right)
        similarity = self.similarity(left, right)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared pair: distance=%d similarity=%.4f in %.3fms",
            distance,
            similarity,
            elapsed_ms,
        )

        return ComparisonResult(
            distance=distance,
            similarity=similarity,
            threshold=self._config.threshold,
            computation_time_ms=elapsed_ms,
        )
