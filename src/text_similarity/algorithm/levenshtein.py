"""Levenshtein edit distance over any two SequenceViews.

Two algorithms share one entry point:

- ``unlimited_distance``: the classic (n+1) x (m+1) dynamic program, kept in a
  single rolling row sized by the shorter input.  The diagonal predecessor of
  each cell is carried across the in-place overwrite in ``upper_left``.
- ``limited_distance``: a banded dynamic program that only fills cells within
  ``threshold`` of the diagonal, alternates two rolling rows, and gives up as
  soon as a whole row exceeds the threshold.  Distances above the threshold
  are reported as ``EXCEEDS`` rather than computed exactly.

``LevenshteinDistance`` binds a ``DistanceConfig`` to ``apply`` so a single
threshold can be reused across many comparisons.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from text_similarity.algorithm.config import EXCEEDS, DistanceConfig
from text_similarity.errors import InvalidArgumentError
from text_similarity.inputs import as_input
from text_similarity.protocols import SequenceView

__all__ = ["LevenshteinDistance", "limited_distance", "unlimited_distance"]

logger = logging.getLogger(__name__)

# Larger than any cost a reachable cell can hold.
_UNREACHABLE = sys.maxsize


# ----------------------------------------------------------------------
# Unlimited form
# ----------------------------------------------------------------------


def unlimited_distance(left: Any, right: Any) -> int:
    """Return the exact Levenshtein distance between ``left`` and ``right``.

    Args:
        left:  First sequence (``str``, ``Sequence``, iterable or ``SequenceView``).
        right: Second sequence.

    Returns:
        The minimum number of single-element insertions, deletions or
        substitutions turning ``left`` into ``right``.

    Raises:
        InvalidArgumentError: If either input is None.
    """
    left_view = as_input(left)
    right_view = as_input(right)

    n = len(left_view)
    m = len(right_view)
    if n == 0:
        return m
    if m == 0:
        return n

    # Shorter sequence on the column axis to keep the row small.
    if n > m:
        left_view, right_view = right_view, left_view
        n, m = m, n

    p = list(range(n + 1))
    for j in range(1, m + 1):
        upper_left = p[0]
        right_j = right_view.at(j - 1)
        p[0] = j
        for i in range(1, n + 1):
            upper = p[i]
            cost = 0 if left_view.at(i - 1) == right_j else 1
            p[i] = min(p[i - 1] + 1, upper + 1, upper_left + cost)
            upper_left = upper

    return p[n]


# ----------------------------------------------------------------------
# Threshold-bounded form
# ----------------------------------------------------------------------


def limited_distance(left: Any, right: Any, threshold: int) -> int:
    """Return the Levenshtein distance if it is at most ``threshold``.

    Only cells within ``threshold`` of the main diagonal are computed, so the
    cost is ``O(min(n, m) * threshold)`` rather than ``O(n * m)``.

    Args:
        left:      First sequence.
        right:     Second sequence.
        threshold: Largest distance of interest (>= 0).

    Returns:
        The exact distance when it is ``<= threshold``, otherwise ``EXCEEDS``.

    Raises:
        InvalidArgumentError: If either input is None or ``threshold`` is not a
            non-negative int.
    """
    left_view, right_view = _validate_bounded(left, right, threshold)

    n = len(left_view)
    m = len(right_view)
    if n == 0 or m == 0:
        return _empty_distance(n, m, threshold)

    # The longer sequence drives the rows; the band spans the shorter one.
    if n > m:
        left_view, right_view = right_view, left_view
        n, m = m, n

    # The distance is never smaller than the length difference.
    if m - n > threshold:
        logger.debug(
            "length difference %d exceeds threshold %d, skipping DP", m - n, threshold
        )
        return EXCEEDS

    p, d = _initial_rows(n, threshold)

    for j in range(1, m + 1):
        right_j = right_view.at(j - 1)
        d[0] = j

        lo = max(1, j - threshold)
        hi = min(n, j + threshold)

        # Leading out-of-band cell must not leak a stale value into the band.
        if lo > 1:
            d[lo - 1] = _UNREACHABLE

        if _process_row(left_view, right_j, p, d, lo, hi) > threshold:
            logger.debug("row %d/%d exceeds threshold %d, stopping early", j, m, threshold)
            return EXCEEDS

        p, d = d, p

    return p[n] if p[n] <= threshold else EXCEEDS


def _validate_bounded(
    left: Any, right: Any, threshold: int
) -> tuple[SequenceView[Any], SequenceView[Any]]:
    left_view = as_input(left)
    right_view = as_input(right)
    if threshold is None:
        msg = "threshold must be an int for the bounded distance, got None"
        raise InvalidArgumentError(msg)
    DistanceConfig(threshold)
    return left_view, right_view


def _empty_distance(n: int, m: int, threshold: int) -> int:
    """Distance when at least one side is empty: the other side's length."""
    distance = max(n, m)
    return distance if distance <= threshold else EXCEEDS


def _initial_rows(n: int, threshold: int) -> tuple[list[int], list[int]]:
    """Build the two rolling rows for the banded DP.

    Row ``p`` (the previous row) starts as ``0, 1, ..., min(n, threshold)``
    followed by unreachable cells; row ``d`` starts fully unreachable.
    """
    boundary = min(n, threshold) + 1
    p = list(range(boundary)) + [_UNREACHABLE] * (n + 1 - boundary)
    d = [_UNREACHABLE] * (n + 1)
    return p, d


def _process_row(
    left: SequenceView[Any],
    right_j: Any,
    p: list[int],
    d: list[int],
    lo: int,
    hi: int,
) -> int:
    """Fill ``d[lo..hi]`` from the previous row ``p`` and return the row minimum."""
    lower_bound = _UNREACHABLE
    for i in range(lo, hi + 1):
        if left.at(i - 1) == right_j:
            d[i] = p[i - 1]
        else:
            d[i] = 1 + min(d[i - 1], p[i], p[i - 1])
        lower_bound = min(lower_bound, d[i])
    return lower_bound


# ----------------------------------------------------------------------
# Reusable comparator
# ----------------------------------------------------------------------


class LevenshteinDistance:
    """Levenshtein edit distance bound to an immutable ``DistanceConfig``.

    Without a threshold ``apply`` returns the exact distance.  With one it
    runs the banded algorithm and may return ``EXCEEDS``.

    Example::

        from text_similarity.algorithm import EXCEEDS, LevenshteinDistance

        LevenshteinDistance().apply("frog", "fog")               # 1
        LevenshteinDistance(6).apply("elephant", "hippo")        # EXCEEDS
        LevenshteinDistance(7).apply("elephant", "hippo")        # 7
        LevenshteinDistance().apply(["to", "be"], ["to", "go"])  # 1
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        threshold: int | None = None,
        *,
        config: DistanceConfig | None = None,
    ) -> None:
        """Initialise from a bare threshold or a ready-made config.

        Args:
            threshold: Optional non-negative bound.  Ignored when ``config`` is
                given; passing both is an error.
            config:    A ``DistanceConfig`` to share with other comparators.

        Raises:
            InvalidArgumentError: If ``threshold`` is negative or both
                ``threshold`` and ``config`` are supplied.
        """
        if config is not None and threshold is not None:
            msg = "pass either threshold or config, not both"
            raise InvalidArgumentError(msg)
        self._config = config if config is not None else DistanceConfig(threshold)

    @classmethod
    def default(cls) -> LevenshteinDistance:
        """Return the shared unlimited instance."""
        return _DEFAULT_INSTANCE

    @property
    def config(self) -> DistanceConfig:
        return self._config

    @property
    def threshold(self) -> int | None:
        return self._config.threshold

    def apply(self, left: Any, right: Any) -> int:
        """Compute the edit distance between ``left`` and ``right``.

        Returns:
            The exact distance, or ``EXCEEDS`` when a threshold is configured
            and the distance is greater than it.
        """
        if self._config.threshold is not None:
            return limited_distance(left, right, self._config.threshold)
        return unlimited_distance(left, right)

    def __repr__(self) -> str:
        return f"LevenshteinDistance(threshold={self.threshold!r})"


_DEFAULT_INSTANCE = LevenshteinDistance()
