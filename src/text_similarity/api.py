"""Public API functions for text-similarity.

Every function accepts a ``str``, any ``Sequence`` (e.g. a token list), any
other iterable, or a ``SequenceView``.  The engine functions are pure; the
functions returning a ``ComparisonResult`` or scoring many sequences create a
fresh ``SequenceComparator`` / ``PairwiseScorer`` per call to guarantee zero
global state mutation between calls.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from text_similarity.algorithm.config import DistanceConfig
from text_similarity.algorithm.jaro_winkler import (
    jaro_winkler_distance,
    jaro_winkler_similarity,
)
from text_similarity.algorithm.levenshtein import limited_distance, unlimited_distance
from text_similarity.comparator import SequenceComparator
from text_similarity.errors import InvalidArgumentError
from text_similarity.result import ComparisonResult
from text_similarity.scorer import PairwiseScorer

__all__ = [
    "compare",
    "consistency_score",
    "edit_distance",
    "is_similar",
    "jaro_winkler_distance",
    "similarity",
    "similarity_matrix",
]


def edit_distance(left: Any, right: Any, threshold: int | None = None) -> int:
    """Return the Levenshtein distance between two sequences.

    Args:
        left:      First sequence.
        right:     Second sequence.
        threshold: Optional non-negative bound.  When given, the banded
            algorithm runs and any distance above it is reported as ``EXCEEDS``.

    Returns:
        A non-negative distance, or ``EXCEEDS`` (-1) when bounded and exceeded.

    Raises:
        InvalidArgumentError: If either input is None or ``threshold`` is not a
            non-negative int.
    """
    if threshold is None:
        return unlimited_distance(left, right)
    return limited_distance(left, right, threshold)


def similarity(left: Any, right: Any) -> float:
    """Return the Jaro-Winkler similarity of two sequences, in [0.0, 1.0].

    Raises:
        InvalidArgumentError: If either input is None.
    """
    return jaro_winkler_similarity(left, right)


def compare(left: Any, right: Any, threshold: int | None = None) -> ComparisonResult:
    """Compare two sequences and return both scores in a ComparisonResult.

    Args:
        left:      First sequence.
        right:     Second sequence.
        threshold: Optional edit-distance bound.

    Returns:
        A ``ComparisonResult`` with distance, similarity, threshold and
        computation_time_ms populated.
    """
    comparator = SequenceComparator(config=DistanceConfig(threshold))
    return comparator.compare(left, right)


def is_similar(left: Any, right: Any, min_score: float = 0.85) -> bool:
    """Return True if the Jaro-Winkler similarity is at least ``min_score``.

    Args:
        left:      First sequence.
        right:     Second sequence.
        min_score: Minimum similarity to accept.  Must be in [0.0, 1.0].
            Defaults to 0.85.

    Raises:
        InvalidArgumentError: If ``min_score`` is outside [0.0, 1.0].
    """
    if not 0.0 <= min_score <= 1.0:
        msg = f"min_score must be in [0.0, 1.0], got {min_score}"
        raise InvalidArgumentError(msg)
    return jaro_winkler_similarity(left, right) >= min_score


def similarity_matrix(sequences: list[Any]) -> np.ndarray:
    """Return the symmetric ``(N, N)`` similarity matrix of ``sequences``."""
    return PairwiseScorer().similarity_matrix(sequences)


def consistency_score(sequences: list[Any]) -> float:
    """Return ``max(0, mean - std)`` of all pairwise similarities.

    Returns:
        A float in [0.0, 1.0].  1.0 for empty lists, single-sequence lists and
        lists of identical sequences.
    """
    return PairwiseScorer().consistency(sequences)
