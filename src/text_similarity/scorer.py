"""PairwiseScorer: all-pairs distance/similarity matrices and consistency.

Scores every unordered pair of a list of sequences once and mirrors the
value across the diagonal.  The consistency score summarizes how alike a
set of sequences is (e.g. repeated OCR passes over the same line, or several
transcriptions of one utterance).

Formula:
    pairwise = [similarity(seqs[i], seqs[j]) for all (i, j) pairs with i < j]
    score = max(0.0, mean(pairwise) - std(pairwise))

This means:
- Identical sequences: mean=1.0, std=0.0 -> score=1.0
- Consistently mediocre: mean=0.6, std=0.0 -> score=0.6
- Erratic (high variance): mean=0.6, std=0.4 -> score=max(0, 0.2)=0.2
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import numpy as np

from text_similarity.algorithm.config import DistanceConfig
from text_similarity.comparator import SequenceComparator
from text_similarity.inputs import as_input
from text_similarity.protocols import SequenceView

__all__ = ["PairwiseScorer"]

logger = logging.getLogger(__name__)


class PairwiseScorer:
    """All-pairs scoring over a list of sequences.

    Creates a single ``SequenceComparator`` reused across all pairwise
    comparisons, so its result cache spans the whole set (and every later
    call on this scorer).

    Example::

        from text_similarity.scorer import PairwiseScorer

        scorer = PairwiseScorer()
        scorer.similarity_matrix(["frog", "fog", "frog"])
        # array([[1.   , 0.925, 1.   ],
        #        [0.925, 1.   , 0.925],
        #        [1.   , 0.925, 1.   ]])
        scorer.consistency(["frog", "frog", "frog"])  # 1.0
    """

    def __init__(
        self,
        config: DistanceConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the scorer with a single reusable comparator.

        Args:
            config: Distance configuration forwarded to ``SequenceComparator``.
            max_cache_size: Result cache size forwarded to ``SequenceComparator``.
        """
        self._comparator = SequenceComparator(config=config, max_cache_size=max_cache_size)

    @property
    def comparator(self) -> SequenceComparator:
        return self._comparator

    def similarity_matrix(self, sequences: list[Any]) -> np.ndarray:
        """Return the symmetric ``(N, N)`` Jaro-Winkler similarity matrix.

        The diagonal is 1.0.  Entry ``[i, j]`` for ``i < j`` is
        ``similarity(sequences[i], sequences[j])`` and is mirrored to ``[j, i]``.
        """
        views = _as_views(sequences)
        n = len(views)
        matrix = np.eye(n, dtype=np.float64)
        for i, j in itertools.combinations(range(n), 2):
            score = self._comparator.similarity(views[i], views[j])
            matrix[i, j] = score
            matrix[j, i] = score
        logger.debug("scored %d similarity pairs", n * (n - 1) // 2)
        return matrix

    def distance_matrix(self, sequences: list[Any]) -> np.ndarray:
        """Return the symmetric ``(N, N)`` edit-distance matrix.

        The diagonal is 0.  With a threshold configured, pairs further apart
        than the threshold hold ``EXCEEDS`` (-1).
        """
        views = _as_views(sequences)
        n = len(views)
        matrix = np.zeros((n, n), dtype=np.int64)
        for i, j in itertools.combinations(range(n), 2):
            distance = self._comparator.distance(views[i], views[j])
            matrix[i, j] = distance
            matrix[j, i] = distance
        logger.debug("scored %d distance pairs", n * (n - 1) // 2)
        return matrix

    def consistency(self, sequences: list[Any]) -> float:
        """Compute the consistency score for a list of sequences.

        Args:
            sequences: Sequences to score.  Order does not matter for the
                mean/std summary; all C(N, 2) unique pairs are evaluated.

        Returns:
            A float in [0.0, 1.0].  Returns 1.0 for empty or single-element
            lists (trivially consistent, no pairs to compare).
        """
        n = len(sequences)
        if n <= 1:
            return 1.0

        matrix = self.similarity_matrix(sequences)
        scores = matrix[np.triu_indices(n, k=1)]
        mean = float(np.mean(scores))
        std = float(np.std(scores))  # population std (ddof=0)
        return float(np.clip(mean - std, 0.0, 1.0))


def _as_views(sequences: list[Any]) -> list[SequenceView[Any]]:
    return [as_input(s) for s in sequences]
