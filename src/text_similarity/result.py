"""ComparisonResult dataclass for combined comparison output.

This module provides the result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from text_similarity.algorithm.config import EXCEEDS

__all__ = ["ComparisonResult"]


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    """Result of a compare() call.

    Attributes:
        distance: Levenshtein distance, or ``EXCEEDS`` when a threshold was set
            and the true distance is greater than it.
        similarity: Jaro-Winkler similarity in [0.0, 1.0].  1.0 is identical.
        threshold: The distance threshold in effect, or None for unlimited.
        computation_time_ms: Wall-clock duration of the comparison in milliseconds.
    """

    distance: int
    similarity: float
    threshold: int | None
    computation_time_ms: float

    @property
    def exceeds_threshold(self) -> bool:
        """True when the bounded distance came back as ``EXCEEDS``."""
        return self.distance == EXCEEDS
