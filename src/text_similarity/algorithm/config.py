"""DistanceConfig and the EXCEEDS sentinel for edit-distance computation.

DistanceConfig is a frozen (immutable) dataclass selecting between the
unlimited and the threshold-bounded Levenshtein algorithms.  A single
instance may be shared freely across comparators and threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from text_similarity.errors import InvalidArgumentError

__all__ = ["EXCEEDS", "DistanceConfig"]

EXCEEDS: Final[int] = -1
"""Result of a bounded distance whose true value is greater than the threshold."""


@dataclass(frozen=True, slots=True)
class DistanceConfig:
    """Immutable configuration for edit-distance computation.

    Attributes:
        threshold: Upper bound on the distances of interest.  ``None`` runs the
            unlimited algorithm.  A non-negative int runs the banded algorithm,
            which returns ``EXCEEDS`` instead of any distance above the bound.
    """

    threshold: int | None = None

    def __post_init__(self) -> None:
        if self.threshold is None:
            return
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            msg = f"threshold must be an int or None, got {self.threshold!r}"
            raise InvalidArgumentError(msg)
        if self.threshold < 0:
            msg = f"threshold must not be negative, got {self.threshold}"
            raise InvalidArgumentError(msg)

    @property
    def bounded(self) -> bool:
        """True when a threshold is set and the banded algorithm applies."""
        return self.threshold is not None
