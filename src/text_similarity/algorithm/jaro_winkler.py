"""Jaro-Winkler similarity over any two SequenceViews.

The score is built from three statistics gathered in one pass:

- matches: elements of the shorter sequence paired with an equal, not yet
  paired element of the longer one within a sliding window.  Pairing is
  greedy and leftmost-first; the first free equal element wins even when a
  later choice would yield fewer transpositions.
- half_transpositions: positions where the two matched-element sequences
  disagree.  Halved in the Jaro formula.
- prefix: length of the common leading run of the two inputs, capped at 4.

Jaro::

    j = (m / len(left) + m / len(right) + (m - half_transpositions / 2) / m) / 3

Winkler rescales ``j >= 0.7`` by ``prefix * 0.1 * (1 - j)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from text_similarity.inputs import as_input, same_elements
from text_similarity.protocols import SequenceView

__all__ = [
    "JaroWinklerSimilarity",
    "MatchStatistics",
    "jaro_winkler_distance",
    "jaro_winkler_similarity",
    "match_statistics",
]

SCALING_FACTOR = 0.1
PREFIX_CAP = 4
BOOST_THRESHOLD = 0.7


@dataclass(frozen=True, slots=True)
class MatchStatistics:
    """Per-comparison statistics feeding the Jaro-Winkler formula.

    Attributes:
        matches: Number of matched element pairs.
        half_transpositions: Mismatches between the matched-element
            sequences; twice the conventional transposition count.
        prefix: Common prefix length of the two inputs, at most 4.
    """

    matches: int
    half_transpositions: int
    prefix: int


def match_statistics(first: Any, second: Any) -> MatchStatistics:
    """Gather match, half-transposition and prefix counts for two sequences.

    Args:
        first:  First sequence.
        second: Second sequence.

    Returns:
        A ``MatchStatistics`` for the pair.

    Raises:
        InvalidArgumentError: If either input is None.
    """
    first_view = as_input(first)
    second_view = as_input(second)

    if len(first_view) > len(second_view):
        longer, shorter = first_view, second_view
    else:
        longer, shorter = second_view, first_view

    search_range = max(len(longer) // 2 - 1, 0)
    match_indexes = [-1] * len(shorter)
    match_flags = [False] * len(longer)

    matches = _find_matches(shorter, longer, search_range, match_indexes, match_flags)

    shorter_matched = [
        shorter.at(i) for i in range(len(shorter)) if match_indexes[i] != -1
    ]
    longer_matched = [longer.at(i) for i in range(len(longer)) if match_flags[i]]

    return MatchStatistics(
        matches=matches,
        half_transpositions=_count_half_transpositions(shorter_matched, longer_matched),
        prefix=_count_prefix(first_view, second_view),
    )


def _find_matches(
    shorter: SequenceView[Any],
    longer: SequenceView[Any],
    search_range: int,
    match_indexes: list[int],
    match_flags: list[bool],
) -> int:
    """Greedily pair each element of ``shorter`` with the leftmost free equal one."""
    matches = 0
    longer_len = len(longer)
    for si in range(len(shorter)):
        element = shorter.at(si)
        start = max(si - search_range, 0)
        stop = min(si + search_range + 1, longer_len)
        for li in range(start, stop):
            if not match_flags[li] and element == longer.at(li):
                match_indexes[si] = li
                match_flags[li] = True
                matches += 1
                break
    return matches


def _count_half_transpositions(
    shorter_matched: list[Any], longer_matched: list[Any]
) -> int:
    return sum(
        1 for a, b in zip(shorter_matched, longer_matched, strict=True) if a != b
    )


def _count_prefix(first: SequenceView[Any], second: SequenceView[Any]) -> int:
    limit = min(PREFIX_CAP, len(first), len(second))
    prefix = 0
    for i in range(limit):
        if first.at(i) != second.at(i):
            break
        prefix += 1
    return prefix


def jaro_winkler_similarity(left: Any, right: Any) -> float:
    """Return the Jaro-Winkler similarity of ``left`` and ``right``.

    Args:
        left:  First sequence (``str``, ``Sequence``, iterable or ``SequenceView``).
        right: Second sequence.

    Returns:
        Float in [0.0, 1.0].  1.0 for elementwise-identical inputs (including
        two empty ones), 0.0 when nothing matches.

    Raises:
        InvalidArgumentError: If either input is None.
    """
    left_view = as_input(left)
    right_view = as_input(right)

    if same_elements(left_view, right_view):
        return 1.0

    stats = match_statistics(left_view, right_view)
    m = float(stats.matches)
    if m == 0:
        return 0.0

    j = (
        m / len(left_view)
        + m / len(right_view)
        + (m - stats.half_transpositions / 2) / m
    ) / 3
    if j < BOOST_THRESHOLD:
        return j
    return j + SCALING_FACTOR * stats.prefix * (1.0 - j)


def jaro_winkler_distance(left: Any, right: Any) -> float:
    """Return ``1 - jaro_winkler_similarity(left, right)``."""
    return 1.0 - jaro_winkler_similarity(left, right)


class JaroWinklerSimilarity:
    """Stateless Jaro-Winkler scorer with an ``apply`` entry point.

    Mirrors ``LevenshteinDistance`` so callers can hold either behind the same
    ``apply(left, right)`` shape.

    Example::

        from text_similarity.algorithm import JaroWinklerSimilarity

        JaroWinklerSimilarity().apply("frog", "fog")      # ~0.925
        JaroWinklerSimilarity().apply("foo", "  foo")     # ~0.511
    """

    __slots__ = ()

    @classmethod
    def default(cls) -> JaroWinklerSimilarity:
        """Return the shared instance."""
        return _DEFAULT_INSTANCE

    def apply(self, left: Any, right: Any) -> float:
        return jaro_winkler_similarity(left, right)

    def __repr__(self) -> str:
        return "JaroWinklerSimilarity()"


_DEFAULT_INSTANCE = JaroWinklerSimilarity()
