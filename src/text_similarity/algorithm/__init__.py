"""algorithm subpackage: public API for the distance and similarity engines.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from text_similarity.algorithm import EXCEEDS, LevenshteinDistance, jaro_winkler_similarity

    LevenshteinDistance(threshold=2).apply("kitten", "sitting")  # EXCEEDS
    jaro_winkler_similarity("frog", "fog")                       # ~0.925
"""

from __future__ import annotations

from text_similarity.algorithm.config import EXCEEDS, DistanceConfig
from text_similarity.algorithm.jaro_winkler import (
    JaroWinklerSimilarity,
    MatchStatistics,
    jaro_winkler_distance,
    jaro_winkler_similarity,
    match_statistics,
)
from text_similarity.algorithm.levenshtein import (
    LevenshteinDistance,
    limited_distance,
    unlimited_distance,
)

__all__ = [
    "EXCEEDS",
    "DistanceConfig",
    "JaroWinklerSimilarity",
    "LevenshteinDistance",
    "MatchStatistics",
    "jaro_winkler_distance",
    "jaro_winkler_similarity",
    "limited_distance",
    "match_statistics",
    "unlimited_distance",
]
