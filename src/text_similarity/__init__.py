"""text-similarity - edit distance and Jaro-Winkler similarity for any sequence."""

from __future__ import annotations

from text_similarity.algorithm.config import EXCEEDS, DistanceConfig
from text_similarity.algorithm.jaro_winkler import JaroWinklerSimilarity
from text_similarity.algorithm.levenshtein import LevenshteinDistance
from text_similarity.api import (
    compare,
    consistency_score,
    edit_distance,
    is_similar,
    jaro_winkler_distance,
    similarity,
    similarity_matrix,
)
from text_similarity.comparator import SequenceComparator
from text_similarity.errors import InvalidArgumentError
from text_similarity.inputs import SimilarityInput, as_input
from text_similarity.protocols import SequenceView
from text_similarity.result import ComparisonResult
from text_similarity.scorer import PairwiseScorer

__version__: str = "0.1.0"
__all__: list[str] = [
    "EXCEEDS",
    "ComparisonResult",
    "DistanceConfig",
    "InvalidArgumentError",
    "JaroWinklerSimilarity",
    "LevenshteinDistance",
    "PairwiseScorer",
    "SequenceComparator",
    "SequenceView",
    "SimilarityInput",
    "as_input",
    "compare",
    "consistency_score",
    "edit_distance",
    "is_similar",
    "jaro_winkler_distance",
    "similarity",
    "similarity_matrix",
]
