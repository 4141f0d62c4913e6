"""Integration tests for the public API surface.

All imports are from the top-level ``text_similarity`` package, never from
internal submodules.  Covers the literal scenarios and invariants both engines
promise, generic element types, and statelessness.
"""

from __future__ import annotations

import pytest

from text_similarity import (
    EXCEEDS,
    ComparisonResult,
    DistanceConfig,
    LevenshteinDistance,
    SequenceComparator,
    SimilarityInput,
    compare,
    edit_distance,
    similarity,
)

PAIRS = [
    ("", ""),
    ("", "a"),
    ("frog", "fog"),
    ("elephant", "hippo"),
    ("hippo", "zzzzzzzz"),
    ("foo", "  foo"),
    ("hello", "hallo"),
]


class TestIdentity:
    @pytest.mark.parametrize("value", ["", "a", "frog", "elephant", "  foo"])
    def test_distance_zero_and_similarity_one(self, value: str) -> None:
        assert edit_distance(value, value) == 0
        assert similarity(value, value) == 1.0


class TestSymmetry:
    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_distance_symmetric(self, a: str, b: str) -> None:
        assert edit_distance(a, b) == edit_distance(b, a)

    @pytest.mark.parametrize(("a", "b"), PAIRS)
    def test_similarity_symmetric(self, a: str, b: str) -> None:
        assert similarity(a, b) == pytest.approx(similarity(b, a))


class TestThresholdConsistency:
    @pytest.mark.parametrize(("a", "b"), PAIRS)
    @pytest.mark.parametrize("threshold", [0, 1, 3, 7, 10])
    def test_bounded_matches_unlimited(self, a: str, b: str, threshold: int) -> None:
        exact = edit_distance(a, b)
        expected = exact if exact <= threshold else EXCEEDS
        assert edit_distance(a, b, threshold) == expected


class TestGenericSequences:
    def test_token_level_distance(self) -> None:
        assert edit_distance("to be or not".split(), "to be or what".split()) == 1

    def test_token_level_similarity(self) -> None:
        assert similarity(["x", "y", "z"], ["x", "y", "z"]) == 1.0

    def test_wrapped_and_raw_inputs_agree(self) -> None:
        assert similarity(SimilarityInput("frog"), "fog") == similarity("frog", "fog")


class TestSharedConfiguration:
    def test_one_config_many_comparators(self) -> None:
        config = DistanceConfig(threshold=1)
        distance = LevenshteinDistance(config=config)
        comparator = SequenceComparator(config)
        assert distance.apply("frog", "fog") == comparator.distance("frog", "fog") == 1
        assert distance.apply("hippo", "elephant") == EXCEEDS


class TestStatelessness:
    def test_compare_is_repeatable(self) -> None:
        results = [compare("hello", "hallo", threshold=2) for _ in range(3)]
        assert all(isinstance(r, ComparisonResult) for r in results)
        assert all(r.distance == 1 for r in results)
        assert all(r.similarity == pytest.approx(0.88) for r in results)
