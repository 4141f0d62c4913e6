"""Tests for SimilarityInput, as_input and the SequenceView Protocol.

Verifies that:
- User-defined classes with ``__len__`` and ``at`` satisfy the Protocol.
- Plain strings and lists do not (they have no ``at``) but are wrapped by as_input.
- SimilarityInput bounds-checks, compares elementwise and hashes consistently.
- as_input rejects None and non-iterables with InvalidArgumentError.
"""

from __future__ import annotations

import pytest

from text_similarity.errors import InvalidArgumentError
from text_similarity.inputs import SimilarityInput, as_input, same_elements
from text_similarity.protocols import SequenceView


class _UserView:
    """Minimal user-defined view conforming to SequenceView."""

    def __len__(self) -> int:
        return 3

    def at(self, index: int) -> int:
        return index * 10


class _NoAtView:
    """Class without ``at``; should NOT satisfy the Protocol."""

    def __len__(self) -> int:
        return 0


class _IndexerAt:
    """Iterable whose ``at`` is a label indexer object, not a method."""

    at = object()

    def __len__(self) -> int:
        return 2

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(["x", "y"])


# ---------------------------------------------------------------------------
# Protocol conformance
# ---------------------------------------------------------------------------


class TestSequenceViewProtocol:
    def test_user_defined_view_passes_isinstance(self) -> None:
        assert isinstance(_UserView(), SequenceView) is True

    def test_class_without_at_fails_isinstance(self) -> None:
        assert isinstance(_NoAtView(), SequenceView) is False

    def test_plain_str_is_not_a_view(self) -> None:
        assert isinstance("abc", SequenceView) is False

    def test_similarity_input_is_a_view(self) -> None:
        assert isinstance(SimilarityInput("abc"), SequenceView) is True


# ---------------------------------------------------------------------------
# SimilarityInput
# ---------------------------------------------------------------------------


class TestSimilarityInput:
    def test_length(self) -> None:
        assert len(SimilarityInput("frog")) == 4

    def test_at_returns_elements(self) -> None:
        view = SimilarityInput(["to", "be"])
        assert view.at(0) == "to"
        assert view.at(1) == "be"

    def test_at_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            SimilarityInput("ab").at(2)

    def test_negative_index_is_not_wrapped(self) -> None:
        with pytest.raises(IndexError):
            SimilarityInput("ab").at(-1)

    def test_iteration(self) -> None:
        assert list(SimilarityInput("abc")) == ["a", "b", "c"]

    def test_elementwise_equality_across_containers(self) -> None:
        assert SimilarityInput("ab") == SimilarityInput(["a", "b"])
        assert SimilarityInput("ab") == SimilarityInput(("a", "b"))

    def test_inequality(self) -> None:
        assert SimilarityInput("ab") != SimilarityInput("ba")
        assert SimilarityInput("ab") != SimilarityInput("abc")

    def test_equality_with_custom_view(self) -> None:
        assert SimilarityInput([0, 10, 20]) == _UserView()

    def test_not_equal_to_plain_string(self) -> None:
        assert SimilarityInput("ab") != "ab"

    def test_equal_inputs_hash_equal(self) -> None:
        assert hash(SimilarityInput("ab")) == hash(SimilarityInput(("a", "b")))

    def test_is_frozen(self) -> None:
        view = SimilarityInput("ab")
        with pytest.raises(AttributeError):
            view.items = "cd"  # type: ignore[misc]


class TestSameElements:
    def test_empty_views_are_same(self) -> None:
        assert same_elements(SimilarityInput(""), SimilarityInput([])) is True

    def test_length_mismatch(self) -> None:
        assert same_elements(SimilarityInput("a"), SimilarityInput("aa")) is False


# ---------------------------------------------------------------------------
# as_input factory
# ---------------------------------------------------------------------------


class TestAsInput:
    def test_wraps_string_without_copy(self) -> None:
        text = "hello"
        view = as_input(text)
        assert isinstance(view, SimilarityInput)
        assert view.items is text

    def test_wraps_list_without_copy(self) -> None:
        tokens = ["a", "b"]
        view = as_input(tokens)
        assert isinstance(view, SimilarityInput)
        assert view.items is tokens

    def test_view_returned_unchanged(self) -> None:
        view = _UserView()
        assert as_input(view) is view

    def test_generator_materialized(self) -> None:
        view = as_input(c for c in "abc")
        assert len(view) == 3
        assert view.at(2) == "c"

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="must not be None"):
            as_input(None)

    def test_non_iterable_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="int"):
            as_input(42)

    def test_non_callable_at_treated_as_iterable(self) -> None:
        view = as_input(_IndexerAt())
        assert isinstance(view, SimilarityInput)
        assert view.items == ("x", "y")
