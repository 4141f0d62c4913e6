"""SimilarityInput: the default SequenceView over strings and sequences.

``as_input`` is the factory every public entry point funnels its arguments
through, so callers can pass a ``str``, a token ``list``, a ``tuple``, a
generator or an existing ``SequenceView`` interchangeably.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from text_similarity.errors import InvalidArgumentError
from text_similarity.protocols import SequenceView

__all__ = ["SimilarityInput", "as_input", "same_elements"]

E = TypeVar("E")


@dataclass(frozen=True, slots=True, eq=False)
class SimilarityInput(Generic[E]):
    """Immutable, random-access view over a ``Sequence``.

    The wrapped sequence is not copied.  Equality is elementwise against any
    other ``SequenceView``, so ``SimilarityInput("ab")`` equals
    ``SimilarityInput(["a", "b"])``.

    Attributes:
        items: The underlying random-access sequence.
    """

    items: Sequence[E]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[E]:
        return iter(self.items)

    def at(self, index: int) -> E:
        """Return the element at ``index``; negative indices are not wrapped."""
        if not 0 <= index < len(self.items):
            msg = f"index {index} out of range for length {len(self.items)}"
            raise IndexError(msg)
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SequenceView):
            return NotImplemented
        return same_elements(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self.items))


def same_elements(first: SequenceView[Any], second: SequenceView[Any]) -> bool:
    """Return True when both views have the same length and equal elements."""
    n = len(first)
    if n != len(second):
        return False
    return all(first.at(i) == second.at(i) for i in range(n))


def as_input(value: Any) -> SequenceView[Any]:
    """Wrap ``value`` into a ``SequenceView``.

    Args:
        value: A ``SequenceView`` (returned unchanged), a ``str`` or other
            ``Sequence`` (wrapped without copying), or any other iterable
            (materialized once into a tuple).

    Returns:
        A ``SequenceView`` over the elements of ``value``.

    Raises:
        InvalidArgumentError: If ``value`` is None or not iterable.
    """
    if value is None:
        msg = "Sequences must not be None"
        raise InvalidArgumentError(msg)
    if isinstance(value, SequenceView) and callable(getattr(value, "at", None)):
        return value
    if isinstance(value, Sequence):
        return SimilarityInput(value)
    if isinstance(value, Iterable):
        return SimilarityInput(tuple(value))
    msg = f"Expected a sequence of elements, got {type(value).__name__}"
    raise InvalidArgumentError(msg)
