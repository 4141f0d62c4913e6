"""SequenceView Protocol: the one contract every algorithm reads through.

Any object with ``__len__`` and an ``at(index)`` accessor satisfies the
protocol at runtime; no inheritance required.  This lets the distance and
similarity engines compare raw text, token lists or any custom storage in
exactly the same way.

Example::

    from text_similarity.protocols import SequenceView

    class Codons:
        def __init__(self, dna: str) -> None:
            self._dna = dna

        def __len__(self) -> int:
            return len(self._dna) // 3

        def at(self, index: int) -> str:
            return self._dna[index * 3 : index * 3 + 3]

    assert isinstance(Codons("ATGGCC"), SequenceView)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

__all__ = ["SequenceView"]

E_co = TypeVar("E_co", covariant=True)


@runtime_checkable
class SequenceView(Protocol[E_co]):
    """Structural protocol for an immutable, zero-indexed sequence of elements.

    Implementations must guarantee:
    - ``len(view)`` never changes after construction.
    - ``view.at(i)`` is O(1) and valid for ``0 <= i < len(view)``.
    - Elements support ``==`` (equality is total, there is no "absent" element).
    """

    def __len__(self) -> int: ...

    def at(self, index: int) -> E_co: ...
