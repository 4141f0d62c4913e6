"""Deterministic sequence generators for performance benchmarks.

All generators produce fixed, reproducible sequences. No random values.
Three tiers: 10, 100 and 1000 elements.
Each tier provides both "similar" and "dissimilar" pair generators.

Similar pairs differ by a handful of scattered substitutions, so the banded
distance finishes inside its band. Dissimilar pairs share no elements, so
the banded distance stops after the first few rows.
"""

from __future__ import annotations

import pytest

_ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def generate_text(length: int, offset: int = 0) -> str:
    """Generate a cyclic lowercase string of ``length`` characters."""
    return "".join(_ALPHABET[(i + offset) % len(_ALPHABET)] for i in range(length))


def _make_similar(length: int) -> tuple[str, str]:
    """Generate a pair differing by one substitution every 25 characters."""
    left = generate_text(length)
    right = "".join(
        "#" if i % 25 == 12 else ch for i, ch in enumerate(left)
    )
    return left, right


def _make_dissimilar(length: int) -> tuple[str, str]:
    """Generate a pair with disjoint alphabets."""
    return generate_text(length), "".join(str(i % 10) for i in range(length))


@pytest.fixture
def pair_10_similar() -> tuple[str, str]:
    """10-element similar pair."""
    return _make_similar(10)


@pytest.fixture
def pair_10_dissimilar() -> tuple[str, str]:
    """10-element dissimilar pair."""
    return _make_dissimilar(10)


@pytest.fixture
def pair_100_similar() -> tuple[str, str]:
    """100-element similar pair (4 substitutions)."""
    return _make_similar(100)


@pytest.fixture
def pair_100_dissimilar() -> tuple[str, str]:
    """100-element dissimilar pair."""
    return _make_dissimilar(100)


@pytest.fixture
def pair_1000_similar() -> tuple[str, str]:
    """1000-element similar pair (40 substitutions)."""
    return _make_similar(1000)


@pytest.fixture
def pair_1000_dissimilar() -> tuple[str, str]:
    """1000-element dissimilar pair."""
    return _make_dissimilar(1000)
