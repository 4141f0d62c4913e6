"""pytest plugin for text-similarity.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from text_similarity import compare


@pytest.fixture(scope="session")
def assert_similar() -> Any:
    """Fixture that returns a callable sequence-similarity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh SequenceComparator per call).

    Usage in tests::

        def test_ocr_output(assert_similar):
            assert_similar("Invoice 2024", "lnvoice 2024")

        def test_typo_budget(assert_similar):
            assert_similar("recieve", "receive", max_distance=2)

    Returns:
        A callable ``_assert(actual, expected, min_score=0.85, max_distance=None) -> None``
        that raises ``AssertionError`` when the pair is not similar enough.
    """

    def _assert(
        actual: Any,
        expected: Any,
        min_score: float = 0.85,
        max_distance: int | None = None,
    ) -> None:
        """Assert that two sequences are similar.

        Args:
            actual:       The sequence produced by the code under test.
            expected:     The reference sequence.
            min_score:    Minimum Jaro-Winkler similarity.  Defaults to 0.85.
            max_distance: Optional edit-distance budget; when given, the
                          pair must also be within this many edits.

        Raises:
            AssertionError: When similarity < min_score or the distance exceeds
                max_distance, with a message including both scores and the
                actual/expected values.
        """
        result = compare(actual, expected, threshold=max_distance)
        if result.similarity < min_score or result.exceeds_threshold:
            distance = (
                f"> {max_distance}" if result.exceeds_threshold else str(result.distance)
            )
            raise AssertionError(
                f"sequences not similar: "
                f"similarity={result.similarity:.4f} (min_score={min_score}), "
                f"distance={distance}\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
