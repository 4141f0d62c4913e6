"""Exception types raised by text-similarity.

Exceeding a distance threshold is never an error: the bounded algorithm
returns the ``EXCEEDS`` sentinel instead.  Only malformed calls raise.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when an input sequence is missing or a threshold is negative."""
