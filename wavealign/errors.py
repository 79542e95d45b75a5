"""Exceptions raised by wavealign."""

from __future__ import annotations

from typing import Optional


class WavealignError(Exception):
    """Base class for all wavealign errors."""


class ValidationError(WavealignError, ValueError):
    """Invalid caller input: cost model, sequence, bound or edit script."""


class BoundExceededError(WavealignError):
    """The edit distance is larger than the caller's ``max_distance``.

    *level* is the wave level at which the aligner gave up, 0 when the
    length difference alone already exceeds the bound.
    """

    def __init__(self, bound: int, level: Optional[int] = None):
        self.bound = bound
        self.level = level
        msg = f"edit distance exceeds bound {bound}"
        if level is not None:
            msg += f" (stopped before level {level})"
        super().__init__(msg)
