"""Unit-cost model: symbol equality plus Levenshtein edit costs."""

from __future__ import annotations

import operator
from typing import Callable, Iterable, Optional

from wavealign.errors import ValidationError
from wavealign.traceback import EditKind


class CostModel:
    """Costs of the four alignment operations and the symbol comparison.

    The wavefront recurrence only holds for plain Levenshtein costs, so a
    match must be free and substitution, insertion and deletion must each
    cost exactly one. Anything else is rejected at construction time.

    *equal* replaces ``==`` when comparing a symbol of A with one of B, e.g.
    ``CostModel(equal=lambda x, y: x.lower() == y.lower())``. It should be
    symmetric, otherwise ``d(a, b) == d(b, a)`` no longer holds.
    """

    def __init__(
        self,
        match_cost: int = 0,
        mismatch_cost: int = 1,
        insertion_cost: int = 1,
        deletion_cost: int = 1,
        equal: Optional[Callable[[object, object], bool]] = None,
    ):
        costs = {
            "match_cost": match_cost,
            "mismatch_cost": mismatch_cost,
            "insertion_cost": insertion_cost,
            "deletion_cost": deletion_cost,
        }
        for name, value in costs.items():
            if value < 0:
                raise ValidationError(f"{name} must not be negative, got {value}")
        if match_cost != 0:
            raise ValidationError(f"match_cost must be 0, got {match_cost}")
        if insertion_cost != deletion_cost:
            raise ValidationError(
                f"insertion_cost ({insertion_cost}) and deletion_cost "
                f"({deletion_cost}) must be equal"
            )
        for name in ("mismatch_cost", "insertion_cost", "deletion_cost"):
            if costs[name] != 1:
                raise ValidationError(
                    f"{name} must be 1 (only unit-cost edit distance is supported), "
                    f"got {costs[name]}"
                )
        if equal is not None and not callable(equal):
            raise ValidationError("equal must be callable")

        self.match_cost = match_cost
        self.mismatch_cost = mismatch_cost
        self.insertion_cost = insertion_cost
        self.deletion_cost = deletion_cost
        self._equal = equal or operator.eq

    def equal(self, a, b) -> bool:
        """Return True when symbol *a* of A matches symbol *b* of B."""
        return bool(self._equal(a, b))

    def script_cost(self, script: Iterable) -> int:
        """Total cost of an edit script (sequence of ``EditOperation``)."""
        total = 0
        for op in script:
            if op.kind is EditKind.MATCH:
                total += self.match_cost * op.length
            elif op.kind is EditKind.SUBSTITUTION:
                total += self.mismatch_cost * op.length
            elif op.kind is EditKind.INSERTION:
                total += self.insertion_cost * op.length
            elif op.kind is EditKind.DELETION:
                total += self.deletion_cost * op.length
        return total

    def __repr__(self) -> str:
        return (
            f"CostModel(match_cost={self.match_cost}, mismatch_cost={self.mismatch_cost}, "
            f"insertion_cost={self.insertion_cost}, deletion_cost={self.deletion_cost})"
        )


DEFAULT_COST_MODEL = CostModel()
