"""Core aligner: diagonal wavefront expansion for unit-cost edit distance.

Cells of the ``(m+1) x (n+1)`` edit graph are addressed by diagonal
``k = i - j``. Level ``s`` of the wave stores, per diagonal, the furthest
row reachable with exactly ``s`` edits after sliding along matching symbols.
A substitution keeps ``k``, a deletion (one symbol of A) moves to ``k + 1``
and an insertion (one symbol of B) moves to ``k - 1``. The first level whose
wave reaches row ``m`` on ``k* = m - n`` is the edit distance.

Work per level is proportional to the number of live diagonals. With
pruning enabled only diagonals that can still lie on an optimal path are
kept, which narrows the band to roughly the divergence between A and B.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from wavealign.cost import CostModel, DEFAULT_COST_MODEL
from wavealign.errors import BoundExceededError, ValidationError
from wavealign.sequence import Sequence, as_sequence
from wavealign.traceback import (
    DELETION,
    INSERTION,
    ORIGIN,
    SUBSTITUTION,
    AlignmentResult,
    boundary_script,
    build_script,
)

logger = logging.getLogger(__name__)

MAX_SEQUENCE_LENGTH = 10_000_000
UNREACHED = -1


@dataclass
class Wave:
    """Snapshot of one level restricted to its live diagonals ``lo..hi``."""

    lo: int
    hi: int
    rows: np.ndarray
    starts: np.ndarray
    ops: np.ndarray

    def row_at(self, k: int) -> int:
        if self.lo <= k <= self.hi:
            return int(self.rows[k - self.lo])
        return UNREACHED

    def start_at(self, k: int) -> int:
        return int(self.starts[k - self.lo])

    def op_at(self, k: int) -> int:
        return int(self.ops[k - self.lo])


def extend(a: Sequence, b: Sequence, i: int, k: int, equal: Callable) -> int:
    """Slide from row *i* along diagonal *k* while symbols match; return the new row."""
    m = len(a)
    n = len(b)
    j = i - k
    while i < m and j < n and equal(a[i], b[j]):
        i += 1
        j += 1
    return i


def greedy_cost(a: Sequence, b: Sequence, i: int, k: int, equal: Callable, limit: int) -> Optional[int]:
    """Edit count of one concrete path from row *i* on diagonal *k* to ``(m, n)``.

    The path slides along matches and, at each mismatch, takes whichever of
    substitution, deletion or insertion slides furthest afterwards. Any such
    path bounds the remaining distance from above. Returns None as soon as
    the count is certain to exceed *limit*.
    """
    m = len(a)
    n = len(b)
    i = extend(a, b, i, k, equal)
    j = i - k
    cost = 0
    while i < m and j < n:
        if cost + max(1, abs((m - i) - (n - j))) > limit:
            return None
        cost += 1
        best = None
        for ni, nj in ((i + 1, j + 1), (i + 1, j), (i, j + 1)):
            end = extend(a, b, ni, ni - nj, equal)
            if best is None or 2 * end - (ni - nj) > best[0]:
                best = (2 * end - (ni - nj), end, end - (ni - nj))
        _, i, j = best
    cost += (m - i) + (n - j)
    return cost if cost <= limit else None


class WavefrontAligner:
    """Edit distance and edit scripts via diagonal wavefronts.

    *prune* drops diagonals that cannot lie on an optimal path; results are
    the same either way. *max_length* caps the length of each input.
    """

    def __init__(
        self,
        cost_model: Optional[CostModel] = None,
        prune: bool = True,
        max_length: int = MAX_SEQUENCE_LENGTH,
    ):
        if cost_model is not None and not isinstance(cost_model, CostModel):
            raise ValidationError(f"expected a CostModel, got {type(cost_model).__name__}")
        self.cost_model = cost_model or DEFAULT_COST_MODEL
        self.prune = prune
        self.max_length = max_length

    def distance(self, a, b, max_distance: Optional[int] = None) -> int:
        """Return the edit distance between *a* and *b*.

        Raises :class:`BoundExceededError` if it is larger than *max_distance*.
        """
        return self._run(a, b, max_distance, record=False).distance

    def align(self, a, b, max_distance: Optional[int] = None) -> AlignmentResult:
        """Return the edit distance together with a minimal edit script."""
        return self._run(a, b, max_distance, record=True)

    def _validate(self, a, b, max_distance):
        a = as_sequence(a)
        b = as_sequence(b)
        for label, seq in (("a", a), ("b", b)):
            if len(seq) > self.max_length:
                raise ValidationError(
                    f"sequence {label} has length {len(seq)}, limit is {self.max_length}"
                )
        if max_distance is not None and max_distance < 0:
            raise ValidationError(f"max_distance must not be negative, got {max_distance}")
        return a, b

    def _run(self, a, b, max_distance: Optional[int], record: bool) -> AlignmentResult:
        a, b = self._validate(a, b, max_distance)
        m = len(a)
        n = len(b)
        target = m - n

        if max_distance is not None and abs(target) > max_distance:
            logger.debug(
                "Length difference %d already exceeds bound %d", abs(target), max_distance
            )
            raise BoundExceededError(max_distance, level=0)

        if m == 0 or n == 0:
            script = boundary_script(a, b) if record else []
            return AlignmentResult(distance=max(m, n), script=script, levels=0)

        equal = self.cost_model.equal
        offset = n + 1
        # One guard slot on each side so k - 1 and k + 1 are always valid indices.
        prev = np.full(m + n + 3, UNREACHED, dtype=np.int64)
        cur = np.full(m + n + 3, UNREACHED, dtype=np.int64)
        waves: List[Wave] = []

        row = extend(a, b, 0, 0, equal)
        cur[offset] = row
        lo = hi = 0
        stale = None
        if record:
            waves.append(Wave(
                0, 0,
                rows=np.array([row], dtype=np.int64),
                starts=np.array([0], dtype=np.int64),
                ops=np.array([ORIGIN], dtype=np.int8),
            ))

        upper = max(m - row, n - row)
        if max_distance is not None:
            upper = min(upper, max_distance)
        if self.prune:
            cost = greedy_cost(a, b, row, 0, equal, upper)
            if cost is not None:
                upper = cost
        widest = 1
        pruned = 0
        s = 0

        while not (lo <= target <= hi and cur[target + offset] == m):
            s += 1
            if max_distance is not None and s > max_distance:
                logger.debug("Bound %d exceeded after %d levels", max_distance, s)
                raise BoundExceededError(max_distance, level=s)

            prev, cur = cur, prev
            if stale is not None:
                cur[stale[0] + offset : stale[1] + offset + 1] = UNREACHED

            new_lo = max(lo - 1, -n)
            new_hi = min(hi + 1, m)
            if self.prune:
                radius = upper - s
                band_lo = max(new_lo, target - radius)
                band_hi = min(new_hi, target + radius)
                pruned += (new_hi - new_lo + 1) - max(0, band_hi - band_lo + 1)
                new_lo, new_hi = band_lo, band_hi

            ks = np.arange(new_lo, new_hi + 1, dtype=np.int64)
            idx = ks + offset
            same = prev[idx]
            from_del = prev[idx - 1]
            from_ins = prev[idx + 1]

            # Substitution first, then deletion, then insertion on ties.
            best = np.full(len(ks), UNREACHED, dtype=np.int64)
            ops = np.zeros(len(ks), dtype=np.int8)
            cand = same + 1
            ok = (same >= 0) & (cand <= m) & (cand - ks <= n)
            best[ok] = cand[ok]
            ops[ok] = SUBSTITUTION
            cand = from_del + 1
            ok = (from_del >= 0) & (cand <= m) & (cand > best)
            best[ok] = cand[ok]
            ops[ok] = DELETION
            ok = (from_ins >= 0) & (from_ins - ks <= n) & (from_ins > best)
            best[ok] = from_ins[ok]
            ops[ok] = INSERTION

            rows = best.copy()
            for t in np.flatnonzero(best >= 0):
                rows[t] = extend(a, b, int(best[t]), new_lo + int(t), equal)
            cur[new_lo + offset : new_hi + offset + 1] = rows

            reached = rows >= 0
            if not reached.any():
                if max_distance is not None:
                    logger.debug("No diagonal within bound %d at level %d", max_distance, s)
                    raise BoundExceededError(max_distance, level=s)
                raise RuntimeError(f"wavefront collapsed at level {s}")
            r = rows[reached]
            live_ks = ks[reached]
            bounds = np.maximum(m - r, n - r + live_ks)
            lead = int(np.argmin(bounds))
            upper = min(upper, s + int(bounds[lead]))
            # Lookahead from the most promising diagonal at levels 1, 2, 4, 8, ...
            if self.prune and (s & (s - 1)) == 0:
                cost = greedy_cost(a, b, int(r[lead]), int(live_ks[lead]), equal, upper - s)
                if cost is not None:
                    upper = min(upper, s + cost)

            if record:
                waves.append(Wave(new_lo, new_hi, rows=rows, starts=best, ops=ops))
            stale = (lo, hi)
            lo, hi = new_lo, new_hi
            widest = max(widest, new_hi - new_lo + 1)

        logger.debug(
            "Aligned %d x %d symbols: distance %d after %d levels, widest band %d, %d diagonals pruned",
            m, n, s, s + 1, widest, pruned,
        )
        script = build_script(waves, a, b, target) if record else []
        return AlignmentResult(
            distance=s, script=script, levels=s + 1, widest_band=widest, pruned=pruned
        )


def edit_distance(a, b, cost_model: Optional[CostModel] = None, max_distance: Optional[int] = None) -> int:
    """Minimum number of insertions, deletions and substitutions turning *a* into *b*."""
    return WavefrontAligner(cost_model=cost_model).distance(a, b, max_distance=max_distance)


def align(a, b, cost_model: Optional[CostModel] = None, max_distance: Optional[int] = None) -> AlignmentResult:
    """Edit distance plus an edit script from *a* to *b*."""
    return WavefrontAligner(cost_model=cost_model).align(a, b, max_distance=max_distance)
