"""Reference aligner: the full (m+1) x (n+1) Levenshtein matrix.

O(mn) time and memory. It exists to cross-check the wavefront aligner and
is not meant for production inputs.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from wavealign.cost import CostModel, DEFAULT_COST_MODEL
from wavealign.sequence import as_sequence
from wavealign.traceback import AlignmentResult, EditKind, EditOperation

logger = logging.getLogger(__name__)


def distance_matrix(a, b, cost_model: Optional[CostModel] = None) -> np.ndarray:
    """Return the matrix ``D`` where ``D[i, j]`` is the distance of ``a[:i]`` and ``b[:j]``."""
    cm = cost_model or DEFAULT_COST_MODEL
    m = len(a)
    n = len(b)
    logger.debug("Filling %d x %d reference matrix", m + 1, n + 1)

    D = np.zeros((m + 1, n + 1), dtype=np.int64)
    D[:, 0] = np.arange(m + 1)
    D[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        ai = a[i - 1]
        for j in range(1, n + 1):
            if cm.equal(ai, b[j - 1]):
                D[i, j] = D[i - 1, j - 1]
            else:
                D[i, j] = 1 + min(D[i - 1, j - 1], D[i - 1, j], D[i, j - 1])
    return D


def reference_distance(a, b, cost_model: Optional[CostModel] = None) -> int:
    a = as_sequence(a)
    b = as_sequence(b)
    return int(distance_matrix(a, b, cost_model)[len(a), len(b)])


def reference_align(a, b, cost_model: Optional[CostModel] = None) -> AlignmentResult:
    """Distance plus an edit script traced back through the full matrix.

    Ties prefer a diagonal step, then a deletion, then an insertion.
    """
    cm = cost_model or DEFAULT_COST_MODEL
    a = as_sequence(a)
    b = as_sequence(b)
    D = distance_matrix(a, b, cm)

    reversed_ops: List[EditOperation] = []
    i, j = len(a), len(b)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and cm.equal(a[i - 1], b[j - 1]) and D[i, j] == D[i - 1, j - 1]:
            if reversed_ops and reversed_ops[-1].kind is EditKind.MATCH:
                run = reversed_ops.pop()
                reversed_ops.append(
                    EditOperation(EditKind.MATCH, i - 1, j - 1, length=run.length + 1)
                )
            else:
                reversed_ops.append(EditOperation(EditKind.MATCH, i - 1, j - 1))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and D[i, j] == D[i - 1, j - 1] + 1:
            reversed_ops.append(
                EditOperation(EditKind.SUBSTITUTION, i - 1, j - 1, symbols=(b[j - 1],))
            )
            i -= 1
            j -= 1
        elif i > 0 and D[i, j] == D[i - 1, j] + 1:
            reversed_ops.append(EditOperation(EditKind.DELETION, i - 1, j))
            i -= 1
        else:
            reversed_ops.append(EditOperation(EditKind.INSERTION, i, j - 1, symbols=(b[j - 1],)))
            j -= 1

    reversed_ops.reverse()
    return AlignmentResult(distance=int(D[len(a), len(b)]), script=reversed_ops)
