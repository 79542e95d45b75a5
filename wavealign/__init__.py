"""
wavealign: unit-cost edit distance by diagonal wavefront alignment.

The aligner tracks, per diagonal of the edit graph, the furthest cell
reachable with ``s`` edits for ``s = 0, 1, 2, ...`` and stops at the first
level that reaches the end of both sequences. Its cost grows with the edit
distance rather than with the product of the sequence lengths, which pays
off when the sequences are similar.
"""

from wavealign.errors import BoundExceededError, ValidationError, WavealignError
from wavealign.sequence import Sequence, as_sequence, length, symbol_at
from wavealign.cost import CostModel
from wavealign.traceback import AlignmentResult, EditKind, EditOperation, apply_script
from wavealign.wavefront import WavefrontAligner, align, edit_distance
from wavealign.oracle import reference_align, reference_distance
from wavealign.stats import AlignmentStats, StatsReport, compute_stats

__version__ = "0.1.0"

__all__ = [
    "WavefrontAligner",
    "edit_distance",
    "align",
    "AlignmentResult",
    "EditKind",
    "EditOperation",
    "apply_script",
    "CostModel",
    "Sequence",
    "as_sequence",
    "length",
    "symbol_at",
    "reference_align",
    "reference_distance",
    "AlignmentStats",
    "StatsReport",
    "compute_stats",
    "WavealignError",
    "ValidationError",
    "BoundExceededError",
]
