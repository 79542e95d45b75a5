"""Summary statistics for an alignment result."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from wavealign.traceback import AlignmentResult, EditKind


@dataclass
class AlignmentStats:
    """Per-operation counts and derived rates for one alignment."""

    matches: int = 0
    substitutions: int = 0
    insertions: int = 0
    deletions: int = 0
    alignment_length: int = 0  # columns in the alignment
    distance: int = 0
    identity: float = 0.0  # matches / alignment_length
    normalized_distance: float = 0.0  # distance / max(len(a), len(b))
    cigar: str = ""

    def to_dict(self) -> Dict:
        return {
            "matches": self.matches,
            "substitutions": self.substitutions,
            "insertions": self.insertions,
            "deletions": self.deletions,
            "alignment_length": self.alignment_length,
            "distance": self.distance,
            "identity": self.identity,
            "normalized_distance": self.normalized_distance,
            "cigar": self.cigar,
        }

    def to_json(self, filepath: Optional[str] = None) -> str:
        """Export to JSON, also writing it to *filepath* when given."""
        json_str = json.dumps(self.to_dict(), indent=2)
        if filepath:
            Path(filepath).write_text(json_str)
        return json_str


def compute_stats(result: AlignmentResult, a, b) -> AlignmentStats:
    """Count the operations of *result*'s script for sequences *a* and *b*."""
    counts = {kind: 0 for kind in EditKind}
    for op in result.script:
        counts[op.kind] += op.length

    columns = sum(counts.values())
    longest = max(len(a), len(b))
    return AlignmentStats(
        matches=counts[EditKind.MATCH],
        substitutions=counts[EditKind.SUBSTITUTION],
        insertions=counts[EditKind.INSERTION],
        deletions=counts[EditKind.DELETION],
        alignment_length=columns,
        distance=result.distance,
        identity=counts[EditKind.MATCH] / columns if columns else 1.0,
        normalized_distance=result.distance / longest if longest else 0.0,
        cigar=result.cigar,
    )


@dataclass
class StatsReport:
    """Aggregates statistics over many alignments."""

    stats: List[AlignmentStats] = field(default_factory=list)
    mean_identity: float = 0.0
    mean_normalized_distance: float = 0.0
    total_distance: int = 0

    def add(self, item: AlignmentStats) -> None:
        self.stats.append(item)
        self._recompute()

    def _recompute(self) -> None:
        if not self.stats:
            return
        self.mean_identity = sum(s.identity for s in self.stats) / len(self.stats)
        self.mean_normalized_distance = (
            sum(s.normalized_distance for s in self.stats) / len(self.stats)
        )
        self.total_distance = sum(s.distance for s in self.stats)
