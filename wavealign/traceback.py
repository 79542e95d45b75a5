"""Edit scripts: operations, results, traceback through recorded waves and replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from wavealign.errors import ValidationError
from wavealign.sequence import Sequence as SymbolSequence


# Transition codes stored per diagonal in a wave's ``ops`` array.
ORIGIN = 0
SUBSTITUTION = 1
DELETION = 2
INSERTION = 3


class EditKind(Enum):
    MATCH = "M"
    SUBSTITUTION = "X"
    INSERTION = "I"
    DELETION = "D"


@dataclass(frozen=True)
class EditOperation:
    """One step of an edit script from A to B.

    *a_pos* and *b_pos* are the positions in A and B where the operation
    starts. Matches consume *length* symbols from both sequences,
    substitutions one from each, deletions one from A and insertions one
    from B. *symbols* holds the B symbols written by a substitution or an
    insertion, so the script can be replayed against A alone.
    """

    kind: EditKind
    a_pos: int
    b_pos: int
    length: int = 1
    symbols: Tuple = ()

    @property
    def is_edit(self) -> bool:
        return self.kind is not EditKind.MATCH


@dataclass
class AlignmentResult:
    """Edit distance between A and B plus, when requested, an edit script."""

    distance: int
    script: List[EditOperation] = field(default_factory=list)
    levels: int = 0
    widest_band: int = 0  # most diagonals live at any one level
    pruned: int = 0  # diagonals skipped by band pruning, summed over levels

    @property
    def edits(self) -> List[EditOperation]:
        """The script without its match runs."""
        return [op for op in self.script if op.is_edit]

    @property
    def edit_count(self) -> int:
        return sum(op.length for op in self.edits)

    @property
    def cigar(self) -> str:
        """CIGAR-like run-length string, e.g. ``3M1X2M1I``."""
        if not self.script:
            return ""
        ops: list[tuple[str, int]] = []
        for op in self.script:
            code = op.kind.value
            if ops and ops[-1][0] == code:
                ops[-1] = (code, ops[-1][1] + op.length)
            else:
                ops.append((code, op.length))
        return "".join(f"{count}{code}" for code, count in ops)

    @property
    def aligned_pairs(self) -> List[Tuple[Optional[int], Optional[int], str]]:
        """One ``(a_pos, b_pos, code)`` triple per alignment column.

        Deletions have no B position and insertions no A position.
        """
        pairs: List[Tuple[Optional[int], Optional[int], str]] = []
        for op in self.script:
            code = op.kind.value
            for offset in range(op.length):
                if op.kind is EditKind.DELETION:
                    pairs.append((op.a_pos + offset, None, code))
                elif op.kind is EditKind.INSERTION:
                    pairs.append((None, op.b_pos + offset, code))
                else:
                    pairs.append((op.a_pos + offset, op.b_pos + offset, code))
        return pairs


def build_script(waves: Sequence, a, b, target_diagonal: int) -> List[EditOperation]:
    """Walk the recorded waves back from the target cell and return the script.

    ``waves[s]`` must provide ``row_at(k)``, ``start_at(k)`` and ``op_at(k)``:
    the extended row, the row before extension and the transition code of
    diagonal *k* at level *s*. The last wave holds the target on
    *target_diagonal* at row ``len(a)``.
    """
    reversed_ops: List[EditOperation] = []
    k = target_diagonal
    row = len(a)
    for s in range(len(waves) - 1, -1, -1):
        wave = waves[s]
        if wave.row_at(k) != row:
            raise RuntimeError(
                f"inconsistent wave at level {s}, diagonal {k}: "
                f"expected row {row}, found {wave.row_at(k)}"
            )
        start = wave.start_at(k)
        if row > start:
            reversed_ops.append(
                EditOperation(EditKind.MATCH, start, start - k, length=row - start)
            )
        code = wave.op_at(k)
        if code == ORIGIN:
            break
        if code == SUBSTITUTION:
            i, j = start - 1, start - 1 - k
            reversed_ops.append(EditOperation(EditKind.SUBSTITUTION, i, j, symbols=(b[j],)))
            row = start - 1
        elif code == DELETION:
            i, j = start - 1, start - k
            reversed_ops.append(EditOperation(EditKind.DELETION, i, j))
            row = start - 1
            k -= 1
        elif code == INSERTION:
            i, j = start, start - k - 1
            reversed_ops.append(EditOperation(EditKind.INSERTION, i, j, symbols=(b[j],)))
            row = start
            k += 1
        else:
            raise RuntimeError(f"unknown transition code {code} at level {s}")

    reversed_ops.reverse()
    return reversed_ops


def boundary_script(a, b) -> List[EditOperation]:
    """Script for the case where A or B is empty: all deletions or insertions."""
    if len(b) == 0:
        return [EditOperation(EditKind.DELETION, i, 0) for i in range(len(a))]
    return [
        EditOperation(EditKind.INSERTION, 0, j, symbols=(b[j],)) for j in range(len(b))
    ]


def apply_script(a, script: Sequence[EditOperation]):
    """Replay *script* on *a* and return the resulting sequence.

    The result has the type of *a* where that is possible (``str``,
    ``bytes``, ``tuple``), otherwise it is a list. Raises
    :class:`ValidationError` when the script does not fit *a*.
    """
    symbols = a.symbols if isinstance(a, SymbolSequence) else a
    out: list = []
    pos = 0
    for op in script:
        if op.length < 0:
            raise ValidationError(f"negative operation length in {op}")
        if op.kind in (EditKind.SUBSTITUTION, EditKind.INSERTION) and len(op.symbols) != op.length:
            raise ValidationError(f"{op.kind.name} needs {op.length} symbol(s), got {op.symbols!r}")
        consumed = 0 if op.kind is EditKind.INSERTION else op.length
        if pos + consumed > len(symbols):
            raise ValidationError(
                f"{op.kind.name} at A position {pos} runs past the end of A (length {len(symbols)})"
            )
        if op.kind is EditKind.MATCH:
            out.extend(symbols[pos : pos + op.length])
        elif op.kind in (EditKind.SUBSTITUTION, EditKind.INSERTION):
            out.extend(op.symbols)
        pos += consumed

    if pos != len(symbols):
        raise ValidationError(f"script consumed {pos} of {len(symbols)} symbols of A")

    if isinstance(symbols, str):
        return "".join(out)
    if isinstance(symbols, bytes):
        return bytes(out)
    if isinstance(symbols, tuple):
        return tuple(out)
    return out
