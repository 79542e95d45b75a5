"""Immutable symbol sequences compared by the aligners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence as _SequenceABC, Union


SymbolsLike = Union[str, bytes, _SequenceABC, "Sequence"]


@dataclass(frozen=True)
class Sequence:
    """A named, read-only sequence of symbols.

    ``str``, ``bytes`` and tuples are stored as given; any other iterable is
    frozen into a tuple so the caller's list can't change under an alignment.
    """

    symbols: Any
    name: str = ""

    def __post_init__(self):
        if not isinstance(self.symbols, (str, bytes, tuple)):
            object.__setattr__(self, "symbols", tuple(self.symbols))

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator:
        return iter(self.symbols)

    def __getitem__(self, index):
        return self.symbols[index]

    def symbol_at(self, index: int):
        """Return the symbol at *index*; negative indices are not allowed."""
        if not 0 <= index < len(self.symbols):
            raise IndexError(
                f"index {index} out of range for sequence of length {len(self.symbols)}"
            )
        return self.symbols[index]


def as_sequence(obj: SymbolsLike) -> Sequence:
    """Coerce *obj* to a :class:`Sequence` (no copy if it already is one)."""
    if isinstance(obj, Sequence):
        return obj
    return Sequence(obj)


def length(seq: SymbolsLike) -> int:
    return len(seq)


def symbol_at(seq: SymbolsLike, index: int):
    return as_sequence(seq).symbol_at(index)
