from typing import Iterable, Iterator, Optional, Tuple
from .utils import DiffEntry, DiffKind


def diff_index(result: Iterable[DiffEntry]) -> Tuple[int, ...]:
    return tuple(p for p, entry in enumerate(result) if entry.kind != DiffKind.EQUAL)


class DiffIndex:
    """Positions of the non-equal entries of a result plus a cyclic cursor.

    Instances never change; ``next``/``prev``/``seek`` return a new index so
    callers keep the cursor themselves. ``cursor`` indexes ``positions``,
    ``current`` is the matching entry position in the result.
    """

    __slots__ = ('positions', 'cursor')

    def __init__(self, positions: Iterable[int] = (), cursor: Optional[int] = 0):
        self.positions: Tuple[int, ...] = tuple(positions)
        if not self.positions:
            cursor = None
        elif cursor is not None:
            cursor %= len(self.positions)
        self.cursor: Optional[int] = cursor

    @classmethod
    def from_result(cls, result: Iterable[DiffEntry]) -> 'DiffIndex':
        return cls(diff_index(result))

    @property
    def current(self) -> Optional[int]:
        if self.cursor is None:
            return None
        return self.positions[self.cursor]

    def next(self) -> 'DiffIndex':
        if not self.positions:
            return self
        if self.cursor is None:
            return DiffIndex(self.positions, 0)
        return DiffIndex(self.positions, (self.cursor + 1) % len(self.positions))

    def prev(self) -> 'DiffIndex':
        if not self.positions:
            return self
        if self.cursor is None:
            return DiffIndex(self.positions, len(self.positions) - 1)
        return DiffIndex(self.positions, (self.cursor - 1) % len(self.positions))

    def seek(self, entry_position: int) -> 'DiffIndex':
        """Put the cursor on ``entry_position``; an equal entry leaves it absent."""
        if entry_position in self.positions:
            return DiffIndex(self.positions, self.positions.index(entry_position))
        return DiffIndex(self.positions, None)

    def advance(self, steps: int) -> 'DiffIndex':
        """Move ``steps`` times, backwards when negative.

        From an absent cursor the first step lands on the first or last difference.
        """
        if not self.positions or steps == 0:
            return self
        start = self.cursor
        if start is None:
            start = -1 if steps > 0 else 0
        return DiffIndex(self.positions, start + steps)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    def __bool__(self) -> bool:
        return bool(self.positions)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiffIndex):
            return NotImplemented
        return self.positions == other.positions and self.cursor == other.cursor

    def __hash__(self) -> int:
        return hash((self.positions, self.cursor))

    def __repr__(self) -> str:
        return f"DiffIndex(positions={self.positions!r}, cursor={self.cursor!r})"
