from typing import List, Tuple, NamedTuple, Optional, Iterable
from enum import Enum


class DiffKind(str, Enum):
    EQUAL = 'equal'
    ADD = 'add'
    DELETE = 'delete'
    CHANGE = 'change'


class DiffEntry(NamedTuple):
    kind: DiffKind
    text_a: Optional[str] = None
    text_b: Optional[str] = None

    def __repr__(self) -> str:
        if self.kind == DiffKind.ADD:
            return f"DiffEntry({self.kind.value!r}, b={self.text_b!r})"
        if self.kind == DiffKind.DELETE:
            return f"DiffEntry({self.kind.value!r}, a={self.text_a!r})"
        return f"DiffEntry({self.kind.value!r}, {self.text_a!r}, {self.text_b!r})"


DiffResult = Tuple[DiffEntry, ...]


class Stats(NamedTuple):
    add: int = 0
    delete: int = 0
    change: int = 0

    @property
    def total(self) -> int:
        return self.add + self.delete + self.change

    def as_dict(self) -> dict:
        return {'add': self.add, 'delete': self.delete, 'change': self.change}

    @classmethod
    def from_dict(cls, data: dict) -> 'Stats':
        return cls(int(data.get('add', 0)), int(data.get('delete', 0)), int(data.get('change', 0)))


def make_equal(text_a: str, text_b: Optional[str] = None) -> DiffEntry:
    return DiffEntry(DiffKind.EQUAL, text_a, text_a if text_b is None else text_b)


def make_add(text_b: str) -> DiffEntry:
    return DiffEntry(DiffKind.ADD, None, text_b)


def make_delete(text_a: str) -> DiffEntry:
    return DiffEntry(DiffKind.DELETE, text_a, None)


def make_change(text_a: str, text_b: str) -> DiffEntry:
    return DiffEntry(DiffKind.CHANGE, text_a, text_b)


def split_lines(text: str) -> List[str]:
    """Split on ``\\n`` only, keeping blank lines and ``\\r`` as given.

    The empty string has no lines at all, so two empty inputs compare as an
    empty result rather than one blank ``equal`` line.
    """
    if not text:
        return []
    return text.split('\n')


def left_lines(result: Iterable[DiffEntry]) -> List[str]:
    return [e.text_a for e in result if e.kind != DiffKind.ADD]


def right_lines(result: Iterable[DiffEntry]) -> List[str]:
    return [e.text_b for e in result if e.kind != DiffKind.DELETE]


def compute_stats(result: Iterable[DiffEntry]) -> Stats:
    add = delete = change = 0
    for entry in result:
        if entry.kind == DiffKind.ADD:
            add += 1
        elif entry.kind == DiffKind.DELETE:
            delete += 1
        elif entry.kind == DiffKind.CHANGE:
            change += 1
    return Stats(add, delete, change)


def has_changes(result: Iterable[DiffEntry]) -> bool:
    return any(entry.kind != DiffKind.EQUAL for entry in result)


def similarity_ratio(result: DiffResult) -> float:
    equal = sum(1 for e in result if e.kind == DiffKind.EQUAL)
    total = len(left_lines(result)) + len(right_lines(result))
    return (2.0 * equal / total) if total > 0 else 1.0


def calculate_line_numbers(result: Iterable[DiffEntry]) -> List[Tuple[Optional[int], Optional[int]]]:
    """1-based (left, right) line numbers per entry, ``None`` on the absent side."""
    numbers = []
    left_no = 0
    right_no = 0
    for entry in result:
        left = right = None
        if entry.kind != DiffKind.ADD:
            left_no += 1
            left = left_no
        if entry.kind != DiffKind.DELETE:
            right_no += 1
            right = right_no
        numbers.append((left, right))
    return numbers


def split_into_hunks(result: DiffResult, context: int = 3) -> List[Tuple[int, int]]:
    """Inclusive ``(start, end)`` entry ranges around differences, overlapping ranges merged."""
    change_indices = [i for i, entry in enumerate(result) if entry.kind != DiffKind.EQUAL]
    if not change_indices:
        return []
    last = len(result) - 1
    ranges = []
    current_start = max(0, change_indices[0] - context)
    current_end = min(last, change_indices[0] + context)
    for idx in change_indices[1:]:
        potential_start = max(0, idx - context)
        if potential_start <= current_end + 1:
            current_end = min(last, idx + context)
        else:
            ranges.append((current_start, current_end))
            current_start = potential_start
            current_end = min(last, idx + context)
    ranges.append((current_start, current_end))
    return ranges
