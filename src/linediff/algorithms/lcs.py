from typing import List, Sequence
from .utils import (
    DiffEntry, DiffKind, DiffResult, make_equal, make_add, make_delete, make_change, split_lines
)


Matrix = List[List[int]]


def build_lcs_matrix(a: Sequence[str], b: Sequence[str]) -> Matrix:
    """LCS length table: ``dp[i][j]`` is the LCS length of ``a[:i]`` and ``b[:j]``.

    O(m*n) in time and memory. Inputs of many thousands of lines should be
    limited by the caller before they get here.
    """
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        row, prev = dp[i], dp[i - 1]
        line = a[i - 1]
        for j in range(1, n + 1):
            if line == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def backtrack(rev_a: Sequence[str], rev_b: Sequence[str], dp: Matrix) -> List[DiffEntry]:
    """Turn the table of the *reversed* line lists into a top-to-bottom equal/delete/add script.

    ``dp`` must be ``build_lcs_matrix(rev_a, rev_b)``. Walking it from the
    bottom-right corner visits the original lines first to last, so entries
    are emitted in display order. When dropping either line keeps the same
    LCS the left line is deleted, which puts a delete ahead of the add that
    replaces it.
    """
    i, j = len(rev_a), len(rev_b)
    script: List[DiffEntry] = []
    while i > 0 and j > 0:
        if rev_a[i - 1] == rev_b[j - 1]:
            script.append(make_equal(rev_a[i - 1], rev_b[j - 1]))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            script.append(make_delete(rev_a[i - 1]))
            i -= 1
        else:
            script.append(make_add(rev_b[j - 1]))
            j -= 1
    while i > 0:
        script.append(make_delete(rev_a[i - 1]))
        i -= 1
    while j > 0:
        script.append(make_add(rev_b[j - 1]))
        j -= 1
    return script


def merge_changes(script: Sequence[DiffEntry]) -> DiffResult:
    """Collapse each delete immediately followed by an add into one change entry.

    Only that exact adjacency is merged: add-then-delete stays as two entries.
    """
    merged: List[DiffEntry] = []
    k = 0
    while k < len(script):
        entry = script[k]
        if (entry.kind == DiffKind.DELETE and k + 1 < len(script)
                and script[k + 1].kind == DiffKind.ADD):
            merged.append(make_change(entry.text_a, script[k + 1].text_b))
            k += 2
        else:
            merged.append(entry)
            k += 1
    return tuple(merged)


class LCSDiff:
    def __init__(self, original: Sequence[str], modified: Sequence[str]):
        self.original = list(original)
        self.modified = list(modified)
        self.m = len(self.original)
        self.n = len(self.modified)
        self._rev_a = self.original[::-1]
        self._rev_b = self.modified[::-1]
        self._matrix: Matrix = []

    def compute_matrix(self) -> Matrix:
        """Table over the reversed lines: ``[i][j]`` is the LCS of the last i and last j lines."""
        if not self._matrix:
            self._matrix = build_lcs_matrix(self._rev_a, self._rev_b)
        return self._matrix

    def backtrack(self) -> List[DiffEntry]:
        return backtrack(self._rev_a, self._rev_b, self.compute_matrix())

    def compute(self) -> DiffResult:
        if self.m == 0 and self.n == 0:
            return ()
        return merge_changes(self.backtrack())

    def lcs_length(self) -> int:
        return self.compute_matrix()[self.m][self.n]


def diff_lines(original: Sequence[str], modified: Sequence[str]) -> DiffResult:
    return LCSDiff(original, modified).compute()


def compute_diff(text_a: str, text_b: str) -> DiffResult:
    return diff_lines(split_lines(text_a), split_lines(text_b))


def lcs_length(original: Sequence[str], modified: Sequence[str]) -> int:
    return LCSDiff(original, modified).lcs_length()
