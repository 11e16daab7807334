from .utils import (
    DiffKind, DiffEntry, DiffResult, Stats,
    make_equal, make_add, make_delete, make_change,
    split_lines, left_lines, right_lines, compute_stats, has_changes,
    similarity_ratio, calculate_line_numbers, split_into_hunks
)
from .lcs import (
    LCSDiff, build_lcs_matrix, backtrack, merge_changes, diff_lines, compute_diff, lcs_length
)
from .navigation import DiffIndex, diff_index


__all__ = [
    "DiffKind", "DiffEntry", "DiffResult", "Stats",
    "make_equal", "make_add", "make_delete", "make_change",
    "split_lines", "left_lines", "right_lines", "compute_stats", "has_changes",
    "similarity_ratio", "calculate_line_numbers", "split_into_hunks",
    "LCSDiff", "build_lcs_matrix", "backtrack", "merge_changes", "diff_lines",
    "compute_diff", "lcs_length",
    "DiffIndex", "diff_index",
]
