"""Line-based text diff: LCS engine, change merging, stats and difference navigation."""

from .algorithms import (
    DiffKind, DiffEntry, DiffResult, Stats, DiffIndex,
    compute_diff, compute_stats, diff_index, diff_lines, split_lines
)


__version__ = "1.0.0"

__all__ = [
    "DiffKind", "DiffEntry", "DiffResult", "Stats", "DiffIndex",
    "compute_diff", "compute_stats", "diff_index", "diff_lines", "split_lines",
    "__version__",
]
