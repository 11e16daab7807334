import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from helpers.naive_diff import (
    NaiveDiffStats,
    naive_lcs_length,
    naive_edit_distance,
    get_diff_stats,
    reconstruct,
    verify_diff,
    mirror,
)


__all__ = [
    "NaiveDiffStats",
    "naive_lcs_length",
    "naive_edit_distance",
    "get_diff_stats",
    "reconstruct",
    "verify_diff",
    "mirror",
]
