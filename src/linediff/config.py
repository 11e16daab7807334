import os
from typing import List, Tuple


DEFAULT_MAX_LINES = 5000
DEFAULT_HISTORY_LIMIT = 10
HISTORY_ENV_VAR = "LINEDIFF_HISTORY"


def default_history_path() -> str:
    return os.environ.get(HISTORY_ENV_VAR) or os.path.join(
        os.path.expanduser("~"), ".linediff_history.json")


class DiffLimits:
    """Size policy applied before diffing; the LCS table grows with lines(A) * lines(B)."""

    def __init__(self, max_lines: int = DEFAULT_MAX_LINES, truncate: bool = False):
        if max_lines < 1:
            raise ValueError(f"max_lines must be positive, got {max_lines}")
        self.max_lines = max_lines
        self.truncate = truncate

    def copy(self) -> 'DiffLimits':
        return DiffLimits(max_lines=self.max_lines, truncate=self.truncate)

    def with_max_lines(self, max_lines: int) -> 'DiffLimits':
        return DiffLimits(max_lines=max_lines, truncate=self.truncate)

    def with_truncate(self, truncate: bool) -> 'DiffLimits':
        return DiffLimits(max_lines=self.max_lines, truncate=truncate)

    def exceeds(self, lines: List[str]) -> bool:
        return len(lines) > self.max_lines

    def apply(self, lines: List[str], label: str = "input") -> Tuple[List[str], bool]:
        """Return ``(lines, truncated)``; raise ValueError for oversize input unless truncating."""
        if not self.exceeds(lines):
            return lines, False
        if not self.truncate:
            raise ValueError(
                f"{label} has {len(lines)} lines, limit is {self.max_lines} (use --truncate or --max-lines)")
        return lines[:self.max_lines], True
