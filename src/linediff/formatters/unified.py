from typing import List, Optional, Tuple

from ..algorithms.utils import DiffEntry, DiffKind, DiffResult, split_into_hunks
from .base import BaseFormatter, FormatterConfig, FormatterFactory


class DiffHunk:
    def __init__(self, orig_start: int, orig_count: int, mod_start: int, mod_count: int,
                 entries: List[DiffEntry], first: int = 0):
        self.orig_start = orig_start
        self.orig_count = orig_count
        self.mod_start = mod_start
        self.mod_count = mod_count
        self.entries = entries
        self.first = first

    def __repr__(self) -> str:
        return f"DiffHunk({self.header()})"

    def header(self) -> str:
        return f"@@ -{self.orig_start + 1},{self.orig_count} +{self.mod_start + 1},{self.mod_count} @@"

    def has_changes(self) -> bool:
        return any(e.kind != DiffKind.EQUAL for e in self.entries)


def _line_counts(entries) -> Tuple[int, int]:
    orig = sum(1 for e in entries if e.kind != DiffKind.ADD)
    mod = sum(1 for e in entries if e.kind != DiffKind.DELETE)
    return orig, mod


class HunkGenerator:
    def __init__(self, context_lines: int = 3):
        self.context_lines = context_lines

    def generate(self, result: DiffResult) -> List[DiffHunk]:
        hunks = []
        for start, end in split_into_hunks(result, self.context_lines):
            orig_start, mod_start = _line_counts(result[:start])
            entries = list(result[start:end + 1])
            orig_count, mod_count = _line_counts(entries)
            hunks.append(DiffHunk(orig_start, orig_count, mod_start, mod_count, entries, start))
        return hunks


class UnifiedFormatter(BaseFormatter):
    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__(config)
        self.hunk_generator = HunkGenerator(self.config.context_lines)

    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        if not self.has_changes(result):
            return
        self._writeln(f"{self.colors.bold}--- {name_a}{self.colors.reset}")
        self._writeln(f"{self.colors.bold}+++ {name_b}{self.colors.reset}")
        for hunk in self.hunk_generator.generate(result):
            self._write_hunk(hunk, current)

    def _write_hunk(self, hunk: DiffHunk, current: Optional[int]):
        header = hunk.header()
        holds_current = current is not None and hunk.first <= current < hunk.first + len(hunk.entries)
        if holds_current and not self.config.use_color:
            # text after the closing @@ is free-form section text in unified diffs
            header += " [current]"
        self._writeln(f"{self.colors.cyan}{header}{self.colors.reset}")
        for offset, e in enumerate(hunk.entries):
            mark = self.colors.reverse if hunk.first + offset == current else ''
            if e.kind == DiffKind.EQUAL:
                self._writeln(f" {e.text_a}")
            if e.kind in (DiffKind.DELETE, DiffKind.CHANGE):
                self._writeln(f"{mark}{self.colors.red}-{e.text_a}{self.colors.reset}")
            if e.kind in (DiffKind.ADD, DiffKind.CHANGE):
                self._writeln(f"{mark}{self.colors.green}+{e.text_b}{self.colors.reset}")


FormatterFactory.register("unified", UnifiedFormatter)
