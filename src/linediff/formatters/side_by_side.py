from typing import List, Optional

from ..algorithms.utils import DiffKind, DiffResult, calculate_line_numbers
from .base import BaseFormatter, ColorScheme, FormatterConfig, FormatterFactory


class ColumnConfig:
    def __init__(self, total_width: int = 130, gutter_width: int = 3, line_num_width: int = 4):
        self.total_width = total_width
        self.gutter_width = gutter_width
        self.line_num_width = line_num_width
        # cursor marker, two line numbers and their separating spaces
        available = total_width - gutter_width - (2 * line_num_width) - 4
        self.content_width = max(1, available // 2)


class TextTruncator:
    def __init__(self, max_width: int, ellipsis: str = "..."):
        self.max_width = max_width
        self.ellipsis = ellipsis

    def truncate(self, text: str) -> str:
        if len(text) <= self.max_width:
            return text
        if self.max_width <= len(self.ellipsis):
            return text[:self.max_width]
        return text[:self.max_width - len(self.ellipsis)] + self.ellipsis

    def truncate_and_pad(self, text: str) -> str:
        return self.truncate(text).ljust(self.max_width)


class LineNumberFormatter:
    def __init__(self, width: int = 4):
        self.width = width

    def format(self, line_num: Optional[int]) -> str:
        if line_num is None:
            return " " * self.width
        return str(line_num).rjust(self.width)[-self.width:]


class GutterFormatter:
    MARKERS = {
        DiffKind.EQUAL: " | ",
        DiffKind.DELETE: " < ",
        DiffKind.ADD: " > ",
        DiffKind.CHANGE: " ~ ",
    }

    def __init__(self, colors: ColorScheme):
        self.colors = colors

    def format(self, kind: DiffKind) -> str:
        color = self.colors.for_kind(kind)
        if not color:
            return self.MARKERS[kind]
        return f"{color}{self.MARKERS[kind]}{self.colors.reset}"


class SideBySideRow:
    def __init__(self, left_num: Optional[int], left_content: str,
                 right_num: Optional[int], right_content: str, kind: DiffKind):
        self.left_num = left_num
        self.left_content = left_content
        self.right_num = right_num
        self.right_content = right_content
        self.kind = kind


def build_rows(result: DiffResult) -> List[SideBySideRow]:
    rows = []
    for entry, (left_num, right_num) in zip(result, calculate_line_numbers(result)):
        rows.append(SideBySideRow(left_num, entry.text_a if left_num else "",
                                  right_num, entry.text_b if right_num else "", entry.kind))
    return rows


class SideBySideFormatter(BaseFormatter):
    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__(config)
        num_width = 4 if self.config.show_line_numbers else 0
        self.columns = ColumnConfig(self.config.width, line_num_width=num_width)
        self.truncator = TextTruncator(self.columns.content_width)
        self.numbers = LineNumberFormatter(self.columns.line_num_width)
        self.gutter = GutterFormatter(self.colors)

    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        num_column = self.columns.line_num_width + 1 if self.config.show_line_numbers else 0
        title = TextTruncator(self.columns.content_width + num_column + 1)
        self._writeln("=" * self.columns.total_width)
        self._writeln(f"{title.truncate_and_pad(name_a)} | {title.truncate(name_b)}")
        self._writeln("=" * self.columns.total_width)
        for position, row in enumerate(build_rows(result)):
            self._writeln(self._format_row(row, position == current))

    def _numbered(self, line_num: Optional[int], content: str) -> str:
        if not self.config.show_line_numbers:
            return content
        return f"{self.numbers.format(line_num)} {content}"

    def _format_row(self, row: SideBySideRow, is_current: bool) -> str:
        marker = ">" if is_current else " "
        color = self.colors.for_kind(row.kind)
        reset = self.colors.reset if color else ""
        left = self._numbered(row.left_num, self.truncator.truncate_and_pad(row.left_content))
        right = self._numbered(row.right_num, self.truncator.truncate(row.right_content))
        if row.kind in (DiffKind.DELETE, DiffKind.CHANGE):
            left = f"{color}{left}{reset}"
        if row.kind in (DiffKind.ADD, DiffKind.CHANGE):
            right = f"{color}{right}{reset}"
        return f"{marker}{left}{self.gutter.format(row.kind)}{right}"


FormatterFactory.register("side-by-side", SideBySideFormatter)
