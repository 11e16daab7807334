from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict
from enum import Enum
import sys

from ..algorithms.utils import DiffEntry, DiffKind, DiffResult, has_changes


class OutputTarget(Enum):
    STDOUT = "stdout"
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        context_lines: int = 3,
        width: int = 130,
        use_color: bool = True,
        show_line_numbers: bool = True
    ):
        self.context_lines = context_lines
        self.width = width
        self.use_color = use_color
        self.show_line_numbers = show_line_numbers

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            context_lines=self.context_lines,
            width=self.width,
            use_color=self.use_color,
            show_line_numbers=self.show_line_numbers
        )

    def with_context_lines(self, lines: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.context_lines = lines
        return cfg

    def with_width(self, width: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.width = width
        return cfg

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg

    def with_line_numbers(self, show: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.show_line_numbers = show
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.yellow = '\033[33m'
        self.cyan = '\033[36m'
        self.reverse = '\033[7m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''
        self.yellow = ''
        self.cyan = ''
        self.reverse = ''

    def for_kind(self, kind: DiffKind) -> str:
        return {
            DiffKind.ADD: self.green,
            DiffKind.DELETE: self.red,
            DiffKind.CHANGE: self.yellow,
        }.get(kind, '')

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STDOUT, output: Optional[TextIO] = None):
        self.target = target
        self._output = output or sys.stdout
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)


class BaseFormatter(ABC):
    """Renders a diff result; ``current`` is the entry position under the navigation cursor."""

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None

    def format(
        self,
        result: DiffResult,
        name_a: str = "left",
        name_b: str = "right",
        current: Optional[int] = None,
        output: Optional[TextIO] = None
    ) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        self._format_impl(tuple(result), name_a, name_b, current)
        if output is None:
            return self.writer.get_output()
        return ""

    @abstractmethod
    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        pass

    def has_changes(self, result: DiffResult) -> bool:
        return has_changes(result)

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


def export_line(entry: DiffEntry) -> str:
    if entry.kind == DiffKind.ADD:
        return "+ " + (entry.text_b or "")
    if entry.kind == DiffKind.DELETE:
        return "- " + (entry.text_a or "")
    if entry.kind == DiffKind.CHANGE:
        return "~ " + (entry.text_a or "") + " => " + (entry.text_b or "")
    return "  " + (entry.text_a or "")


def format_export(result: DiffResult) -> str:
    """Clipboard text: one prefixed line per entry, newline-joined, no trailing newline."""
    return "\n".join(export_line(entry) for entry in result)


class ExportFormatter(BaseFormatter):
    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        lines = []
        for entry in result:
            color = self.colors.for_kind(entry.kind)
            line = export_line(entry)
            lines.append(f"{color}{line}{self.colors.reset}" if color else line)
        self._write("\n".join(lines))


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())


FormatterFactory.register("export", ExportFormatter)
