from typing import Optional

from .base import (
    BaseFormatter, ExportFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget, export_line, format_export
)
from .unified import UnifiedFormatter, DiffHunk, HunkGenerator
from .side_by_side import (
    SideBySideFormatter, SideBySideRow, ColumnConfig, TextTruncator, LineNumberFormatter,
    GutterFormatter, build_rows
)
from .html import HTMLFormatter, SideBySideHTMLFormatter, JSONFormatter


__all__ = [
    "BaseFormatter", "ExportFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget", "export_line", "format_export",
    "UnifiedFormatter", "DiffHunk", "HunkGenerator",
    "SideBySideFormatter", "SideBySideRow", "ColumnConfig", "TextTruncator",
    "LineNumberFormatter", "GutterFormatter", "build_rows",
    "HTMLFormatter", "SideBySideHTMLFormatter", "JSONFormatter",
    "create_formatter", "get_available_formatters", "format_diff",
]


def create_formatter(name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters():
    return FormatterFactory.available()


def format_diff(result, name_a: str = "left", name_b: str = "right", formatter_name: str = "export",
                config: Optional[FormatterConfig] = None, current: Optional[int] = None) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(result, name_a, name_b, current)
