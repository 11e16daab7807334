import json
from typing import Optional
from html import escape as html_escape

from ..algorithms.utils import DiffKind, DiffResult, calculate_line_numbers, compute_stats, similarity_ratio
from ..algorithms.navigation import diff_index
from .base import BaseFormatter, FormatterFactory


DEFAULT_STYLES = """
body { font-family: monospace; margin: 20px; background: #fafafa; color: #333; }
.diff-container { border: 1px solid #ddd; border-radius: 4px; overflow: hidden; margin-bottom: 20px; }
.diff-header { background: #f7f7f7; padding: 10px 15px; border-bottom: 1px solid #ddd; font-weight: bold; }
table { width: 100%; border-collapse: collapse; font-size: 13px; }
td { padding: 2px 8px; vertical-align: top; white-space: pre-wrap; word-wrap: break-word; }
.line-num { width: 50px; text-align: right; color: #999; background: #f7f7f7; border-right: 1px solid #eee; }
.equal { background: #fff; }
.add { background: #dcfce7; }
.delete { background: #fee2e2; }
.change { background: #fef9c3; }
.current { outline: 2px solid #60a5fa; }
.marker { width: 20px; text-align: center; font-weight: bold; }
.marker-add { color: #16a34a; }
.marker-delete { color: #dc2626; }
.marker-change { color: #ca8a04; }
.content { width: 45%; }
.gutter { width: 10px; background: #f0f0f0; }
.stats { padding: 10px 15px; background: #f7f7f7; border-top: 1px solid #ddd; font-size: 12px; }
"""

MARKERS = {DiffKind.EQUAL: " ", DiffKind.ADD: "+", DiffKind.DELETE: "-", DiffKind.CHANGE: "~"}


def _num(value: Optional[int]) -> str:
    return "" if value is None else str(value)


def _num_cell(value: Optional[int], show: bool) -> str:
    if not show:
        return ""
    return f'<td class="line-num">{_num(value)}</td>'


def _page(title: str, header: str, body: str, footer: str = "") -> str:
    return f"""<!DOCTYPE html>
<html><head><meta charset="UTF-8"><title>{title}</title>
<style>{DEFAULT_STYLES}</style></head><body>
<div class="diff-container">
<div class="diff-header">{header}</div>
<table>{body}</table>{footer}
</div></body></html>"""


class HTMLFormatter(BaseFormatter):
    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        rows = []
        show = self.config.show_line_numbers
        for position, (e, (left_num, right_num)) in enumerate(zip(result, calculate_line_numbers(result))):
            css = e.kind.value + (" current" if position == current else "")
            if e.kind == DiffKind.CHANGE:
                text = f"{html_escape(e.text_a)} &rArr; {html_escape(e.text_b)}"
            elif e.kind == DiffKind.ADD:
                text = html_escape(e.text_b)
            else:
                text = html_escape(e.text_a)
            rows.append(f'<tr class="{css}" id="entry-{position}">{_num_cell(left_num, show)}'
                        f'{_num_cell(right_num, show)}'
                        f'<td class="marker marker-{e.kind.value}">{MARKERS[e.kind]}</td><td>{text}</td></tr>')
        stats = compute_stats(result)
        footer = (f'\n<div class="stats">added {stats.add}, deleted {stats.delete}, '
                  f'changed {stats.change}</div>')
        header = f"<span>--- {html_escape(name_a)}</span><br><span>+++ {html_escape(name_b)}</span>"
        title = f"Diff: {html_escape(name_a)} vs {html_escape(name_b)}"
        self._write(_page(title, header, "".join(rows), footer))


class SideBySideHTMLFormatter(BaseFormatter):
    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        rows = []
        show = self.config.show_line_numbers
        for position, (e, (left_num, right_num)) in enumerate(zip(result, calculate_line_numbers(result))):
            css = e.kind.value + (" current" if position == current else "")
            left = html_escape(e.text_a) if left_num else ""
            right = html_escape(e.text_b) if right_num else ""
            rows.append(f'<tr class="{css}" id="entry-{position}">{_num_cell(left_num, show)}'
                        f'<td class="content">{left}</td><td class="gutter"></td>'
                        f'{_num_cell(right_num, show)}<td class="content">{right}</td></tr>')
        header = f"{html_escape(name_a)} vs {html_escape(name_b)}"
        self._write(_page(f"Diff: {header}", header, "".join(rows)))


class JSONFormatter(BaseFormatter):
    def _format_impl(self, result: DiffResult, name_a: str, name_b: str, current: Optional[int]):
        entries = []
        for e, (left_num, right_num) in zip(result, calculate_line_numbers(result)):
            item = {"kind": e.kind.value}
            if left_num is not None:
                item["left_line"] = left_num
                item["text_a"] = e.text_a
            if right_num is not None:
                item["right_line"] = right_num
                item["text_b"] = e.text_b
            entries.append(item)
        data = {
            "left": name_a,
            "right": name_b,
            "entries": entries,
            "stats": compute_stats(result).as_dict(),
            "similarity": round(similarity_ratio(result), 4),
            "diff_index": list(diff_index(result)),
            "current": current,
        }
        self._write(json.dumps(data, indent=2, ensure_ascii=False))


FormatterFactory.register("html", HTMLFormatter)
FormatterFactory.register("html-side-by-side", SideBySideHTMLFormatter)
FormatterFactory.register("json", JSONFormatter)
