import io
import json
import unittest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from linediff.algorithms import (
    DiffKind, compute_diff, make_equal, make_add, make_delete, make_change
)
from linediff.formatters import (
    FormatterConfig, FormatterFactory, ColorScheme, OutputWriter, OutputTarget,
    ExportFormatter, UnifiedFormatter, HunkGenerator, SideBySideFormatter, ColumnConfig,
    TextTruncator, LineNumberFormatter, GutterFormatter, build_rows,
    HTMLFormatter, SideBySideHTMLFormatter, JSONFormatter,
    export_line, format_export, format_diff, get_available_formatters
)


PLAIN = FormatterConfig(use_color=False)
CHANGED_MIDDLE = compute_diff("a\nb\nc", "a\nX\nc")


class TestFormatterConfig(unittest.TestCase):
    def test_config(self):
        c = FormatterConfig()
        self.assertEqual(c.context_lines, 3)
        self.assertTrue(c.use_color)
        self.assertEqual(c.with_context_lines(7).context_lines, 7)
        self.assertEqual(c.with_width(80).width, 80)
        self.assertFalse(c.with_color(False).use_color)
        self.assertTrue(c.use_color)


class TestColorSchemeAndWriter(unittest.TestCase):
    def test_colors_writer(self):
        s = ColorScheme()
        self.assertEqual(s.for_kind(DiffKind.CHANGE), '\033[33m')
        self.assertEqual(s.for_kind(DiffKind.EQUAL), '')
        self.assertEqual(ColorScheme.no_color().for_kind(DiffKind.ADD), '')
        w = OutputWriter(OutputTarget.STRING)
        w.write("a")
        w.writeln("b")
        self.assertEqual(w.get_output(), "ab\n")


class TestExport(unittest.TestCase):
    def test_prefix_per_kind(self):
        result = (make_equal('a'), make_add('b'), make_delete('c'), make_change('d', 'e'))
        self.assertEqual(format_export(result), "  a\n+ b\n- c\n~ d => e")
        self.assertEqual(export_line(make_equal('')), "  ")

    def test_empty_result(self):
        self.assertEqual(format_export(()), "")

    def test_formatter_matches_function(self):
        self.assertEqual(ExportFormatter(PLAIN).format(CHANGED_MIDDLE), format_export(CHANGED_MIDDLE))
        self.assertEqual(format_export(CHANGED_MIDDLE), "  a\n~ b => X\n  c")

    def test_colored_export(self):
        out = ExportFormatter(FormatterConfig(use_color=True)).format(CHANGED_MIDDLE)
        self.assertIn("\033[33m~ b => X\033[0m", out)


class TestUnified(unittest.TestCase):
    def test_change_renders_as_minus_plus(self):
        out = UnifiedFormatter(PLAIN).format(CHANGED_MIDDLE, "l.txt", "r.txt")
        self.assertEqual(out, "--- l.txt\n+++ r.txt\n@@ -1,3 +1,3 @@\n a\n-b\n+X\n c\n")

    def test_plain_output_marks_current_hunk(self):
        out = UnifiedFormatter(PLAIN).format(CHANGED_MIDDLE, "l.txt", "r.txt", current=1)
        self.assertIn("@@ -1,3 +1,3 @@ [current]\n", out)
        self.assertNotIn("[current]", UnifiedFormatter(PLAIN).format(CHANGED_MIDDLE))

    def test_colored_output_reverses_current_entry(self):
        out = UnifiedFormatter(FormatterConfig()).format(CHANGED_MIDDLE, current=1)
        self.assertIn("\033[7m\033[31m-b", out)
        self.assertNotIn("[current]", out)

    def test_identical_prints_nothing(self):
        self.assertEqual(UnifiedFormatter(PLAIN).format(compute_diff("a", "a")), "")

    def test_hunk_offsets(self):
        lines = [f"l{i}" for i in range(20)]
        changed = lines[:10] + ["new"] + lines[10:]
        hunks = HunkGenerator(2).generate(compute_diff("\n".join(lines), "\n".join(changed)))
        self.assertEqual(len(hunks), 1)
        self.assertEqual(hunks[0].header(), "@@ -9,4 +9,5 @@")
        self.assertTrue(hunks[0].has_changes())


class TestSideBySide(unittest.TestCase):
    def test_parts(self):
        self.assertGreater(ColumnConfig(total_width=80).content_width, 0)
        self.assertEqual(len(TextTruncator(10).truncate("very long string here")), 10)
        self.assertEqual(TextTruncator(5).truncate_and_pad("ab"), "ab   ")
        self.assertEqual(LineNumberFormatter(width=4).format(1), "   1")
        self.assertEqual(LineNumberFormatter(width=4).format(None), "    ")
        self.assertEqual(GutterFormatter(ColorScheme.no_color()).format(DiffKind.CHANGE), " ~ ")

    def test_rows(self):
        rows = build_rows((make_delete('x'), make_add('y'), make_change('p', 'q')))
        self.assertEqual([(r.left_num, r.right_num) for r in rows], [(1, None), (None, 1), (2, 2)])
        self.assertEqual(rows[1].left_content, "")
        self.assertEqual(rows[2].right_content, "q")

    def test_current_row_marked(self):
        out = SideBySideFormatter(PLAIN.with_width(80)).format(CHANGED_MIDDLE, "f1", "f2", current=1)
        lines = out.splitlines()
        self.assertIn("f1", lines[1])
        self.assertTrue(lines[3].startswith(" "))
        self.assertTrue(lines[4].startswith(">"))
        self.assertIn(" ~ ", lines[4])
        self.assertIn(" | ", lines[3])

    def test_hide_line_numbers(self):
        plain = SideBySideFormatter(PLAIN.with_width(40).with_line_numbers(False))
        lines = plain.format(CHANGED_MIDDLE, "f1", "f2").splitlines()
        self.assertTrue(lines[3].startswith(" a "))
        self.assertNotIn("1", lines[3])
        numbered = SideBySideFormatter(PLAIN.with_width(40)).format(CHANGED_MIDDLE).splitlines()
        self.assertTrue(numbered[3].startswith("    1 a"))


class TestHTML(unittest.TestCase):
    def test_html_rows(self):
        out = HTMLFormatter(PLAIN).format(CHANGED_MIDDLE, "a<1>", "b", current=1)
        self.assertIn("<!DOCTYPE html>", out)
        self.assertIn('<tr class="change current" id="entry-1">', out)
        self.assertIn('<tr class="equal" id="entry-0">', out)
        self.assertIn("b &rArr; X", out)
        self.assertIn("a&lt;1&gt;", out)
        self.assertIn("changed 1", out)

    def test_html_hide_line_numbers(self):
        config = PLAIN.with_line_numbers(False)
        for formatter in (HTMLFormatter(config), SideBySideHTMLFormatter(config)):
            out = formatter.format(CHANGED_MIDDLE)
            self.assertNotIn('<td class="line-num">', out)
        self.assertIn('<td class="line-num">2</td>', HTMLFormatter(PLAIN).format(CHANGED_MIDDLE))

    def test_side_by_side_html(self):
        out = SideBySideHTMLFormatter(PLAIN).format((make_add('<x>'),), "a", "b")
        self.assertIn('class="add"', out)
        self.assertIn("&lt;x&gt;", out)


class TestJSON(unittest.TestCase):
    def test_json_payload(self):
        data = json.loads(JSONFormatter(PLAIN).format(CHANGED_MIDDLE, "f1", "f2", current=1))
        self.assertEqual(data["left"], "f1")
        self.assertEqual(data["stats"], {"add": 0, "delete": 0, "change": 1})
        self.assertEqual(data["diff_index"], [1])
        self.assertEqual(data["current"], 1)
        self.assertEqual(data["entries"][1], {"kind": "change", "left_line": 2, "text_a": "b",
                                              "right_line": 2, "text_b": "X"})
        self.assertAlmostEqual(data["similarity"], 0.6667)

    def test_add_entry_has_no_left_side(self):
        data = json.loads(JSONFormatter(PLAIN).format((make_add('n'),)))
        self.assertEqual(data["entries"], [{"kind": "add", "right_line": 1, "text_b": "n"}])


class TestFactory(unittest.TestCase):
    def test_registered(self):
        for name in ["export", "unified", "side-by-side", "html", "html-side-by-side", "json"]:
            self.assertIn(name, get_available_formatters())
        self.assertIsInstance(FormatterFactory.create("unified"), UnifiedFormatter)
        with self.assertRaises(ValueError):
            FormatterFactory.create("unknown")

    def test_all_formatters_handle_empty_and_unicode(self):
        result = compute_diff("привіт\nx", "привіт\ny")
        for name in FormatterFactory.available():
            self.assertIsInstance(format_diff((), formatter_name=name, config=PLAIN), str)
            self.assertIn("привіт", format_diff(result, formatter_name=name, config=PLAIN))

    def test_write_to_stream(self):
        stream = io.StringIO()
        self.assertEqual(ExportFormatter(PLAIN).format(CHANGED_MIDDLE, output=stream), "")
        self.assertEqual(stream.getvalue(), "  a\n~ b => X\n  c")


if __name__ == '__main__':
    unittest.main(verbosity=2)
