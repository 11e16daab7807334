#!/usr/bin/env python3
import argparse
import logging
import sys
from datetime import datetime
from typing import Optional, List, TextIO

from . import __version__
from .algorithms import DiffIndex, compute_stats, diff_lines, has_changes, split_lines
from .config import DEFAULT_MAX_LINES, DiffLimits, default_history_path
from .formatters import ColorScheme, FormatterConfig, FormatterFactory, TextTruncator
from .fs import read_text
from .history import HistoryStore


class ColorPrinter:
    def __init__(self, use_color: bool = True, output: Optional[TextIO] = None):
        self.use_color = use_color
        self.output = output if output is not None else sys.stdout
        self.colors = ColorScheme() if use_color else ColorScheme.no_color()

    def print(self, text: str, end: str = '\n'):
        self.output.write(text + end)

    def print_header(self, text: str):
        self.print(f"{self.colors.bold}{text}{self.colors.reset}")

    def print_error(self, text: str):
        sys.stderr.write(f"{self.colors.red}Error: {text}{self.colors.reset}\n")

    def print_warning(self, text: str):
        sys.stderr.write(f"{self.colors.yellow}Warning: {text}{self.colors.reset}\n")

    def print_info(self, text: str):
        sys.stderr.write(f"{self.colors.cyan}{text}{self.colors.reset}\n")


def format_stats(stats) -> str:
    return f"added {stats.add}, deleted {stats.delete}, changed {stats.change}"


class CLIApplication:
    def __init__(self):
        self.parser = self._create_parser()
        self.printer: Optional[ColorPrinter] = None

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='linediff',
            description='Compare two texts line by line (LCS diff with change merging)',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog='''
Examples:
  %(prog)s old.txt new.txt
  %(prog)s -f export old.txt new.txt
  %(prog)s -f side-by-side --goto 2 old.txt new.txt
  %(prog)s --stats --save-history old.txt new.txt
  %(prog)s --history
            '''
        )
        parser.add_argument('left', nargs='?', help='Original (left) file')
        parser.add_argument('right', nargs='?', help='Modified (right) file')
        parser.add_argument(
            '-f', '--format',
            choices=FormatterFactory.available(),
            default='unified',
            help='Output format (default: unified)'
        )
        parser.add_argument(
            '-c', '--context',
            type=int,
            default=3,
            metavar='NUM',
            help='Number of context lines for unified output (default: 3)'
        )
        parser.add_argument(
            '-w', '--width',
            type=int,
            default=130,
            metavar='NUM',
            help='Output width for side-by-side (default: 130)'
        )
        parser.add_argument(
            '--goto',
            type=int,
            default=None,
            metavar='N',
            help='Highlight the difference N steps after the first one (wraps around)'
        )
        parser.add_argument(
            '--stats',
            action='store_true',
            help='Print added/deleted/changed counts'
        )
        parser.add_argument(
            '-q', '--quiet',
            action='store_true',
            help='Report only whether the inputs differ'
        )
        parser.add_argument(
            '--max-lines',
            type=int,
            default=DEFAULT_MAX_LINES,
            metavar='NUM',
            help=f'Refuse inputs longer than NUM lines (default: {DEFAULT_MAX_LINES})'
        )
        parser.add_argument(
            '--truncate',
            action='store_true',
            help='Cut oversize inputs to --max-lines instead of failing'
        )
        parser.add_argument(
            '--no-line-numbers',
            action='store_true',
            help='Hide line numbers in side-by-side and HTML output'
        )
        parser.add_argument(
            '--no-color',
            action='store_true',
            help='Disable colored output'
        )
        parser.add_argument(
            '-o', '--output',
            type=str,
            metavar='FILE',
            help='Write output to file'
        )
        parser.add_argument(
            '--save-history',
            action='store_true',
            help='Record this comparison in the history file'
        )
        parser.add_argument(
            '--history',
            action='store_true',
            help='List saved comparisons and exit'
        )
        parser.add_argument(
            '--clear-history',
            action='store_true',
            help='Delete all saved comparisons and exit'
        )
        parser.add_argument(
            '--history-file',
            type=str,
            metavar='PATH',
            default=None,
            help=f'History file (default: {default_history_path()})'
        )
        parser.add_argument(
            '--debug',
            action='store_true',
            help='Enable debug logging'
        )
        parser.add_argument(
            '-v', '--version',
            action='version',
            version=f'%(prog)s {__version__}'
        )
        return parser

    def run(self, argv: Optional[List[str]] = None) -> int:
        args = self.parser.parse_args(argv)
        logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                            format='%(levelname)s %(name)s: %(message)s')
        use_color = not args.no_color and sys.stdout.isatty()
        output_file = None
        self.printer = ColorPrinter(use_color=use_color and args.output is None)
        try:
            if args.output:
                output_file = open(args.output, 'w', encoding='utf-8')
                self.printer = ColorPrinter(use_color=False, output=output_file)
            result = self._execute(args)
        except KeyboardInterrupt:
            self.printer.print_error("Interrupted")
            result = 130
        except (OSError, ValueError) as e:
            self.printer.print_error(str(e))
            result = 2
        finally:
            if output_file is not None:
                output_file.close()
        return result

    def _execute(self, args) -> int:
        store = HistoryStore(args.history_file)
        if args.clear_history:
            store.clear()
            self.printer.print_info("History cleared")
            return 0
        if args.history:
            return self._list_history(store)
        if args.left is None or args.right is None:
            self.parser.error("the following arguments are required: left, right")
        return self._compare_files(args, store)

    def _compare_files(self, args, store: HistoryStore) -> int:
        text_a = read_text(args.left)
        text_b = read_text(args.right)
        limits = DiffLimits(max_lines=args.max_lines, truncate=args.truncate)
        lines_a, cut_a = limits.apply(split_lines(text_a), args.left)
        lines_b, cut_b = limits.apply(split_lines(text_b), args.right)
        for path, cut in ((args.left, cut_a), (args.right, cut_b)):
            if cut:
                self.printer.print_warning(f"{path} truncated to {limits.max_lines} lines")
        result = diff_lines(lines_a, lines_b)
        changed = has_changes(result)
        stats = compute_stats(result)
        if args.save_history:
            store.record(text_a, text_b, stats)
        if args.quiet:
            if changed:
                self.printer.print(f"Files {args.left} and {args.right} differ")
            return 1 if changed else 0
        index = DiffIndex.from_result(result)
        if args.goto is not None:
            index = index.advance(args.goto)
        config = FormatterConfig(context_lines=args.context, width=args.width,
                                 use_color=self.printer.use_color,
                                 show_line_numbers=not args.no_line_numbers)
        formatter = FormatterFactory.create(args.format, config)
        rendered = formatter.format(result, args.left, args.right, index.current)
        if rendered:
            self.printer.print(rendered.rstrip('\n'))
        if args.stats:
            self.printer.print_header(format_stats(stats))
        return 1 if changed else 0

    def _list_history(self, store: HistoryStore) -> int:
        items = store.load()
        if not items:
            self.printer.print("No saved comparisons.")
            return 0
        preview = TextTruncator(40, "…")
        for number, item in enumerate(items, 1):
            when = datetime.fromtimestamp(item.date / 1000).strftime('%Y-%m-%d %H:%M:%S')
            first_left = preview.truncate(split_lines(item.left)[0] if item.left else "")
            first_right = preview.truncate(split_lines(item.right)[0] if item.right else "")
            self.printer.print(f"{number:2}. {when}  {format_stats(item.stats)}  "
                               f"[{first_left!r} vs {first_right!r}]")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    app = CLIApplication()
    return app.run(argv)


if __name__ == '__main__':
    sys.exit(main())
