from __future__ import annotations

import os
import sys
import argparse
from typing import List, Optional, Tuple

from codediff.config import READ_MAX_BYTES, SHOW_ALL, TEXT_COLUMN_WIDTH
from codediff.core.diff_engine import ComparisonOptions, compute_diff
from codediff.core.diff_stats import compute_stats
from codediff.core.doc_nodes import to_text, to_text_columns
from codediff.core.renderers import (
    DisplayOptions, render_split_panes, render_unified_view, summary_text,
)
from codediff.core.report import export_report, report_filename
from codediff.core.samples import SAMPLES, get_sample
from codediff.utils.encoding_detector import read_text_file
from codediff.utils.logger import logger
from codediff.utils.prefs import load_comparison_options, load_display_options, save_diff_options


def _context_arg(value: str) -> Optional[int]:
    if value.strip().lower() == "all":
        return SHOW_ALL
    try:
        return max(0, int(value))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number or 'all', got {value!r}")


def _read_input(path: str) -> str:
    if not os.path.isfile(path):
        raise OSError(f"File does not exist: {path}")
    size = os.path.getsize(path)
    if size > READ_MAX_BYTES:
        raise OSError(f"File too large to diff ({size} bytes): {path}")
    return read_text_file(path)


def _load_texts(args: argparse.Namespace) -> Tuple[str, str, str]:
    """(original, modified, title) from --sample or the two file arguments."""
    if args.sample:
        original, modified = get_sample(args.sample)
        return original, modified, args.title or f"{args.sample} example"
    if not args.original or not args.modified:
        raise OSError("Two files are required unless --sample is given.")
    title = args.title or f"{os.path.basename(args.original)} vs {os.path.basename(args.modified)}"
    return _read_input(args.original), _read_input(args.modified), title


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="codediff", description="Line-level diff of two text files")
    p.add_argument("original", nargs="?", help="Original file")
    p.add_argument("modified", nargs="?", help="Modified file")
    p.add_argument("--sample", choices=sorted(SAMPLES), help="Diff a built-in example pair instead of files")
    p.add_argument("--ignore-whitespace", "-w", action="store_true", default=None, help="Ignore leading/trailing and repeated whitespace")
    p.add_argument("--ignore-case", "-i", action="store_true", default=None, help="Compare lines case-insensitively")
    p.add_argument("--unified", "-u", action="store_true", default=None, help="Unified view instead of side-by-side")
    p.add_argument("--context", "-c", type=_context_arg, default=argparse.SUPPRESS, help="Unified context lines, or 'all' (default: saved preference)")
    p.add_argument("--no-line-numbers", action="store_true", default=None, help="Hide line numbers")
    p.add_argument("--html", metavar="PATH", help="Write an HTML report; a directory gets a generated file name")
    p.add_argument("--title", help="Report title")
    p.add_argument("--stats", action="store_true", help="Print the summary line to stderr")
    p.add_argument("--save-defaults", action="store_true", help="Remember the given options for later runs")
    return p


def _resolve_options(args: argparse.Namespace) -> Tuple[ComparisonOptions, DisplayOptions]:
    saved_cmp = load_comparison_options()
    saved_disp = load_display_options()
    comparison = ComparisonOptions(
        ignore_whitespace=saved_cmp.ignore_whitespace if args.ignore_whitespace is None else True,
        ignore_case=saved_cmp.ignore_case if args.ignore_case is None else True,
    )
    display = DisplayOptions(
        show_line_numbers=saved_disp.show_line_numbers if args.no_line_numbers is None else False,
        context_lines=getattr(args, "context", saved_disp.context_lines),
        split_view=saved_disp.split_view if args.unified is None else False,
    )
    return comparison, display


def main(argv: List[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.sample and (args.original or args.modified):
        p.error("--sample cannot be combined with file arguments")

    comparison, display = _resolve_options(args)
    if args.save_defaults:
        save_diff_options(comparison, display)

    try:
        original, modified, title = _load_texts(args)
    except (OSError, UnicodeError) as e:
        logger.error("Failed to read inputs: %s", e)
        print(str(e), file=sys.stderr)
        return 2

    ops = compute_diff(original, modified, comparison)
    stats = compute_stats(ops)

    if args.html:
        dest = args.html
        if os.path.isdir(dest):
            dest = os.path.join(dest, report_filename(title))
        try:
            print(export_report(dest, ops, title, display))
        except OSError as e:
            print(f"Failed to write report: {e}", file=sys.stderr)
            return 2
    elif display.split_view:
        left, right = render_split_panes(ops, display.show_line_numbers)
        print(to_text_columns(left, right, TEXT_COLUMN_WIDTH))
    else:
        print(to_text(render_unified_view(ops, display.show_line_numbers, display.context_lines)))

    if args.stats:
        print(summary_text(stats), file=sys.stderr)

    return 1 if stats.changed_lines else 0


if __name__ == "__main__":
    raise SystemExit(main())
