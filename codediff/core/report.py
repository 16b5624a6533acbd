# codediff/core/report.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Sequence

from codediff.core.diff_engine import DiffOperation
from codediff.core.diff_stats import compute_stats
from codediff.core.doc_nodes import Node, el, to_html
from codediff.core.renderers import (
    DisplayOptions, render_split_panes, render_summary, render_unified_view,
)
from codediff.utils.logger import logger

REPORT_CSS = """
body { font-family: sans-serif; margin: 0; padding: 20px; background: #ffffff; color: #1f2937; }
.container { max-width: 1200px; margin: 0 auto; }
h1 { margin-top: 0; color: #4f46e5; }
h3 { margin: 0; padding: 8px 12px; background: #f9fafb; border-bottom: 1px solid #e5e7eb; }
.split-view { display: flex; }
.split-view .panel { width: 50%; overflow: auto; }
.split-view .panel + .panel { border-left: 1px solid #e5e7eb; }
.diff-table { border-collapse: collapse; width: 100%; font-family: Consolas, "Fira Code", ui-monospace, monospace; font-size: 13px; }
.diff-table td { padding: 0 8px; white-space: pre; vertical-align: top; }
.diff-table td.line-number { width: 1%; text-align: right; color: #6e7781; user-select: none; }
tr.added { background: #e6ffec; }
tr.removed { background: #ffebe9; }
tr.spacer { background: #f6f8fa; }
tr.collapsed td { color: #6e7781; font-style: italic; text-align: center; background: #f1f5ff; }
.diff-highlight-added { background: #abf2bc; }
.diff-highlight-removed { background: #ffc0c0; }
.diff-summary { margin-bottom: 16px; padding: 12px; border: 1px solid #e5e7eb; border-radius: 6px; }
.summary-header { font-weight: 600; margin-bottom: 6px; }
.summary-label { font-weight: 600; margin-right: 4px; }
.summary-value.added { color: #1a7f37; }
.summary-value.removed { color: #cf222e; }
"""


def report_filename(title: str) -> str:
    slug = re.sub(r"\s+", "-", title.strip()) or "untitled"
    return f"code-diff-{slug}.html"


def _view_node(operations: Sequence[DiffOperation], display: DisplayOptions) -> Node:
    if display.split_view:
        left, right = render_split_panes(operations, display.show_line_numbers)
        return el("div", "split-view", children=[
            el("div", "panel", children=[el("h3", text="Original"), left]),
            el("div", "panel", children=[el("h3", text="Modified"), right]),
        ])
    table = render_unified_view(operations, display.show_line_numbers, display.context_lines)
    return el("div", "unified-view", children=[el("h3", text="Unified Diff"), table])


def build_report(
    operations: Sequence[DiffOperation],
    title: str = "Untitled",
    display: Optional[DisplayOptions] = None,
) -> str:
    """Standalone HTML document: heading, summary and the chosen view."""
    display = display or DisplayOptions()
    stats = compute_stats(operations)
    body = el("div", "container", children=[
        el("h1", text=f"Code Difference - {title}"),
        render_summary(stats),
        el("div", "diff-container", children=[_view_node(operations, display)]),
    ])
    head_title = to_html(el("title", text=f"Code Diff - {title}"))
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="UTF-8">\n'
        f"{head_title}\n"
        f"<style>{REPORT_CSS}</style>\n"
        "</head>\n<body>\n"
        f"{to_html(body)}\n"
        "</body>\n</html>\n"
    )


def export_report(
    dest_path: str,
    operations: Sequence[DiffOperation],
    title: str = "Untitled",
    display: Optional[DisplayOptions] = None,
) -> str:
    dest = Path(dest_path)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(build_report(operations, title, display), encoding="utf-8")
    except OSError as e:
        logger.error("Failed to export report to %s: %s", dest, e, exc_info=True)
        raise
    logger.info("Report exported to %s", dest)
    return str(dest.resolve())
