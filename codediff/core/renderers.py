# codediff/core/renderers.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from codediff.config import (
    CLS_ADDED, CLS_CODE, CLS_COLLAPSED, CLS_LINE_NUMBER, CLS_REMOVED,
    CLS_SPACER, CLS_TABLE, CLS_UNCHANGED, DEFAULT_CONTEXT_LINES,
    DEFAULT_SHOW_LINE_NUMBERS, DEFAULT_SPLIT_VIEW, SHOW_ALL,
)
from codediff.core.diff_engine import DiffOperation, Delete, Equal, Insert
from codediff.core.diff_stats import DiffStats
from codediff.core.doc_nodes import Node, el


class Side(str, Enum):
    ORIGINAL = "original"
    MODIFIED = "modified"


@dataclass(frozen=True)
class DisplayOptions:
    show_line_numbers: bool = DEFAULT_SHOW_LINE_NUMBERS
    context_lines: Optional[int] = DEFAULT_CONTEXT_LINES    # SHOW_ALL (None) = never collapse
    split_view: bool = DEFAULT_SPLIT_VIEW


@dataclass(frozen=True)
class Collapsed:
    """Placeholder for a run of elided unchanged lines."""
    count: int


def _number_cell(n: Optional[int]) -> Node:
    return el("td", CLS_LINE_NUMBER, text="" if n is None else str(n))


# ---------- split view ----------

def render_split_view(
    operations: Sequence[DiffOperation],
    side: Union[Side, str],
    show_line_numbers: bool = True,
) -> Node:
    """
    One pane of the side-by-side view.

    Every operation yields exactly one row, so the original and modified
    panes line up row for row; operations belonging to the other side
    become blank spacer rows without a line number.
    """
    side = Side(side)
    table = el("table", CLS_TABLE)
    for op in operations:
        if side is Side.ORIGINAL:
            if isinstance(op, Equal):
                cls, num, content = CLS_UNCHANGED, op.original_line_number, op.original_line
            elif isinstance(op, Delete):
                cls, num, content = CLS_REMOVED, op.original_line_number, op.original_line
            else:
                cls, num, content = CLS_SPACER, None, None
        else:
            if isinstance(op, Equal):
                cls, num, content = CLS_UNCHANGED, op.modified_line_number, op.modified_line
            elif isinstance(op, Insert):
                cls, num, content = CLS_ADDED, op.modified_line_number, op.modified_line
            else:
                cls, num, content = CLS_SPACER, None, None

        tr = table.add(el("tr", cls))
        if show_line_numbers:
            tr.add(_number_cell(num))
        code = tr.add(el("td", CLS_CODE))
        if content is None:
            continue
        if cls == CLS_UNCHANGED:
            code.text = content
        else:
            code.add(el("span", f"diff-highlight-{cls}", text=content))
    return table


def render_split_panes(
    operations: Sequence[DiffOperation],
    show_line_numbers: bool = True,
) -> Tuple[Node, Node]:
    return (
        render_split_view(operations, Side.ORIGINAL, show_line_numbers),
        render_split_view(operations, Side.MODIFIED, show_line_numbers),
    )


# ---------- unified view ----------

def collapse_context(
    operations: Sequence[DiffOperation],
    context_lines: Optional[int],
) -> List[Union[DiffOperation, Collapsed]]:
    """
    Fold long runs of unchanged rows into Collapsed markers.

    A run of consecutive Equal operations is left whole unless it is longer
    than ``2 * context_lines``. A longer run keeps `context_lines` rows next
    to each neighbouring change and its middle becomes one marker. Runs at
    the start or end of the list border a change on their inner side only,
    so context is kept there alone; a list with no change at all has nothing
    to anchor context and folds completely. The rows between two nearby
    changes form one run, so no row appears twice.
    """
    if context_lines is SHOW_ALL:
        return list(operations)
    ctx = max(0, int(context_lines))

    out: List[Union[DiffOperation, Collapsed]] = []
    n = len(operations)
    i = 0
    while i < n:
        if not isinstance(operations[i], Equal):
            out.append(operations[i])
            i += 1
            continue
        j = i
        while j < n and isinstance(operations[j], Equal):
            j += 1
        run = list(operations[i:j])
        if len(run) <= 2 * ctx:
            out.extend(run)
        else:
            head = ctx if i > 0 else 0
            tail = ctx if j < n else 0
            out.extend(run[:head])
            out.append(Collapsed(len(run) - head - tail))
            out.extend(run[len(run) - tail:])
        i = j
    return out


def collapsed_label(count: int) -> str:
    noun = "line" if count == 1 else "lines"
    return f"⋯ {count} unchanged {noun} ⋯"


def render_unified_view(
    operations: Sequence[DiffOperation],
    show_line_numbers: bool = True,
    context_lines: Optional[int] = SHOW_ALL,
) -> Node:
    table = el("table", CLS_TABLE)
    for item in collapse_context(operations, context_lines):
        if isinstance(item, Collapsed):
            cls, left_no, right_no, content = CLS_COLLAPSED, None, None, collapsed_label(item.count)
        elif isinstance(item, Delete):
            cls, left_no, right_no = CLS_REMOVED, item.original_line_number, None
            content = "- " + item.original_line
        elif isinstance(item, Insert):
            cls, left_no, right_no = CLS_ADDED, None, item.modified_line_number
            content = "+ " + item.modified_line
        else:
            cls, left_no, right_no = CLS_UNCHANGED, item.original_line_number, item.modified_line_number
            content = "  " + item.original_line

        tr = table.add(el("tr", cls))
        if show_line_numbers:
            tr.add(_number_cell(left_no))
            tr.add(_number_cell(right_no))
        tr.add(el("td", CLS_CODE, text=content))
    return table


# ---------- summary ----------

def summary_text(stats: DiffStats) -> str:
    if not stats.added_lines and not stats.removed_lines:
        return f"No differences ({stats.unchanged_lines} unchanged)"
    return f"+{stats.added_lines} added, -{stats.removed_lines} removed, {stats.unchanged_lines} unchanged"


def _direction(delta: int) -> str:
    return "added" if delta >= 0 else "removed"


def render_summary(stats: DiffStats) -> Node:
    def item(label: str, *values: Node) -> Node:
        row = el("div", "summary-item")
        row.add(el("span", "summary-label", text=f"{label}:"))
        for v in values:
            row.add(v)
        return row

    chars_dir = _direction(stats.chars_diff)
    words_dir = _direction(stats.words_diff)
    content = el("div", "summary-content", children=[
        item("Lines", el("span", "summary-value",
                         text=f"{stats.total_lines} total, {stats.unchanged_lines} unchanged")),
        item("Changes",
             el("span", "summary-value", CLS_ADDED, text=f"+{stats.added_lines} added"),
             el("span", "summary-value", CLS_REMOVED, text=f", -{stats.removed_lines} removed")),
        item("Characters", el("span", "summary-value", chars_dir,
                              text=f"{abs(stats.chars_diff)} {chars_dir}")),
        item("Words", el("span", "summary-value", words_dir,
                         text=f"{abs(stats.words_diff)} {words_dir}")),
    ])
    return el("div", "diff-summary", children=[
        el("div", "summary-header", text="Diff Summary"),
        content,
    ])
