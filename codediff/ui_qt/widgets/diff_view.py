# codediff/ui_qt/widgets/diff_view.py
from __future__ import annotations

from typing import List, Optional
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import (
    QWidget, QTextBrowser, QFrame, QStackedLayout, QVBoxLayout, QHBoxLayout, QLabel
)

from codediff.core.diff_engine import ComparisonOptions, DiffOperation, compute_diff
from codediff.core.diff_stats import DiffStats, compute_stats
from codediff.core.doc_nodes import to_html
from codediff.core.renderers import (
    DisplayOptions, render_split_panes, render_unified_view, summary_text,
)
from codediff.core.report import export_report
from codediff.core.scroll_sync import ScrollPane, ScrollSync

# Monospace stack
MONO = 'Consolas, "Cascadia Mono", "Fira Code", ui-monospace, monospace'


def _hex(c: QColor) -> str:
    return c.name()


def _theme_colors(pal: QPalette) -> dict:
    """Return a small palette that works in both dark and light themes."""
    # detect dark via window color lightness
    dark = pal.color(QPalette.Window).lightness() < 128

    if dark:
        add_bg   = QColor(23, 60, 35)
        del_bg   = QColor(78, 30, 30)
        spacer   = QColor(40, 40, 40)
        add_chip = QColor(46, 160, 67)
        del_chip = QColor(248, 81, 73)
        meta_fg  = QColor(120, 170, 255)
        num_fg   = QColor(140, 140, 140)
    else:
        add_bg   = QColor(230, 255, 236)
        del_bg   = QColor(255, 235, 233)
        spacer   = QColor(246, 248, 250)
        add_chip = QColor(171, 242, 188)
        del_chip = QColor(255, 192, 192)
        meta_fg  = QColor(9, 105, 218)
        num_fg   = QColor(110, 119, 129)

    return dict(
        dark=dark,
        add_bg=add_bg,
        del_bg=del_bg,
        spacer=spacer,
        add_chip=add_chip,
        del_chip=del_chip,
        meta_fg=meta_fg,
        num_fg=num_fg,
    )


def _pane_css(colors: dict) -> str:
    """CSS injected into each QTextBrowser; keyed on the renderer's row classes."""
    return (
        "<style>"
        "  table{border-collapse:collapse; width:100%;}"
        f"  td{{font-family:{MONO}; font-size:13px; white-space:pre; padding:0 6px;}}"
        f"  td.line-number{{color:{_hex(colors['num_fg'])}; text-align:right;}}"
        f"  tr.added{{background-color:{_hex(colors['add_bg'])};}}"
        f"  tr.removed{{background-color:{_hex(colors['del_bg'])};}}"
        f"  tr.spacer{{background-color:{_hex(colors['spacer'])};}}"
        f"  tr.collapsed{{color:{_hex(colors['meta_fg'])}; font-style:italic;}}"
        f"  .diff-highlight-added{{background-color:{_hex(colors['add_chip'])};}}"
        f"  .diff-highlight-removed{{background-color:{_hex(colors['del_chip'])};}}"
        "</style>"
    )


def _browser(parent: QWidget) -> QTextBrowser:
    w = QTextBrowser(parent)
    w.setFrameShape(QFrame.NoFrame)
    w.setOpenExternalLinks(False)
    w.setLineWrapMode(QTextBrowser.NoWrap)
    return w


class _QtScrollPane(ScrollPane):
    """ScrollPane bound to a QTextBrowser's vertical scrollbar, both ways."""
    def __init__(self, name: str, browser: QTextBrowser):
        super().__init__(name)
        self._sb = browser.verticalScrollBar()
        self._sb.valueChanged.connect(self.scroll_to)
        self.subscribe(self._apply)

    def _apply(self, value: int) -> None:
        if self._sb.value() != value:
            self._sb.setValue(value)


class DiffView(QWidget):
    """
    Diff viewer with two modes:
      - split   : original / modified panes, scroll-locked row for row
      - unified : one column with -/+ rows and collapsible context
    """
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._ops: List[DiffOperation] = []
        self._stats: DiffStats = DiffStats()
        self._display = DisplayOptions()

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.summary = QLabel("", self)
        self.summary.setTextInteractionFlags(Qt.TextSelectableByMouse)
        root.addWidget(self.summary)

        stack_host = QWidget(self)
        self._stack = QStackedLayout(stack_host)
        root.addWidget(stack_host, 1)

        # --- split panes
        split = QWidget(self)
        row = QHBoxLayout(split)
        row.setContentsMargins(0, 0, 0, 0)
        self.left = _browser(split)
        self.right = _browser(split)
        row.addWidget(self.left, 1)
        row.addWidget(self.right, 1)
        self._stack.addWidget(split)

        self._sync = ScrollSync(_QtScrollPane("original", self.left),
                                _QtScrollPane("modified", self.right))

        # --- unified
        self.unified = _browser(self)
        self._stack.addWidget(self.unified)

        self._stack.setCurrentIndex(0)

    # -- public API -------------------------------------------------------------
    @property
    def operations(self) -> List[DiffOperation]:
        return list(self._ops)

    @property
    def stats(self) -> DiffStats:
        return self._stats

    def set_display(self, display: DisplayOptions):
        self._display = display
        self._render_current()

    def set_texts(self, left_text: str, right_text: str, comparison: Optional[ComparisonOptions] = None):
        self._ops = compute_diff(left_text or "", right_text or "", comparison)
        self._stats = compute_stats(self._ops)
        self._render_current()

    def clear(self):
        self._ops = []
        self._stats = DiffStats()
        self._render_current()

    def refresh(self):
        self._render_current()

    def export_html(self, dest_path: str, title: str) -> str:
        return export_report(dest_path, self._ops, title, self._display)

    # -- internals --------------------------------------------------------------
    def _render_current(self):
        self.summary.setText(summary_text(self._stats) if self._ops else "")
        css = _pane_css(_theme_colors(self.palette()))
        d = self._display
        if d.split_view:
            lnode, rnode = render_split_panes(self._ops, d.show_line_numbers)
            self.left.setHtml(css + to_html(lnode))
            self.right.setHtml(css + to_html(rnode))
            self.right.verticalScrollBar().setValue(self.left.verticalScrollBar().value())
            self._stack.setCurrentIndex(0)
        else:
            node = render_unified_view(self._ops, d.show_line_numbers, d.context_lines)
            self.unified.setHtml(css + to_html(node))
            self._stack.setCurrentIndex(1)
