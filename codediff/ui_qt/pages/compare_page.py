# codediff/ui_qt/pages/compare_page.py
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFileDialog, QPlainTextEdit
)
from qfluentwidgets import (
    InfoBar, InfoBarPosition, PrimaryPushButton, PushButton, ComboBox, SwitchButton
)

from codediff.config import CONTEXT_CHOICES, SHOW_ALL
from codediff.core.diff_engine import ComparisonOptions
from codediff.core.renderers import DisplayOptions
from codediff.core.report import report_filename
from codediff.core.samples import SAMPLES, get_sample
from codediff.ui_qt.widgets.diff_view import DiffView
from codediff.utils.encoding_detector import read_text_file
from codediff.utils.prefs import load_comparison_options, load_display_options, save_diff_options

if TYPE_CHECKING:
    from codediff.ui_qt.app_window import MainFluentWindow

log = logging.getLogger("compare")


def _context_label(value) -> str:
    return "all" if value is SHOW_ALL else str(value)


class ComparePage(QWidget):
    """Compare: two editors, comparison/display options, split or unified view."""
    def __init__(self, appwin: "MainFluentWindow"):
        super().__init__(parent=appwin)
        self.setObjectName("ComparePage")
        self.appwin = appwin

        cmp_opts = load_comparison_options()
        disp_opts = load_display_options()

        # Options
        self.ignore_ws_chk = SwitchButton("Ignore whitespace", self)
        self.ignore_case_chk = SwitchButton("Ignore case", self)
        self.line_numbers_chk = SwitchButton("Line numbers", self)
        self.view_combo = ComboBox(self)      # Split / Unified
        self.context_combo = ComboBox(self)   # unified context lines
        self.sample_combo = ComboBox(self)

        self.left_editor = QPlainTextEdit(self)
        self.right_editor = QPlainTextEdit(self)

        self.diff = DiffView(self)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Code Diff Checker")
        title.setStyleSheet("font-size:20px; font-weight:600;")
        root.addWidget(title)

        # --- Editors
        editors = QHBoxLayout()
        self.left_editor.setPlaceholderText("Enter original code…")
        self.right_editor.setPlaceholderText("Enter modified code…")
        editors.addWidget(self.left_editor, 1)
        editors.addWidget(self.right_editor, 1)
        root.addLayout(editors, 1)

        # --- Editor actions
        ebtns = QHBoxLayout()
        open_left_btn = PushButton("Open original…")
        open_right_btn = PushButton("Open modified…")
        self.sample_combo.addItems(["Load example…"] + sorted(SAMPLES))
        ebtns.addWidget(open_left_btn)
        ebtns.addWidget(open_right_btn)
        ebtns.addWidget(self.sample_combo)
        ebtns.addStretch(1)
        swap_btn = PushButton("Swap Sides")
        clear_btn = PushButton("Clear")
        compare_btn = PrimaryPushButton("Compare")
        ebtns.addWidget(swap_btn)
        ebtns.addWidget(clear_btn)
        ebtns.addWidget(compare_btn)
        root.addLayout(ebtns)

        # --- Options row
        opts = QHBoxLayout()
        self.ignore_ws_chk.setChecked(cmp_opts.ignore_whitespace)
        self.ignore_case_chk.setChecked(cmp_opts.ignore_case)
        self.line_numbers_chk.setChecked(disp_opts.show_line_numbers)
        opts.addWidget(self.ignore_ws_chk)
        opts.addWidget(self.ignore_case_chk)
        opts.addWidget(self.line_numbers_chk)

        opts.addSpacing(20)
        opts.addWidget(QLabel("View:"))
        self.view_combo.addItems(["Split", "Unified"])
        self.view_combo.setCurrentText("Split" if disp_opts.split_view else "Unified")
        opts.addWidget(self.view_combo)

        opts.addWidget(QLabel("Context:"))
        self.context_combo.addItems(CONTEXT_CHOICES)
        label = _context_label(disp_opts.context_lines)
        if label not in CONTEXT_CHOICES:
            self.context_combo.addItem(label)
        self.context_combo.setCurrentText(label)
        opts.addWidget(self.context_combo)

        opts.addStretch(1)
        export_btn = PushButton("Export HTML")
        opts.addWidget(export_btn)
        root.addLayout(opts)

        # --- Diff area
        root.addWidget(self.diff, 2)

        # Events
        open_left_btn.clicked.connect(lambda: self._open_into(self.left_editor, "Choose original file"))
        open_right_btn.clicked.connect(lambda: self._open_into(self.right_editor, "Choose modified file"))
        self.sample_combo.currentTextChanged.connect(self._load_sample)
        swap_btn.clicked.connect(self._swap_sides)
        clear_btn.clicked.connect(self._clear)
        compare_btn.clicked.connect(self._compare)
        export_btn.clicked.connect(self._export_html)

        self.ignore_ws_chk.checkedChanged.connect(lambda _on: self._recompute())
        self.ignore_case_chk.checkedChanged.connect(lambda _on: self._recompute())
        self.line_numbers_chk.checkedChanged.connect(lambda _on: self._redisplay())
        self.view_combo.currentTextChanged.connect(lambda _t: self._redisplay())
        self.context_combo.currentTextChanged.connect(lambda _t: self._redisplay())

        self.diff.set_display(self._display_options())

    # ---------- Options

    def _comparison_options(self) -> ComparisonOptions:
        return ComparisonOptions(
            ignore_whitespace=self.ignore_ws_chk.isChecked(),
            ignore_case=self.ignore_case_chk.isChecked(),
        )

    def _display_options(self) -> DisplayOptions:
        ctx = self.context_combo.currentText()
        return DisplayOptions(
            show_line_numbers=self.line_numbers_chk.isChecked(),
            context_lines=SHOW_ALL if ctx == "all" else int(ctx),
            split_view=self.view_combo.currentText() == "Split",
        )

    def _persist_options(self):
        save_diff_options(self._comparison_options(), self._display_options())

    def _redisplay(self):
        self.diff.set_display(self._display_options())
        self._persist_options()

    def _recompute(self):
        self._persist_options()
        if self.diff.operations:
            self._compare(silent=True)

    # ---------- Inputs

    def _open_into(self, editor: QPlainTextEdit, caption: str):
        path, _ = QFileDialog.getOpenFileName(self, caption, os.path.expanduser("~"), "All files (*.*)")
        if not path:
            return
        try:
            editor.setPlainText(read_text_file(path))
        except (OSError, UnicodeError) as e:
            log.error("Read failed for %s: %s", path, e)
            InfoBar.error("Read failed", f"{path}\n{e}", parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)

    def _load_sample(self, name: str):
        if name not in SAMPLES:
            return
        original, modified = get_sample(name)
        self.left_editor.setPlainText(original)
        self.right_editor.setPlainText(modified)
        self._compare(silent=True)

    def _swap_sides(self):
        l = self.left_editor.toPlainText()
        r = self.right_editor.toPlainText()
        self.left_editor.setPlainText(r)
        self.right_editor.setPlainText(l)
        if self.diff.operations:
            self._compare(silent=True)
        InfoBar.info("Swapped", "Original and modified swapped.",
                     parent=self.appwin, position=InfoBarPosition.TOP_RIGHT, duration=1200)

    def _clear(self):
        self.left_editor.clear()
        self.right_editor.clear()
        self.diff.clear()

    # ---------- Compare / export

    def _compare(self, silent: bool = False):
        left = self.left_editor.toPlainText()
        right = self.right_editor.toPlainText()
        if not left.strip() or not right.strip():
            if not silent:
                InfoBar.warning("Nothing to compare", "Please enter both original and modified code.",
                                parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
            return
        self.diff.set_texts(left, right, self._comparison_options())
        st = self.diff.stats
        log.info("Diff generated: +%d added, -%d removed", st.added_lines, st.removed_lines)
        if not silent:
            InfoBar.success("Diff ready", f"+{st.added_lines} added, -{st.removed_lines} removed",
                            parent=self.appwin, position=InfoBarPosition.TOP_RIGHT, duration=1500)

    def _export_html(self):
        if not self.diff.operations:
            InfoBar.info("Nothing to export", "Run a comparison first.",
                         parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
            return
        title = "Diff"
        path, _ = QFileDialog.getSaveFileName(
            self, "Export diff as HTML",
            os.path.join(os.path.expanduser("~"), report_filename(title)),
            "HTML files (*.html)",
        )
        if not path:
            return
        try:
            out = self.diff.export_html(path, title)
        except OSError as e:
            InfoBar.error("Export failed", str(e), parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
            return
        InfoBar.success("Exported", out, parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
