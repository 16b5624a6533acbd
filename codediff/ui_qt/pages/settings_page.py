from __future__ import annotations
import logging
from typing import TYPE_CHECKING
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel
from qfluentwidgets import ComboBox, PushButton, InfoBar, InfoBarPosition
from codediff.utils.prefs import load_prefs, save_prefs

if TYPE_CHECKING:
    from codediff.ui_qt.app_window import MainFluentWindow

log = logging.getLogger("settings")

class SettingsPage(QWidget):
    def __init__(self, appwin: "MainFluentWindow"):
        super().__init__(parent=appwin)
        self.setObjectName("SettingsPage")
        self.appwin = appwin

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Settings")
        title.setStyleSheet("font-size:20px; font-weight:600;")
        root.addWidget(title)

        theme_row = QHBoxLayout()
        theme_row.addWidget(QLabel("Theme:"))
        self.theme_combo = ComboBox(self)
        self.theme_combo.addItems(["System", "Light", "Dark"])
        theme_row.addWidget(self.theme_combo)
        theme_row.addStretch(1)
        root.addLayout(theme_row)

        reset_row = QHBoxLayout()
        reset_btn = PushButton("Reset diff options")
        reset_row.addWidget(reset_btn)
        reset_row.addStretch(1)
        root.addLayout(reset_row)

        root.addStretch(1)

        theme_pref = load_prefs().get("theme_mode", "System")
        if theme_pref not in ("System", "Light", "Dark"):
            theme_pref = "System"
        self.theme_combo.setCurrentText(theme_pref)

        self.theme_combo.currentTextChanged.connect(self._on_theme_change)
        reset_btn.clicked.connect(self._reset_diff_options)

    def _on_theme_change(self, name: str):
        log.info("SettingsPage: theme changed to '%s'", name)
        self.appwin.update_theme(name)
        prefs = load_prefs()
        prefs["theme_mode"] = name
        save_prefs(prefs)

    def _reset_diff_options(self):
        prefs = load_prefs()
        prefs.pop("diff_options", None)
        save_prefs(prefs)
        log.info("SettingsPage: diff options reset to defaults")
        InfoBar.success("Reset", "Diff options restored to defaults on next launch.",
                        parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
