from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication
from qfluentwidgets import (
    FluentWindow, NavigationItemPosition, FluentIcon, setTheme, Theme
)

from codediff.ui_qt.pages.compare_page import ComparePage
from codediff.ui_qt.pages.settings_page import SettingsPage
from codediff.utils.prefs import load_prefs, save_prefs
from codediff.config import WINDOW_SIZE, WINDOW_TITLE

log = logging.getLogger("app")

THEMES = {"System": Theme.AUTO, "Light": Theme.LIGHT, "Dark": Theme.DARK}

class MainFluentWindow(FluentWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        prefs = load_prefs()
        theme_pref = prefs.get("theme_mode", "System")
        log.info("Launching MainFluentWindow (theme_pref=%s)", theme_pref)

        self.compare_page = ComparePage(self)
        self.settings_page = SettingsPage(self)

        self.addSubInterface(self.compare_page,  FluentIcon.CODE,    "Compare",  NavigationItemPosition.TOP)
        self.addSubInterface(self.settings_page, FluentIcon.SETTING, "Settings", NavigationItemPosition.BOTTOM)

        self.update_theme(theme_pref)
        self._restore_window_state()

    def update_theme(self, name: str):
        log.info("update_theme(%s)", name)
        setTheme(THEMES.get(name, Theme.AUTO))
        # diff panes derive their colors from the palette
        self.compare_page.diff.refresh()

    def _restore_window_state(self):
        prefs = load_prefs()
        geom_hex = prefs.get("window_geometry_hex")
        maximized = bool(prefs.get("window_maximized", False))
        if geom_hex:
            try:
                self.restoreGeometry(bytes.fromhex(geom_hex))
            except ValueError:
                log.warning("Ignoring malformed window geometry in prefs")
        if maximized:
            self.showMaximized()

    def _save_window_state(self):
        prefs = load_prefs()
        prefs["window_geometry_hex"] = bytes(self.saveGeometry()).hex()
        prefs["window_maximized"] = self.isMaximized()
        save_prefs(prefs)

    def closeEvent(self, event):
        self._save_window_state()
        super().closeEvent(event)

def launch_qt() -> int:
    app = QApplication(sys.argv)
    win = MainFluentWindow()
    win.show()
    return app.exec()
