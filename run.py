import os
import sys
import logging
from datetime import datetime

from platformdirs import user_log_dir

from codediff.utils.logger import APP_NAME, APP_AUTHOR

# ---------- Logging ----------
LOG_DIR = user_log_dir(appname=APP_NAME, appauthor=APP_AUTHOR)
os.makedirs(LOG_DIR, exist_ok=True)
LOG_PATH = os.path.join(LOG_DIR, "ui.log")

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(LOG_PATH, encoding="utf-8")
    ],
    force=True,
)
logging.info("=== App start %s ===", datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
logging.info("Python %s", sys.version)

# ---------- Route Qt messages into logging ----------
from PySide6.QtCore import qInstallMessageHandler, QtMsgType

def _qt_msg_handler(mode, context, message):
    lg = logging.getLogger("qt")
    if mode == QtMsgType.QtDebugMsg:
        lg.debug(message)
    elif mode == QtMsgType.QtInfoMsg:
        lg.info(message)
    elif mode == QtMsgType.QtWarningMsg:
        lg.warning(message)
    elif mode == QtMsgType.QtCriticalMsg:
        lg.error(message)
    elif mode == QtMsgType.QtFatalMsg:
        lg.critical(message)

qInstallMessageHandler(_qt_msg_handler)

# ---------- Start app ----------
if __name__ == "__main__":
    try:
        from codediff.ui_qt.app_window import launch_qt
        rc = launch_qt()
        logging.info("App exited with code %s", rc)
        sys.exit(rc)
    except Exception as e:
        logging.exception("Fatal error running app: %s", e)
        raise
