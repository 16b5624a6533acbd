# codediff/utils/prefs.py

import json
from pathlib import Path
from platformdirs import user_config_dir

from codediff.config import PREFS_FILENAME, SHOW_ALL
from codediff.core.diff_engine import ComparisonOptions
from codediff.core.renderers import DisplayOptions
from codediff.utils.logger import APP_NAME, APP_AUTHOR, logger

def _prefs_path() -> Path:
    cfg_dir = Path(user_config_dir(appname=APP_NAME, appauthor=APP_AUTHOR))
    cfg_dir.mkdir(parents=True, exist_ok=True)
    return cfg_dir / PREFS_FILENAME

def load_prefs() -> dict:
    p = _prefs_path()
    if p.exists():
        try:
            return json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable prefs file %s", p)
            return {}
    return {}

def save_prefs(data: dict) -> None:
    p = _prefs_path()
    try:
        p.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as e:
        logger.error("Failed to save prefs to %s: %s", p, e)

def _context_from_pref(value):
    if value is None or value == "all":
        return SHOW_ALL
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return DisplayOptions().context_lines

def load_comparison_options() -> ComparisonOptions:
    opts = load_prefs().get("diff_options", {})
    return ComparisonOptions(
        ignore_whitespace=bool(opts.get("ignore_whitespace", False)),
        ignore_case=bool(opts.get("ignore_case", False)),
    )

def load_display_options() -> DisplayOptions:
    opts = load_prefs().get("diff_options", {})
    defaults = DisplayOptions()
    return DisplayOptions(
        show_line_numbers=bool(opts.get("show_line_numbers", defaults.show_line_numbers)),
        context_lines=_context_from_pref(opts.get("context_lines", defaults.context_lines)),
        split_view=bool(opts.get("split_view", defaults.split_view)),
    )

def save_diff_options(comparison: ComparisonOptions, display: DisplayOptions) -> None:
    prefs = load_prefs()
    prefs["diff_options"] = {
        "ignore_whitespace": comparison.ignore_whitespace,
        "ignore_case": comparison.ignore_case,
        "show_line_numbers": display.show_line_numbers,
        "context_lines": "all" if display.context_lines is SHOW_ALL else display.context_lines,
        "split_view": display.split_view,
    }
    save_prefs(prefs)
