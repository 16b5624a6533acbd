# codediff/config.py

# Unified view context; None means "show all lines, never collapse"
SHOW_ALL = None
DEFAULT_CONTEXT_LINES = 3
DEFAULT_SHOW_LINE_NUMBERS = True
DEFAULT_SPLIT_VIEW = True

# Choices offered for the context selector (Qt page / CLI help)
CONTEXT_CHOICES = ["0", "1", "3", "5", "10", "all"]

# Row classes shared by the renderers, the report stylesheet and the Qt panes
CLS_TABLE = "diff-table"
CLS_UNCHANGED = "unchanged"
CLS_ADDED = "added"
CLS_REMOVED = "removed"
CLS_SPACER = "spacer"
CLS_COLLAPSED = "collapsed"
CLS_LINE_NUMBER = "line-number"
CLS_CODE = "code"

# Prefs file (per user, platformdirs config dir)
PREFS_FILENAME = "prefs.json"

# Input safeguard: refuse to diff files larger than this
READ_MAX_BYTES = 5 * 1024 * 1024          # 5 MB

# Terminal split view column width
TEXT_COLUMN_WIDTH = 60

# UI
WINDOW_SIZE = (1200, 800)
WINDOW_TITLE = "Code Diff Checker"
