"""ANSI cursor control sequences."""

SAVE_CURSOR = "\033[s"
RESTORE_CURSOR = "\033[u"
CURSOR_HOME = "\033[0;0H"
