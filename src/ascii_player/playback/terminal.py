"""
Terminal Escape Sequences
=========================

VT100 / ANSI sequences used by playback and the run summary.
"""

CURSOR_HOME = "\033[H"
CLEAR_SCREEN = "\033[2J"
RESET_ATTRIBUTES = "\033[0m"


def frame_prefix(clear_screen: bool) -> str:
    """Sequence written before each frame."""
    if clear_screen:
        return CURSOR_HOME + CLEAR_SCREEN
    return CURSOR_HOME
